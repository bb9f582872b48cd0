import logging
import math
from typing import Optional

from expense_tracker.core.exceptions import InvalidAmountError

logger = logging.getLogger(__name__)


def parse_amount(amount_text: Optional[str], strict: bool = False) -> float:
    """
    Parse a user-typed amount.

    Malformed input (empty, non-numeric, non-ASCII digits, digit separators,
    nan/inf) becomes 0.0, or raises InvalidAmountError when ``strict`` is set.
    """
    try:
        cleaned = (amount_text or "").strip()
        if not cleaned.isascii():
            raise ValueError(f"only ASCII digits are accepted: {cleaned}")
        if "_" in cleaned:
            raise ValueError(f"digit separators are not accepted: {cleaned}")
        amount = float(cleaned)
        if not math.isfinite(amount):
            raise ValueError(f"non-finite amount: {cleaned}")
        return amount
    except ValueError:
        if strict:
            raise InvalidAmountError(amount_text)
        logger.warning(f"Unparsable amount {amount_text!r}, defaulting to 0.0")
        return 0.0
