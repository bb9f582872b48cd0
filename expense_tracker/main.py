import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException

from expense_tracker.core.config import Config, config as default_config
from expense_tracker.core.db import DatabaseSessionManager
from expense_tracker.core.error_handler import global_exception_handler
from expense_tracker.core.middleware.request_id_middleware import RequestIDMiddleware
from expense_tracker.modules.expenses.controller import router as expenses_router
from expense_tracker.modules.expenses.repository import ExpenseRepository
from expense_tracker.modules.expenses.state import ExpenseStateHolder
from expense_tracker.modules.expenses.store import ExpenseStore

logger = logging.getLogger(__name__)


def create_app(config: Optional[Config] = None) -> FastAPI:
    config = config or default_config

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # store -> repository -> state holder, passed by hand
        sessions = DatabaseSessionManager(
            config.db_url, {"echo": config.db_echo}, pooled=config.is_production
        )
        try:
            if config.auto_create_schema:
                await sessions.create_all()

            repository = ExpenseRepository(ExpenseStore(sessions))
            state = ExpenseStateHolder(repository, strict_amounts=config.strict_amounts)
            await state.ready()
            logger.info(f"Loaded {len(state.expenses)} expenses from {config.db_url}")

            app.state.expense_state = state
            yield
        finally:
            await sessions.close()

    app = FastAPI(
        title="Expense Tracker API",
        description="List expenses and add new ones",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Add global exception handler
    app.add_exception_handler(Exception, global_exception_handler)
    app.add_exception_handler(HTTPException, global_exception_handler)
    app.add_exception_handler(RequestValidationError, global_exception_handler)

    # Middlewares
    app.add_middleware(RequestIDMiddleware)

    # Routers
    app.include_router(expenses_router)

    @app.get("/health")
    async def health(request: Request) -> dict[str, str]:
        return {"status": "ok", "request_id": str(request.state.request_id)}

    return app


app = create_app()
