import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from offset_pagination.api.dependencies import build_paginator
from offset_pagination.api.v1.router import router as v1_router
from offset_pagination.core.config import Settings, settings
from offset_pagination.db.session import build_engine, build_session_factory, init_db
from offset_pagination.utils.exceptions import InvalidPaginationError

logger = logging.getLogger(__name__)


def create_app(config: Settings | None = None) -> FastAPI:
    config = config or settings
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    engine = build_engine(config.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        if config.DB_AUTO_CREATE:
            init_db(engine)
        try:
            yield
        finally:
            engine.dispose()

    app = FastAPI(title="Offset-pagination", lifespan=lifespan)
    app.state.session_factory = build_session_factory(engine)
    app.state.paginator = build_paginator(config)
    app.state.pagination_query_key = config.PAGINATION_QUERY_KEY
    app.include_router(v1_router)

    @app.exception_handler(InvalidPaginationError)
    async def invalid_pagination_handler(request: Request, exc: InvalidPaginationError) -> JSONResponse:
        logger.warning(f"Pagination rejected. path={request.url.path} reason={exc}")
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


app = create_app()
