from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy import text

from member_api.db.session import shutdown
from member_api.dependencies import DB
from member_api.exceptions import DomainError
from member_api.logging import get_logger
from member_api.middleware import RequestIDMiddleware
from member_api.routers.member import router as member_router
from member_api.schemas.error import internal_error_response

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup runs before yield; on shutdown, pooled connections are closed."""
    logger.info("app_started")
    yield
    await shutdown()


app = FastAPI(title="Member API", lifespan=lifespan)
app.add_middleware(RequestIDMiddleware)
app.include_router(member_router)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> Response:
    """Answer with the error's status code and an empty body."""
    logger.warning("domain_error", code=exc.code.name, error=exc.message)
    return Response(status_code=exc.code.status_code)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback for exceptions raised outside RequestIDMiddleware."""
    logger.exception("unhandled_exception")
    return internal_error_response()


@app.get("/health")
async def health(db: DB) -> dict[str, str]:
    """200 only if the database answers ``SELECT 1``."""
    await db.execute(text("SELECT 1"))
    return {"status": "ok"}
