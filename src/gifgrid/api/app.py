import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gifgrid.config import config
from gifgrid.errors import UserInputError

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure structured JSON logging (or plain text for dev)."""
    log_format = config.server.log_format
    root = logging.getLogger()
    root.setLevel(logging.INFO)
    # Remove existing handlers
    for h in root.handlers[:]:
        root.removeHandler(h)
    handler = logging.StreamHandler()
    if log_format == "json":
        import json as _json

        class JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                d = {
                    "timestamp": self.formatTime(record),
                    "level": record.levelname,
                    "logger": record.name,
                    "message": record.getMessage(),
                }
                if record.exc_info:
                    d["exception"] = self.formatException(record.exc_info)
                return _json.dumps(d)

        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)


_health_router = APIRouter(tags=["health"])


@_health_router.get("/health")
async def health():
    return {"status": "ok"}


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _configure_logging()
        if not config.giphy.api_key:
            logger.warning("Giphy API key is not configured (GIFGRID_GIPHY_API_KEY not set)")
        yield

    from gifgrid.models.errors import ErrorEnvelope

    app = FastAPI(
        title="gifgrid",
        version="1.0.0",
        description="Giphy search with a responsive image grid",
        lifespan=lifespan,
        responses={
            400: {"model": ErrorEnvelope},
            422: {"model": ErrorEnvelope},
            502: {"model": ErrorEnvelope},
            503: {"model": ErrorEnvelope},
        },
    )

    @app.exception_handler(UserInputError)
    async def user_input_exception_handler(request, exc):
        return JSONResponse(
            status_code=400,
            content={"error": {"code": "EMPTY_SEARCH_TERM", "message": str(exc)}},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request, exc):
        return JSONResponse(
            status_code=422,
            content={"error": {"code": "VALIDATION_ERROR", "message": str(exc)}},
        )

    from gifgrid.api.gifs import router as gifs_router

    app.include_router(_health_router)
    app.include_router(gifs_router)

    return app
