from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from . import __version__
from .config import Settings, load_settings
from .errors import DecodeError, StoreError, ValidationError
from .repository import RecordStore, SqlRecordStore
from .routes.verify import router as verify_router
from .services.verification import VerificationService
from .utils.logging import logger


def create_app(settings: Settings | None = None, store: RecordStore | None = None) -> FastAPI:
    """
    Build the ASGI app. When no store is supplied the app owns a
    SqlRecordStore and connects it on startup.
    """
    settings = settings or load_settings()
    owns_store = store is None
    if owns_store:
        store = SqlRecordStore.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if owns_store:
            store.connect(create_schema=settings.is_development)
        logger.info("Tenant Verify starting on port %s (%s)", settings.PORT, settings.ENVIRONMENT)
        yield
        if owns_store:
            store.close()

    app = FastAPI(title="Tenant Verify",
                  description="Tenant applicant risk scoring",
                  version=__version__,
                  docs_url="/docs",
                  redoc_url="/redoc",
                  openapi_url="/openapi.json",
                  lifespan=lifespan)

    app.state.settings = settings
    app.state.verification_service = VerificationService(store, settings)
    app.include_router(verify_router)

    @app.exception_handler(DecodeError)
    async def decode_error(request: Request, exc: DecodeError):
        logger.warning("Undecodable body on %s: %s", request.url.path, exc.__cause__ or exc)
        return PlainTextResponse(str(exc), status_code=400)

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):
        return PlainTextResponse(exc.message, status_code=400)

    @app.exception_handler(StoreError)
    async def store_error(request: Request, exc: StoreError):
        return PlainTextResponse("Verification could not be saved", status_code=503)

    @app.get("/health")
    def health():
        return {"status": "healthy", "service": "tenant-verify"}

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "Welcome to Tenant Verify API"

    return app
