# app/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.config import DEFAULT_JWT_SECRET, Settings, settings as default_settings
from app.api.error_handlers import register_error_handlers
from app.api.v1.routers import auth, users, posts, files
from app.core.bootstrap import seed_demo_data
from app.core.security import MIN_SECRET_BYTES, TokenService
from app.services import (
    CollectionStore,
    CredentialStore,
    FileIntake,
    LocalBlobStore,
    PostService,
)

logger = logging.getLogger("uvicorn.error")

API_PREFIX = "/v1"
UPLOAD_PATH = f"{API_PREFIX}/files/upload"

def _build_services(app: FastAPI, settings: Settings) -> None:
    """
    Create the process-wide state once and hang it on app.state.
    Handlers reach it through the dependencies in app.api.v1.deps.
    """
    store = CollectionStore()
    credentials = CredentialStore(store.users)
    blobs = LocalBlobStore(settings.upload_dir)

    app.state.store = store
    app.state.credentials = credentials
    app.state.tokens = TokenService(settings.jwt_secret, settings.access_token_expire_hours)
    app.state.posts = PostService(store.posts)
    app.state.intake = FileIntake(store.files, blobs, settings.max_upload_bytes)
    app.state.blobs = blobs

    if settings.seed_demo_data:
        seed_demo_data(store, credentials)

def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.jwt_secret == DEFAULT_JWT_SECRET and settings.env != "test":
            logger.warning(
                "[security] JWT_SECRET is not set, using the development secret; "
                "set a random value of at least %d bytes", MIN_SECRET_BYTES,
            )
        elif len(settings.jwt_secret.encode()) < MIN_SECRET_BYTES:
            logger.warning("[security] JWT_SECRET is shorter than %d bytes", MIN_SECRET_BYTES)
        base = f"http://localhost:{settings.port}"
        logger.info("[startup] %s running on %s", settings.APP_NAME, base)
        logger.info("[startup] API documentation available at %s/docs", base)
        logger.info("[startup] Base URL: %s%s", base, API_PREFIX)
        yield

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

    @app.middleware("http")
    async def reject_oversized_uploads(request: Request, call_next):
        # Refuse on the declared length, before the body is read or auth runs
        intake = request.app.state.intake
        if (
            request.method == "POST"
            and request.url.path == UPLOAD_PATH
            and intake.request_too_large(request.headers.get("content-length"))
        ):
            exc = intake.too_large()
            logger.info("POST %s -> 400 %s", UPLOAD_PATH, exc.error)
            return JSONResponse(
                status_code=exc.status_code,
                content=exc.to_response(),
                headers={"Connection": "close"},
            )
        return await call_next(request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _build_services(app, settings)
    register_error_handlers(app)

    # REST
    app.include_router(auth.router, prefix=API_PREFIX)
    app.include_router(users.router, prefix=API_PREFIX)
    app.include_router(posts.router, prefix=API_PREFIX)
    app.include_router(files.router, prefix=API_PREFIX)

    # Uploaded blobs are public under the same prefix used in their URLs
    app.mount("/uploads", StaticFiles(directory=app.state.blobs.directory), name="uploads")

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app

app = create_app()

def run() -> None:
    """Console entry point: serve the default app with uvicorn."""
    import uvicorn

    uvicorn.run("app.main:app", host=default_settings.host, port=default_settings.port)
