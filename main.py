# main.py
import argparse
import logging
import routes
from contextlib import asynccontextmanager
from util.enums import Color, ErrorMessage
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.middleware.cors import CORSMiddleware
from config.settings import Settings, load_settings, settings
from fastapi.responses import JSONResponse
from model.api import HealthResponse
from repository.site_repository import SiteRepository
from util.constants import InternalURIs
from util.logger import init_logger
from util.timing import timed

logger = logging.getLogger("http")


def create_app(app_settings: Settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(fastApi: FastAPI):
        try:
            init_logger(app_settings)
            print(f"{Color.GREEN}Initializing...{Color.RESET}")
            SiteRepository(app_settings.SITES_BASE_DIR).ensure_root()
            print(f"Using sites base directory: {app_settings.SITES_BASE_DIR}")
            print(f"{Color.BLUE}Server Started{Color.RESET} VERSION: {app_settings.VERSION}")
        except Exception as e:
            print("Failed to prepare sites base directory:", e)
            raise

        try:
            yield
        finally:
            print(f"{Color.RED}Server Shutdown{Color.RESET}")

    app: FastAPI = FastAPI(lifespan=lifespan)
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.ALLOWED_ORIGINS,
        allow_credentials=True,  # Allow cookies and other credentials
        allow_methods=["GET", "POST", "OPTIONS"],  # Allowed HTTP Methods
        allow_headers=["Content-Type"],  # Allowed HTTP Headers
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        remote = request.client.host if request.client else "unknown"
        with timed(
            logger,
            "http.request",
            remote=remote,
            method=request.method,
            path=request.url.path,
        ):
            return await call_next(request)

    @app.get(InternalURIs.HEALTH, response_model=HealthResponse)
    async def health():
        return HealthResponse(status="OK", version=app_settings.VERSION)

    @app.exception_handler(RequestValidationError)
    async def invalid_request_handler(request: Request, exc: RequestValidationError):
        info = ErrorMessage.INVALID_REQUEST.value
        # Keep each endpoint's own response shape
        if request.url.path == InternalURIs.VALIDATE_SITE_NAME:
            content = {"valid": False, "error": info.message}
        else:
            content = {"success": False, "error": info.message}
        return JSONResponse(status_code=info.http_status, content=content)

    routes.register_routes(app)
    return app


app: FastAPI = create_app(settings)

if __name__ == "__main__":
    import uvicorn

    parser = argparse.ArgumentParser(description="Site provisioning API")
    parser.add_argument("--sites-dir", help="Base directory to store site configs")
    parser.add_argument("--host", help="Bind address")
    parser.add_argument("--port", type=int, help="Port to listen on (0 = any free port)")
    args = parser.parse_args()

    cfg = load_settings(
        SITES_BASE_DIR=args.sites_dir, SERVER_HOST=args.host, SERVER_PORT=args.port
    )
    uvicorn.run(create_app(cfg), host=cfg.SERVER_HOST, port=cfg.SERVER_PORT)
