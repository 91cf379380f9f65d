import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from campus.core.config import Settings, get_settings
from campus.core.logging_config import configure_logging
from campus.core.rate_limiter import RateLimiter
from campus.domain.seed import seed_document
from campus.repositories import DocumentStore, build_store
from campus.routers import auth as auth_router
from campus.routers import bookings as bookings_router
from campus.routers import me as me_router
from campus.routers import resources as resources_router
from campus.routers import users as users_router
from campus.services.auth_service import AuthService
from campus.services.booking_service import BookingService
from campus.services.resource_service import ResourceService
from campus.services.session_service import build_session_registry
from campus.services.user_service import UserService

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (no sniffing, no framing, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def create_app(settings: Optional[Settings] = None, store: Optional[DocumentStore] = None) -> FastAPI:
    """Build the API around a document store (the configured one unless given)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    store = store or build_store(settings)
    if settings.seed_resources and store.initialize(seed_document()):
        logger.info("Seeded a new document with the default campus resources")

    app = FastAPI(title="Campus Resource Booking API")

    allowed_cors = {settings.public_base_url}
    if settings.app_env != "prod":
        allowed_cors.update(
            {
                "http://localhost:3000",
                "http://127.0.0.1:3000",
                "http://localhost:5173",
                "http://127.0.0.1:5173",
            }
        )
    allowed_cors = {origin for origin in allowed_cors if origin}
    if allowed_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(allowed_cors),
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")

    app.state.settings = settings
    app.state.store = store
    app.state.user_service = UserService(store)
    app.state.resource_service = ResourceService(store)
    app.state.booking_service = BookingService(store, allow_double_booking=settings.allow_double_booking)
    app.state.auth_service = AuthService(store)
    app.state.sessions = build_session_registry(store, settings.session_ttl_seconds)
    app.state.rate_limiter = RateLimiter()

    @app.get("/health")
    def health():
        return {"ok": True}

    app.include_router(auth_router.router)
    app.include_router(me_router.router)
    app.include_router(users_router.router)
    app.include_router(resources_router.router)
    app.include_router(bookings_router.router)
    return app
