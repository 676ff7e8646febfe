from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from catalog.core.config import get_settings
from catalog.core.lifespan import lifespan
from catalog.core.logging import ACCESS_LOGGER, access_level, configure_logging
from catalog.api.error_handlers import register_error_handlers
from catalog.api.v1.routers.health import router as health_router
from catalog.api.v1.routers.products import router as products_router
from catalog.api.v1.routers.reviews import router as reviews_router

import logging, time
import uvicorn

access_logger = logging.getLogger(ACCESS_LOGGER)


def create_app(store=None) -> FastAPI:
    """
    Build the API. `store` is normally created by the lifespan at startup;
    passing one (anything exposing `.db`) skips the Mongo connection.
    """
    settings = get_settings()
    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.store = store

    # ------- CORS -------
    # ALLOWED_ORIGINS="https://shop.example.com,https://admin.example.com"
    if settings.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.allowed_origins,
            allow_credentials=False,
            allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
            allow_headers=["*"],
            max_age=86400,
        )

    # ------- Access log -------
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        t0 = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            access_logger.error("%s %s 500 %.1fms", request.method, request.url.path,
                                (time.perf_counter() - t0) * 1000.0)
            raise
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        access_logger.log(
            access_level(response.status_code),
            "%s %s %s %.1fms", request.method, request.url.path, response.status_code, elapsed_ms
        )
        return response

    register_error_handlers(app)

    # ------- Routes -------
    app.include_router(health_router)
    app.include_router(products_router)
    app.include_router(reviews_router)
    return app


settings = get_settings()
configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)

app = create_app()


def run():
    """Console entry point: serve `app` on HOST:PORT."""
    uvicorn.run("catalog.main:app", host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
