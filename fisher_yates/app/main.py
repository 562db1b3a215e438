"""
main.py
Запуск: uvicorn fisher_yates.app.main:app --reload --port 8030

FastAPI-приложение: один GET /FisherYates.
Swagger (/docs, /redoc, /openapi.json) — только при FY_ENVIRONMENT=development.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

from fisher_yates.app.routers import router
from fisher_yates.core.settings import Settings, settings

logger = logging.getLogger(__name__)


def create_app(cfg: Settings = settings) -> FastAPI:
    logging.basicConfig(level=cfg.log_level.upper())

    docs = cfg.environment == "development"
    app = FastAPI(
        title="Fisher-Yates API",
        version="1.0.0",
        description="Перемешивание дефисных элементов алгоритмом Фишера–Йетса (text/plain).",
        openapi_tags=[
            {"name": "Fisher-Yates", "description": "Случайная перестановка токенов"}
        ],
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )
    app.state.settings = cfg

    if cfg.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)

    app.include_router(router)

    logger.info(
        "Fisher-Yates API: environment=%s, random_source=%s",
        cfg.environment, cfg.random_source,
    )
    return app


app = create_app()
