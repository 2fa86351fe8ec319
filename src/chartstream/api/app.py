from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chartstream.api.charts import router as charts_router
from chartstream.config.settings import settings
from chartstream.services.session_store import registry


def create_app() -> FastAPI:
    application = FastAPI(title="chartstream classification API")

    origins = settings.cors_origins
    if origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            # Browsers refuse credentials alongside a wildcard origin.
            allow_credentials="*" not in origins,
            allow_methods=["GET", "POST", "PUT", "DELETE"],
            allow_headers=["*"],
        )

    application.include_router(charts_router, prefix="/api")

    @application.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok", "sessions": len(registry.list_keys())}

    return application


app = create_app()
