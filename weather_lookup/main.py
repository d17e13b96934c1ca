from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from weather_lookup.api.v1 import routes as v1_routes
from weather_lookup.config import get_settings, WeatherClientConfig
from weather_lookup.middleware.request_tracker import RequestTrackerMiddleware
from weather_lookup.services.external_api import WeatherAPIClient
from weather_lookup.services.screen import WeatherScreenPresenter
from weather_lookup.services.weather_manager import WeatherManager
from weather_lookup.utils.logger import setup_logger

logger = setup_logger(__name__)
# httpx logs every outbound URL, api key included
setup_logger("httpx")
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Weather Lookup API...")

    weather_client = WeatherAPIClient(WeatherClientConfig.from_settings(settings))
    weather_manager = WeatherManager(weather_client)
    app.state.weather_client = weather_client
    app.state.weather_manager = weather_manager
    app.state.screen_presenter = WeatherScreenPresenter(weather_manager)

    yield

    logger.info("Shutting down Weather Lookup API...")

    await weather_manager.wait_idle()
    await weather_client.close()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

app.add_middleware(RequestTrackerMiddleware)

Instrumentator().instrument(app).expose(app, endpoint="/prometheus-metrics")

app.include_router(v1_routes.router)

# Unversioned aliases of the current API version
app.include_router(v1_routes.default_router, include_in_schema=False)

if __name__ == "__main__":
    uvicorn.run(
        "weather_lookup.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower()
    )
