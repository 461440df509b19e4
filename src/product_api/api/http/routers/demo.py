"""Routes that never touch the database."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from loguru._logger import Logger

from src.product_api.api.http.deps import get_logger
from src.product_api.core.services.weather import WeatherForecast, generate_forecast

router = APIRouter(tags=["demo"])


@router.get("/test", response_class=PlainTextResponse)
def test_endpoint(log: Logger = Depends(get_logger)) -> str:
    """Verify routing works."""
    log.info("Test endpoint called")
    return "Test endpoint works!"


@router.get("/weatherforecast", response_model=list[WeatherForecast])
def weather_forecast(log: Logger = Depends(get_logger)) -> list[WeatherForecast]:
    log.info("GET /weatherforecast called")
    return generate_forecast()
