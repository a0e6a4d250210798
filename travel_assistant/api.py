import logging
import random
from typing import Annotated

from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from httpx import AsyncClient

from travel_assistant import mock_offers
from travel_assistant.advice import build_advice
from travel_assistant.catalog import build_catalog
from travel_assistant.config import Settings, get_settings
from travel_assistant.dependencies import (
    get_http_client,
    get_rng,
    get_weather_service,
    invalid_fields,
)
from travel_assistant.errors import (
    ApiError,
    BadRequestError,
    ConfigurationError,
    UpstreamError,
    missing_parameters_message,
    upstream_message,
)
from travel_assistant.models.api import (
    AdviceRequest,
    CityQuery,
    ErrorBody,
    FlightSearchRequest,
    LodgingQuery,
    StatusResponse,
    ToolCatalogResponse,
    WeatherQuery,
)
from travel_assistant.models.destination import TravelAdvice, WeatherReport, WikiSummary
from travel_assistant.models.flights import FlightSearchResponse
from travel_assistant.models.lodging import LodgingSearchResponse
from travel_assistant.observability import setup_tracing
from travel_assistant.weather_service import WeatherService
from travel_assistant.wiki_service import fetch_summary

settings = get_settings()

# Configure logging
logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)

setup_tracing()

ENDPOINTS = ["/wiki", "/clima", "/vuelos", "/hospedaje", "/consejos"]

ERROR_RESPONSES = {
    400: {"model": ErrorBody, "description": "Missing or invalid parameters"},
    500: {"model": ErrorBody, "description": "Upstream or internal error"},
}

app = FastAPI(
    title="MCP Travel Assistant API",
    description="Travel tools (encyclopedia, weather, flights, lodging, advice) exposed over HTTP for agent orchestrators",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    body = ErrorBody(error=exc.error, mensaje=exc.mensaje)
    return JSONResponse(
        status_code=exc.status_code, content=body.model_dump(exclude_none=True)
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report invalid input as a 400 naming the offending parameters."""
    errors = exc.errors()
    malformed = [err for err in errors if err.get("type") == "json_invalid"]
    if malformed:
        error = BadRequestError(
            "Cuerpo de la petición inválido", malformed[0].get("ctx", {}).get("error")
        )
    else:
        error = BadRequestError(
            missing_parameters_message(invalid_fields(request, errors))
        )
    return await api_error_handler(request, error)


@app.get("/", response_model=StatusResponse)
async def root():
    """Status endpoint listing the available tools' paths."""
    return StatusResponse(
        status="online",
        message="MCP Travel Assistant API is running",
        endpoints=ENDPOINTS,
    )


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "service": "travel-assistant-api"}


@app.get("/tools", response_model=ToolCatalogResponse)
async def list_tools():
    """Describe every tool and its parameters for discovery by an agent."""
    return ToolCatalogResponse(tools=list(build_catalog()))


@app.get("/wiki", response_model=WikiSummary, responses=ERROR_RESPONSES)
async def wiki(
    query: Annotated[CityQuery, Query()],
    config: Settings = Depends(get_settings),
    client: AsyncClient = Depends(get_http_client),
):
    """Summary of a destination from Wikipedia."""
    try:
        return await fetch_summary(client, query.city, config.wikipedia_lang)
    except Exception as e:
        message = upstream_message(e)
        logger.error(f"Error consultando Wikipedia: {message}")
        raise UpstreamError("Error al consultar Wikipedia", message) from e


@app.get("/clima", response_model=WeatherReport, responses=ERROR_RESPONSES)
async def weather(
    query: Annotated[WeatherQuery, Query()],
    service: WeatherService | None = Depends(get_weather_service),
):
    """Current weather in a city from OpenWeather."""
    if service is None:
        raise ConfigurationError("API key de OpenWeather no configurada")

    try:
        return await service.current(query.city)
    except Exception as e:
        message = upstream_message(e)
        logger.error(f"Error consultando clima: {message}")
        raise UpstreamError("Error al consultar el clima", message) from e


@app.post("/vuelos", response_model=FlightSearchResponse, responses=ERROR_RESPONSES)
async def search_flights(
    body: FlightSearchRequest,
    rng: random.Random = Depends(get_rng),
):
    """
    Search flights between two cities.

    Offers are synthetic placeholders; no flight provider is queried.
    """
    try:
        flights = mock_offers.search_flights(
            body.origin, body.destination, body.date, rng
        )
        return FlightSearchResponse(flights=flights)
    except Exception as e:
        logger.error(f"Error buscando vuelos: {e}")
        raise ApiError("Error al buscar vuelos", str(e)) from e


@app.get("/hospedaje", response_model=LodgingSearchResponse, responses=ERROR_RESPONSES)
async def search_lodgings(
    query: Annotated[LodgingQuery, Query()],
    rng: random.Random = Depends(get_rng),
):
    """Search lodging in a city. Offers are synthetic placeholders."""
    try:
        return LodgingSearchResponse(
            lodgings=mock_offers.search_lodgings(query.city, rng)
        )
    except Exception as e:
        logger.error(f"Error buscando hospedaje: {e}")
        raise ApiError("Error al buscar hospedaje", str(e)) from e


@app.post("/consejos", response_model=TravelAdvice, responses=ERROR_RESPONSES)
async def travel_advice(body: AdviceRequest):
    """Recommendations for a destination by trip type and budget tier."""
    try:
        return build_advice(body.destination, body.trip_type, body.budget)
    except Exception as e:
        logger.error(f"Error generando recomendaciones: {e}")
        raise ApiError("Error al generar recomendaciones", str(e)) from e
