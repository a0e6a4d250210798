import random
from typing import Any, AsyncIterator, Sequence

from fastapi import Depends, Request
from httpx import AsyncClient

from travel_assistant.config import Settings, get_settings
from travel_assistant.weather_service import WeatherService


async def get_http_client() -> AsyncIterator[AsyncClient]:
    """One outbound client per request, closed when the request ends."""
    async with AsyncClient() as client:
        yield client


def get_rng() -> random.Random:
    """Random source for the synthetic offers; tests override it with a seeded one."""
    return random.Random()


def get_weather_service(
    settings: Settings = Depends(get_settings),
    client: AsyncClient = Depends(get_http_client),
) -> WeatherService | None:
    """The weather service, or None when no OpenWeather key is configured."""
    if not settings.openweather_api_key:
        return None
    return WeatherService(client, settings.openweather_api_key, settings.weather_lang)


def required_body_fields(request: Request) -> list[str]:
    """Aliases of the required fields of the matched route's body model."""
    body_field = getattr(request.scope.get("route"), "body_field", None)
    if body_field is None:
        return []
    model = body_field.field_info.annotation
    return [
        field.alias or name
        for name, field in model.model_fields.items()
        if field.is_required()
    ]


def invalid_fields(request: Request, errors: Sequence[dict[str, Any]]) -> list[str]:
    """Parameter names behind request validation errors.

    An absent or non-JSON body fails as a whole at ``("body",)``; it is
    reported as every required field of the body model, as an empty object
    would be.
    """
    names = []
    for err in errors:
        loc = err.get("loc", ())
        if len(loc) > 1:
            names.append(str(loc[-1]))
        elif loc == ("body",):
            names.extend(required_body_fields(request))
    return names
