import logging

from httpx import AsyncClient

from travel_assistant.models.destination import WeatherReport
from travel_assistant.observability import get_tracer

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

CURRENT_WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
ICON_URL = "https://openweathermap.org/img/wn/{icon}@2x.png"


def parse_weather(data: dict) -> WeatherReport:
    """Map an OpenWeather current weather payload onto a WeatherReport."""
    condition = data["weather"][0]
    main = data["main"]
    return WeatherReport(
        city=data["name"],
        country=data["sys"]["country"],
        temperature=main["temp"],
        feels_like=main["feels_like"],
        humidity=main["humidity"],
        condition=condition["description"],
        icon=ICON_URL.format(icon=condition["icon"]),
    )


class WeatherService:
    """Current weather lookups against OpenWeather, in metric units."""

    def __init__(self, client: AsyncClient, api_key: str, lang: str = "es"):
        self.client = client
        self.api_key = api_key
        self.lang = lang

    async def current(self, city: str) -> WeatherReport:
        """
        Fetch the current conditions for ``city``.

        Raises:
            httpx.HTTPError: On transport failures or a non-2xx response.
            KeyError, IndexError, ValueError: If the body lacks expected fields.
        """
        with tracer.start_as_current_span("openweather.current") as span:
            span.set_attribute("weather.city", city)

            logger.info(f"Consultando clima para: {city}")
            response = await self.client.get(
                CURRENT_WEATHER_URL,
                params={
                    "q": city,
                    "units": "metric",
                    "lang": self.lang,
                    "appid": self.api_key,
                },
            )
            span.set_attribute("http.status_code", response.status_code)
            response.raise_for_status()

            return parse_weather(response.json())
