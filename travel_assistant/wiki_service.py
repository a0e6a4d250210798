import logging
from urllib.parse import quote

from httpx import AsyncClient

from travel_assistant.models.destination import WikiSummary
from travel_assistant.observability import get_tracer

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

SUMMARY_URL = "https://{lang}.wikipedia.org/api/rest_v1/page/summary/{title}"


def summary_url(city: str, lang: str) -> str:
    return SUMMARY_URL.format(lang=lang, title=quote(city, safe=""))


def parse_summary(data: dict) -> WikiSummary:
    """Map a Wikipedia REST summary payload onto a WikiSummary."""
    desktop = (data.get("content_urls") or {}).get("desktop") or {}
    thumbnail = data.get("thumbnail") or {}
    return WikiSummary(
        title=data["title"],
        extract=data.get("extract") or "",
        url=desktop.get("page") or "",
        image=thumbnail.get("source"),
    )


async def fetch_summary(client: AsyncClient, city: str, lang: str = "es") -> WikiSummary:
    """
    Look up the encyclopedia summary of a city.

    Raises:
        httpx.HTTPError: On transport failures or a non-2xx response.
        KeyError, ValueError: If the upstream body is not a summary payload.
    """
    with tracer.start_as_current_span("wikipedia.summary") as span:
        span.set_attribute("wiki.city", city)
        span.set_attribute("wiki.lang", lang)

        logger.info(f"Consultando Wikipedia ({lang}) para: {city}")
        response = await client.get(summary_url(city, lang))
        span.set_attribute("http.status_code", response.status_code)
        response.raise_for_status()

        return parse_summary(response.json())
