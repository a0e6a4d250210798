import httpx
import pytest

from tests.stubs import WEATHER_HOST, WIKI_HOST
from travel_assistant.weather_service import WeatherService, parse_weather
from travel_assistant.wiki_service import fetch_summary, parse_summary, summary_url


class TestWikiService:
    """Test suite for the Wikipedia summary lookup."""

    def test_summary_url_quotes_title(self):
        assert (
            summary_url("Ciudad de México", "es")
            == "https://es.wikipedia.org/api/rest_v1/page/summary/Ciudad%20de%20M%C3%A9xico"
        )
        assert summary_url("AC/DC", "en").endswith("/summary/AC%2FDC")

    def test_parse_summary(self, wiki_payload):
        summary = parse_summary(wiki_payload)
        assert summary.title == "Lima"
        assert summary.url == "https://es.wikipedia.org/wiki/Lima"
        assert summary.image == "https://upload.wikimedia.org/lima.jpg"

    def test_parse_summary_optional_fields(self):
        summary = parse_summary({"title": "Lima", "content_urls": {}, "thumbnail": None})
        assert summary.extract == ""
        assert summary.url == ""
        assert summary.image is None

    def test_parse_summary_requires_title(self):
        with pytest.raises(KeyError):
            parse_summary({"extract": "sin título"})

    @pytest.mark.asyncio
    async def test_fetch_summary(self, mock_http_client, upstream, wiki_payload):
        upstream.reply(WIKI_HOST, json=wiki_payload)

        summary = await fetch_summary(mock_http_client, "Lima")

        assert summary.title == "Lima"
        assert str(upstream.requests[0].url) == (
            "https://es.wikipedia.org/api/rest_v1/page/summary/Lima"
        )

    @pytest.mark.asyncio
    async def test_fetch_summary_other_language(self, mock_http_client, upstream, wiki_payload):
        upstream.reply("en.wikipedia.org", json=wiki_payload)

        await fetch_summary(mock_http_client, "Lima", lang="en")

        assert upstream.requests[0].url.host == "en.wikipedia.org"

    @pytest.mark.asyncio
    async def test_fetch_summary_raises_on_error_status(self, mock_http_client, upstream):
        upstream.reply(WIKI_HOST, status_code=503)

        with pytest.raises(httpx.HTTPStatusError):
            await fetch_summary(mock_http_client, "Lima")


class TestWeatherService:
    """Test suite for the OpenWeather lookup."""

    def test_parse_weather(self, weather_payload):
        report = parse_weather(weather_payload)
        assert report.city == "Lima"
        assert report.country == "PE"
        assert report.temperature == 18.4
        assert report.feels_like == 18.1
        assert report.humidity == 77
        assert report.condition == "muy nuboso"
        assert report.icon == "https://openweathermap.org/img/wn/04d@2x.png"

    def test_parse_weather_missing_condition(self, weather_payload):
        weather_payload["weather"] = []
        with pytest.raises(IndexError):
            parse_weather(weather_payload)

    @pytest.mark.asyncio
    async def test_current(self, mock_http_client, upstream, weather_payload):
        upstream.reply(WEATHER_HOST, json=weather_payload)
        service = WeatherService(mock_http_client, "secret", lang="en")

        report = await service.current("Lima")

        assert report.city == "Lima"
        request = upstream.requests[0]
        assert request.url.path == "/data/2.5/weather"
        assert dict(request.url.params) == {
            "q": "Lima",
            "units": "metric",
            "lang": "en",
            "appid": "secret",
        }

    @pytest.mark.asyncio
    async def test_current_raises_on_error_status(self, mock_http_client, upstream):
        upstream.reply(WEATHER_HOST, status_code=404, json={"cod": "404"})
        service = WeatherService(mock_http_client, "secret")

        with pytest.raises(httpx.HTTPStatusError):
            await service.current("Nowhere")
