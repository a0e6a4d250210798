import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class Settings(BaseModel):
    """Process configuration, read from the environment once at startup."""

    host: str = Field("0.0.0.0", description="Bind address")
    port: int = Field(3000, description="Listening port")
    openweather_api_key: Optional[str] = Field(
        None, description="OpenWeather API credential"
    )
    wikipedia_lang: str = Field("es", description="Wikipedia language edition")
    weather_lang: str = Field("es", description="Language of weather conditions")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = Field("INFO", description="Root logging level")

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            openweather_api_key=os.getenv("OPENWEATHER_API_KEY") or None,
            wikipedia_lang=os.getenv("WIKIPEDIA_LANG", "es"),
            weather_lang=os.getenv("WEATHER_LANG", "es"),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
