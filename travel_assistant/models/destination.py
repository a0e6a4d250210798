from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WikiSummary(BaseModel):
    """Encyclopedia summary of a destination, mapped from the Wikipedia REST API."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(alias="titulo")
    extract: str = Field("", alias="extracto")
    url: str = Field("", description="Canonical desktop page URL, empty if absent")
    image: Optional[str] = Field(
        None, alias="imagen", description="Thumbnail URL, null if absent"
    )


class WeatherReport(BaseModel):
    """Current conditions in a city, mapped from the OpenWeather API."""

    model_config = ConfigDict(populate_by_name=True)

    city: str = Field(alias="ciudad")
    country: str = Field(alias="pais", description="ISO country code")
    temperature: float = Field(alias="temperatura", description="Degrees Celsius")
    feels_like: float = Field(alias="sensacionTermica", description="Degrees Celsius")
    humidity: int = Field(alias="humedad", description="Relative humidity in percent")
    condition: str = Field(alias="condicion", description="Localized condition text")
    icon: str = Field(alias="icono", description="Condition icon URL")


class TravelAdvice(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    destination: str = Field(alias="destino")
    trip_type: str = Field(alias="tipoViaje")
    budget: str = Field(alias="presupuesto")
    recommendations: list[str] = Field(alias="recomendaciones")
    budget_note: str = Field(alias="consejoPresupuesto")
