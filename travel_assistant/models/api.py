from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class CityQuery(BaseModel):
    """Query parameters of the wiki and weather lookups."""

    city: str = Field(
        alias="ciudad",
        min_length=1,
        description="Nombre de la ciudad o destino a consultar",
    )


class WeatherQuery(CityQuery):
    city: str = Field(
        alias="ciudad",
        min_length=1,
        description="Nombre de la ciudad para consultar el clima",
    )


class LodgingQuery(BaseModel):
    """Query parameters of the lodging search. Dates are accepted but unused."""

    city: str = Field(
        alias="ciudad", min_length=1, description="Ciudad donde se busca hospedaje"
    )
    check_in: Optional[str] = Field(
        None, alias="fechaEntrada", description="Fecha de entrada en formato YYYY-MM-DD"
    )
    check_out: Optional[str] = Field(
        None, alias="fechaSalida", description="Fecha de salida en formato YYYY-MM-DD"
    )


class FlightSearchRequest(BaseModel):
    origin: str = Field(alias="origen", min_length=1, description="Ciudad de origen")
    destination: str = Field(
        alias="destino", min_length=1, description="Ciudad de destino"
    )
    date: str = Field(
        alias="fecha", min_length=1, description="Fecha del vuelo en formato YYYY-MM-DD"
    )


class AdviceRequest(BaseModel):
    destination: str = Field(
        alias="destino", min_length=1, description="Destino del viaje"
    )
    trip_type: str = Field(
        "vacaciones",
        alias="tipoViaje",
        description="Tipo de viaje (negocio, vacaciones, aventura, cultural, etc.)",
    )
    budget: str = Field(
        "medio",
        alias="presupuesto",
        description="Presupuesto para el viaje (bajo, medio, alto)",
    )


class ErrorBody(BaseModel):
    error: str
    mensaje: Optional[str] = None


class StatusResponse(BaseModel):
    status: str
    message: str
    endpoints: list[str]


class ToolParameters(BaseModel):
    type: str = "object"
    properties: dict[str, dict[str, Any]]
    required: list[str]


class ToolDescriptor(BaseModel):
    """A capability advertised to an external agent or orchestrator."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameters: ToolParameters


class ToolCatalogResponse(BaseModel):
    tools: list[ToolDescriptor]
