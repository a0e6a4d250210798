"""
Tool catalog advertised on ``GET /tools``.

Descriptors are generated from the same request models the endpoints
validate against, so the advertised parameters and the enforced ones
cannot drift apart.
"""

import typing
from functools import lru_cache

from pydantic import BaseModel

from travel_assistant.models.api import (
    AdviceRequest,
    CityQuery,
    FlightSearchRequest,
    LodgingQuery,
    ToolDescriptor,
    ToolParameters,
    WeatherQuery,
)

JSON_TYPES = {str: "string", int: "integer", float: "number", bool: "boolean"}

# (tool name, description, input model), in advertised order
TOOLS: tuple[tuple[str, str, type[BaseModel]], ...] = (
    (
        "consultarWikipedia",
        "Consulta información sobre un destino en Wikipedia",
        CityQuery,
    ),
    (
        "consultarClima",
        "Consulta el clima actual en una ciudad específica",
        WeatherQuery,
    ),
    (
        "buscarVuelos",
        "Busca vuelos disponibles entre un origen y destino",
        FlightSearchRequest,
    ),
    (
        "buscarHospedaje",
        "Busca opciones de hospedaje en un destino específico",
        LodgingQuery,
    ),
    (
        "obtenerRecomendaciones",
        "Obtiene recomendaciones personalizadas para un viaje",
        AdviceRequest,
    ),
)


def json_type(annotation) -> str:
    """JSON schema type name of a field annotation; ``Optional[X]`` maps like ``X``."""
    args = [a for a in typing.get_args(annotation) if a is not type(None)]
    if args and typing.get_origin(annotation) is typing.Union:
        annotation = args[0]
    return JSON_TYPES.get(annotation, "string")


def tool_parameters(model: type[BaseModel]) -> ToolParameters:
    properties = {}
    required = []
    for name, field in model.model_fields.items():
        key = field.alias or name
        properties[key] = {
            "type": json_type(field.annotation),
            "description": field.description or "",
        }
        if field.is_required():
            required.append(key)
    return ToolParameters(properties=properties, required=required)


def describe_tool(name: str, description: str, model: type[BaseModel]) -> ToolDescriptor:
    return ToolDescriptor(
        name=name, description=description, parameters=tool_parameters(model)
    )


@lru_cache
def build_catalog() -> tuple[ToolDescriptor, ...]:
    return tuple(describe_tool(*tool) for tool in TOOLS)
