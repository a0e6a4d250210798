from pydantic import BaseModel, ConfigDict, Field


class LodgingOffer(BaseModel):
    """A synthetic lodging option returned by the lodging search."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="nombre")
    type: str = Field(alias="tipo", description="Kind of listing (e.g., 'Casa entera')")
    location: str = Field(alias="ubicacion", description="Area within the city")
    price: int = Field(alias="precio")
    currency: str = Field("USD", alias="moneda")
    per_night: bool = Field(True, alias="porNoche", description="Price is per night")
    rooms: int = Field(alias="habitaciones")
    bathrooms: int = Field(alias="banos")
    capacity: int = Field(alias="capacidad", description="Maximum number of guests")
    rating: float = Field(alias="calificacion")
    review_count: int = Field(alias="opiniones")
    image: str = Field(alias="imagen", description="Placeholder image URL")


class LodgingSearchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    lodgings: list[LodgingOffer] = Field(alias="hospedajes")
