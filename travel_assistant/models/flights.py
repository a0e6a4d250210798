from pydantic import BaseModel, ConfigDict, Field


class FlightOffer(BaseModel):
    """A synthetic flight option returned by the flight search."""

    model_config = ConfigDict(populate_by_name=True)

    airline: str = Field(alias="aerolinea", description="Airline name")
    flight_number: str = Field(
        alias="numeroVuelo", description="Flight number (e.g., 'AV123')"
    )
    origin: str = Field(alias="origen", description="Origin city, echoed from the request")
    destination: str = Field(
        alias="destino", description="Destination city, echoed from the request"
    )
    date: str = Field(alias="fecha", description="Flight date, echoed from the request")
    departure_time: str = Field(alias="horaSalida", description="Departure time")
    arrival_time: str = Field(alias="horaLlegada", description="Arrival time")
    duration: str = Field(alias="duracion", description="Flight duration (e.g., '2h 15m')")
    price: int = Field(alias="precio", description="Price in whole currency units")
    currency: str = Field("USD", alias="moneda", description="Currency code")
    stops: int = Field(0, alias="escalas", description="Number of stops")


class FlightSearchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    flights: list[FlightOffer] = Field(alias="vuelos")
