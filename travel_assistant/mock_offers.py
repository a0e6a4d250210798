"""
Synthetic flight and lodging offers.

No real provider is queried. Each search returns one offer per fixed
archetype, with the flight number and price drawn from the given random
source so callers (and tests) control reproducibility.
"""

import random
from dataclasses import dataclass

from travel_assistant.models.flights import FlightOffer
from travel_assistant.models.lodging import LodgingOffer

PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/300x200?text={label}"


@dataclass(frozen=True)
class AirlineArchetype:
    airline: str
    prefix: str
    min_price: int
    max_price: int  # exclusive
    departure_time: str
    arrival_time: str
    duration: str
    stops: int


@dataclass(frozen=True)
class LodgingArchetype:
    name: str
    type: str
    area: str
    min_price: int
    max_price: int  # exclusive
    rooms: int
    bathrooms: int
    capacity: int
    rating: float
    review_count: int
    image_label: str


AIRLINES = (
    AirlineArchetype("Avianca", "AV", 200, 500, "08:30", "10:45", "2h 15m", 0),
    AirlineArchetype("LATAM", "LA", 180, 480, "12:15", "14:50", "2h 35m", 1),
    AirlineArchetype("Copa Airlines", "CM", 220, 520, "16:40", "19:10", "2h 30m", 0),
)

LODGINGS = (
    LodgingArchetype(
        "Apartamento Céntrico", "Apartamento entero", "Centro de {city}",
        50, 150, 2, 1, 4, 4.8, 123, "Apartamento",
    ),
    LodgingArchetype(
        "Hotel Boutique", "Habitación de hotel", "Zona turística de {city}",
        80, 230, 1, 1, 2, 4.6, 87, "Hotel",
    ),
    LodgingArchetype(
        "Casa Familiar", "Casa entera", "Zona residencial de {city}",
        120, 320, 3, 2, 6, 4.9, 45, "Casa",
    ),
)

FLIGHT_NUMBER_LIMIT = 1000


def search_flights(
    origin: str, destination: str, date: str, rng: random.Random
) -> list[FlightOffer]:
    """Return one synthetic offer per airline, echoing the requested route."""
    return [
        FlightOffer(
            airline=a.airline,
            flight_number=f"{a.prefix}{rng.randrange(FLIGHT_NUMBER_LIMIT)}",
            origin=origin,
            destination=destination,
            date=date,
            departure_time=a.departure_time,
            arrival_time=a.arrival_time,
            duration=a.duration,
            price=rng.randrange(a.min_price, a.max_price),
            currency="USD",
            stops=a.stops,
        )
        for a in AIRLINES
    ]


def search_lodgings(city: str, rng: random.Random) -> list[LodgingOffer]:
    """Return one synthetic offer per lodging archetype located in ``city``."""
    return [
        LodgingOffer(
            name=lodging.name,
            type=lodging.type,
            location=lodging.area.format(city=city),
            price=rng.randrange(lodging.min_price, lodging.max_price),
            currency="USD",
            per_night=True,
            rooms=lodging.rooms,
            bathrooms=lodging.bathrooms,
            capacity=lodging.capacity,
            rating=lodging.rating,
            review_count=lodging.review_count,
            image=PLACEHOLDER_IMAGE_URL.format(label=lodging.image_label),
        )
        for lodging in LODGINGS
    ]
