from travel_assistant.models.destination import TravelAdvice

# (keyword, templates), checked in order; the first keyword contained in the
# trip type wins.
RECOMMENDATIONS = (
    (
        "negocio",
        (
            "Hoteles de negocios cercanos al centro financiero de {destino}",
            "Restaurantes con ambiente tranquilo para reuniones en {destino}",
            "Servicios de taxi o transporte ejecutivo en {destino}",
            "Espacios de coworking populares en {destino}",
            "Conexiones Wi-Fi confiables en {destino}",
        ),
    ),
    (
        "aventura",
        (
            "Rutas de senderismo populares cerca de {destino}",
            "Empresas de deportes extremos en {destino}",
            "Parques naturales que debes visitar en {destino}",
            "Equipamiento necesario para actividades al aire libre en {destino}",
            "Hospedajes con acceso rápido a actividades de aventura en {destino}",
        ),
    ),
    (
        "cultural",
        (
            "Museos imperdibles en {destino}",
            "Sitios históricos para visitar en {destino}",
            "Eventos culturales programados en {destino}",
            "Tours guiados por el patrimonio de {destino}",
            "Gastronomía típica que debes probar en {destino}",
        ),
    ),
)

GENERAL_RECOMMENDATIONS = (
    "Atracciones turísticas principales de {destino}",
    "Mejores playas o parques en {destino}",
    "Opciones de entretenimiento familiar en {destino}",
    "Restaurantes mejor valorados de {destino}",
    "Consejos de seguridad para turistas en {destino}",
)

BUDGET_NOTES = {
    "bajo": (
        "Para ahorrar dinero en {destino}, considera usar transporte público, "
        "comer en mercados locales y buscar actividades gratuitas como parques "
        "y museos con entrada libre."
    ),
    "alto": (
        "Con un presupuesto alto en {destino}, puedes disfrutar de hoteles "
        "boutique de lujo, restaurantes exclusivos y excursiones privadas "
        "personalizadas."
    ),
    "medio": (
        "Con un presupuesto medio en {destino}, equilibra experiencias premium "
        "con opciones más económicas. Considera un hotel de 3-4 estrellas y "
        "mezcla restaurantes de diferentes categorías."
    ),
}

DEFAULT_BUDGET = "medio"


def recommendations_for(destination: str, trip_type: str) -> list[str]:
    """Pick the recommendation template matching ``trip_type`` (substring, any case)."""
    wanted = trip_type.lower()
    templates = GENERAL_RECOMMENDATIONS
    for keyword, candidate in RECOMMENDATIONS:
        if keyword in wanted:
            templates = candidate
            break
    return [t.format(destino=destination) for t in templates]


def budget_note_for(destination: str, budget: str) -> str:
    """Pick the budget note for ``budget``; unknown tiers get the medium note."""
    template = BUDGET_NOTES.get(budget.lower(), BUDGET_NOTES[DEFAULT_BUDGET])
    return template.format(destino=destination)


def build_advice(destination: str, trip_type: str, budget: str) -> TravelAdvice:
    return TravelAdvice(
        destination=destination,
        trip_type=trip_type,
        budget=budget,
        recommendations=recommendations_for(destination, trip_type),
        budget_note=budget_note_for(destination, budget),
    )
