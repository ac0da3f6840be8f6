"""Market constants shared by adjustments and confidence scoring."""

# Premium multipliers for major cities, matched exactly on display name
CITY_PREMIUMS = {
    "Mumbai": 1.4,
    "Bangalore": 1.3,
    "Delhi": 1.35,
    "Pune": 1.25,
    "Chennai": 1.2,
}

MAJOR_CITIES = frozenset(CITY_PREMIUMS)
