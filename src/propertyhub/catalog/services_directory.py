"""
Directorio de servicios profesionales.

Agentes inmobiliarios (casas, locales, tierras) y personal doméstico.
"""

from typing import Optional

from propertyhub.models import Professional, ServiceCategory

_AVATAR = "https://images.unsplash.com/{}?w=150&h=150&fit=crop&crop=face"

SERVICE_CATEGORY_ROWS: list[dict] = [
    {
        "id": 1,
        "title": "House Agents",
        "description": "Professional residential property agents",
        "available_count": 12,
        "professionals": [
            {
                "id": 1, "name": "Sarah Mwangi", "rating": 4.9, "experience": "8 years",
                "location": "Nairobi", "specialties": ["Luxury Homes", "Apartments"],
                "avatar": _AVATAR.format("photo-1494790108755-2616b612b5bc"),
            },
            {
                "id": 2, "name": "David Kiprotich", "rating": 4.8, "experience": "6 years",
                "location": "Nairobi", "specialties": ["Family Homes", "Townhouses"],
                "avatar": _AVATAR.format("photo-1472099645785-5658abf4ff4e"),
            },
        ],
    },
    {
        "id": 2,
        "title": "Shop Agents",
        "description": "Commercial property specialists",
        "available_count": 8,
        "professionals": [
            {
                "id": 3, "name": "Grace Wanjiku", "rating": 4.7, "experience": "5 years",
                "location": "Nairobi CBD", "specialties": ["Retail Spaces", "Offices"],
                "avatar": _AVATAR.format("photo-1438761681033-6461ffad8d80"),
            },
            {
                "id": 4, "name": "John Ochieng", "rating": 4.6, "experience": "7 years",
                "location": "Westlands", "specialties": ["Commercial Buildings", "Warehouses"],
                "avatar": _AVATAR.format("photo-1507003211169-0a1dd7228f2d"),
            },
        ],
    },
    {
        "id": 3,
        "title": "Shamba Agents",
        "description": "Agricultural land and farm specialists",
        "available_count": 6,
        "professionals": [
            {
                "id": 5, "name": "Peter Kamau", "rating": 4.9, "experience": "10 years",
                "location": "Kiambu", "specialties": ["Agricultural Land", "Coffee Farms"],
                "avatar": _AVATAR.format("photo-1500648767791-00dcc994a43e"),
            },
        ],
    },
    {
        "id": 4,
        "title": "House Girls",
        "description": "Reliable domestic workers for household management",
        "available_count": 15,
        "professionals": [
            {
                "id": 6, "name": "Mary Nyong'o", "rating": 4.8, "experience": "4 years",
                "location": "Karen", "specialties": ["Cleaning", "Cooking", "Childcare"],
                "avatar": _AVATAR.format("photo-1573496359142-b8d87734a5a2"),
            },
            {
                "id": 7, "name": "Agnes Wanjiru", "rating": 4.7, "experience": "6 years",
                "location": "Westlands", "specialties": ["Housekeeping", "Laundry", "Cooking"],
                "avatar": _AVATAR.format("photo-1580489944761-15a19d654956"),
            },
        ],
    },
    {
        "id": 5,
        "title": "House Boys",
        "description": "Trusted domestic workers for general household duties",
        "available_count": 10,
        "professionals": [
            {
                "id": 8, "name": "Samuel Mwangi", "rating": 4.6, "experience": "5 years",
                "location": "Kilimani", "specialties": ["Maintenance", "Security", "Gardening"],
                "avatar": _AVATAR.format("photo-1506794778202-cad84cf45f1d"),
            },
        ],
    },
]


def get_service_categories() -> list[ServiceCategory]:
    """Devuelve todas las categorías en orden de presentación."""
    return [ServiceCategory.model_validate(row) for row in SERVICE_CATEGORY_ROWS]


def get_service_category(category_id: int) -> Optional[ServiceCategory]:
    """Busca una categoría por ID."""
    for category in get_service_categories():
        if category.id == category_id:
            return category
    return None


def find_professionals(
    location: Optional[str] = None,
    specialty: Optional[str] = None,
) -> list[Professional]:
    """
    Busca profesionales por ubicación y/o especialidad.

    Ambos criterios son substrings sin distinguir mayúsculas; un criterio
    vacío no filtra. Se respeta el orden de las categorías.
    """
    location = (location or "").lower()
    specialty = (specialty or "").lower()

    results = []
    for category in get_service_categories():
        for professional in category.professionals:
            if location and location not in professional.location.lower():
                continue
            if specialty and not any(
                specialty in s.lower() for s in professional.specialties
            ):
                continue
            results.append(professional)
    return results
