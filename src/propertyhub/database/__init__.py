"""
Módulo de base de datos.

Provee acceso a Supabase y operaciones CRUD.
"""

from propertyhub.database.supabase_client import (
    create_supabase_client,
    get_supabase_client,
    SupabaseClient,
)
from propertyhub.database.repositories import (
    BaseRepository,
    PropertyRepository,
    ProfileRepository,
)

__all__ = [
    "create_supabase_client",
    "get_supabase_client",
    "SupabaseClient",
    "BaseRepository",
    "PropertyRepository",
    "ProfileRepository",
]
