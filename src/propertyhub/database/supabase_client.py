"""
Cliente de Supabase.

La aplicación usa solo la anon key: tras el login, supabase-py adjunta
el token del usuario a cada consulta y las políticas RLS de 'properties'
y 'profiles' deciden qué puede leer o escribir.
"""

from functools import lru_cache
from typing import Optional

import structlog
from supabase import create_client, Client

from propertyhub.config import Settings, get_settings

logger = structlog.get_logger()


class SupabaseClient:
    """Cliente compartido por repositorios y AuthService."""

    def __init__(self, client: Client):
        self._client = client

    @property
    def client(self) -> Client:
        return self._client

    @property
    def auth(self):
        """Supabase Auth: sign up, sign in, sesión persistida."""
        return self._client.auth

    def table(self, name: str):
        """Query builder de una tabla, con la sesión actual."""
        return self._client.table(name)


def create_supabase_client(settings: Optional[Settings] = None) -> SupabaseClient:
    """
    Construye un cliente nuevo con la anon key del proyecto.

    Raises:
        ValueError: Si la URL o la key no están configuradas
    """
    settings = settings or get_settings()

    if not settings.supabase_key:
        raise ValueError("SUPABASE_KEY es requerida. Configura las variables de entorno.")
    if not settings.supabase_url.startswith(("https://", "http://")):
        raise ValueError(f"SUPABASE_URL inválida: {settings.supabase_url!r}")

    client = create_client(settings.supabase_url, settings.supabase_key)
    logger.info("Cliente de Supabase inicializado", url=settings.supabase_url)
    return SupabaseClient(client)


@lru_cache
def get_supabase_client() -> SupabaseClient:
    """Cliente compartido por toda la aplicación (se crea una sola vez)."""
    return create_supabase_client()
