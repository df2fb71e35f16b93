"""
Repositorios para operaciones CRUD en Supabase.

Cada repositorio maneja una tabla/entidad específica.
"""

from datetime import datetime
from typing import Optional

import structlog

from propertyhub.database.supabase_client import get_supabase_client, SupabaseClient
from propertyhub.models import Property

logger = structlog.get_logger()


class BaseRepository:
    """Clase base para repositorios."""

    def __init__(self, client: Optional[SupabaseClient] = None):
        self._client = client or get_supabase_client()

    @property
    def client(self) -> SupabaseClient:
        return self._client


class PropertyRepository(BaseRepository):
    """Repositorio para la tabla de propiedades."""

    TABLE = "properties"

    def get_available(self) -> list[dict]:
        """Obtiene las propiedades disponibles, más recientes primero."""
        response = (
            self.client.table(self.TABLE)
            .select("*")
            .eq("status", "available")
            .order("created_at", desc=True)
            .execute()
        )
        return response.data

    def get_all(self) -> list[dict]:
        """Obtiene todas las propiedades (vista admin)."""
        response = (
            self.client.table(self.TABLE)
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
        return response.data

    def get_by_agent(self, agent_id: str) -> list[dict]:
        """Obtiene las propiedades publicadas por un agente."""
        response = (
            self.client.table(self.TABLE)
            .select("*")
            .eq("agent_id", agent_id)
            .order("created_at", desc=True)
            .execute()
        )
        return response.data

    def get_by_id(self, property_id: str) -> Optional[dict]:
        """Obtiene una propiedad por su UUID."""
        response = (
            self.client.table(self.TABLE)
            .select("*")
            .eq("id", property_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def create(self, prop: Property) -> dict:
        """
        Inserta una nueva propiedad.

        Returns:
            El registro insertado con su ID
        """
        data = prop.to_db_dict()
        response = self.client.table(self.TABLE).insert(data).execute()
        logger.info(
            "Propiedad creada",
            title=prop.title,
            agent_id=prop.agent_id,
        )
        return response.data[0] if response.data else {}

    def update(self, property_id: str, prop: Property) -> dict:
        """Actualiza todos los campos editables de una propiedad."""
        data = prop.to_db_dict()
        data["updated_at"] = datetime.utcnow().isoformat()
        response = (
            self.client.table(self.TABLE)
            .update(data)
            .eq("id", property_id)
            .execute()
        )
        logger.info("Propiedad actualizada", property_id=property_id)
        return response.data[0] if response.data else {}

    def delete(self, property_id: str) -> bool:
        """Borra una propiedad. Devuelve True si existía."""
        response = (
            self.client.table(self.TABLE)
            .delete()
            .eq("id", property_id)
            .execute()
        )
        logger.info("Propiedad eliminada", property_id=property_id)
        return len(response.data) > 0


class ProfileRepository(BaseRepository):
    """Repositorio para perfiles de usuario."""

    TABLE = "profiles"

    def get_by_user_id(self, user_id: str) -> Optional[dict]:
        """Obtiene el perfil asociado a un usuario de Auth."""
        response = (
            self.client.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def update(self, user_id: str, updates: dict) -> dict:
        """Actualiza campos del perfil de un usuario."""
        data = {**updates, "updated_at": datetime.utcnow().isoformat()}
        response = (
            self.client.table(self.TABLE)
            .update(data)
            .eq("user_id", user_id)
            .execute()
        )
        logger.info("Perfil actualizado", user_id=user_id, fields=sorted(updates))
        return response.data[0] if response.data else {}
