"""
Modelo de Perfil de usuario.

Cada usuario de Supabase Auth tiene una fila en 'profiles' con su rol.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

UserRole = Literal["user", "agent", "admin"]


class Profile(BaseModel):
    """Perfil público de un usuario autenticado."""

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: str = Field(..., description="UUID del perfil")
    user_id: str = Field(..., description="FK al usuario de Supabase Auth")
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    role: UserRole = Field(default="user", description="user, agent o admin")
    avatar_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    @property
    def can_manage_properties(self) -> bool:
        """Agentes y admins pueden usar el dashboard de propiedades."""
        return self.role in ("agent", "admin")
