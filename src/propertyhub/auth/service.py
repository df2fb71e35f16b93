"""
Servicio de autenticación.

Envuelve Supabase Auth y mantiene el estado de la sesión actual
junto con el perfil (rol) del usuario.
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from propertyhub.auth.errors import AuthError, NotAuthenticatedError, PermissionDeniedError
from propertyhub.config import Settings, get_settings
from propertyhub.database import ProfileRepository, SupabaseClient, get_supabase_client
from propertyhub.models import Profile

logger = structlog.get_logger()

# Campos del perfil que el propio usuario puede modificar
SELF_EDITABLE_FIELDS = frozenset({"full_name", "phone", "avatar_url"})


@dataclass
class AuthState:
    """Sesión activa: usuario de Auth más su perfil (si existe)."""

    user_id: str
    email: Optional[str]
    access_token: Optional[str] = None
    profile: Optional[Profile] = None


class AuthService:
    """
    Sign up, sign in y sign out contra Supabase Auth.

    Tras cada login se carga el perfil desde 'profiles'; un perfil
    faltante no invalida la sesión, solo deja al usuario sin rol.
    """

    def __init__(
        self,
        client: Optional[SupabaseClient] = None,
        profile_repo: Optional[ProfileRepository] = None,
        settings: Optional[Settings] = None,
    ):
        self._client = client or get_supabase_client()
        self.profile_repo = profile_repo or ProfileRepository(self._client)
        self.settings = settings or get_settings()
        self.state: Optional[AuthState] = None

    @property
    def is_authenticated(self) -> bool:
        return self.state is not None

    @property
    def profile(self) -> Optional[Profile]:
        return self.state.profile if self.state else None

    def sign_up(self, email: str, password: str, full_name: Optional[str] = None):
        """
        Registra un usuario nuevo.

        Supabase envía el mail de confirmación con redirect al sitio.

        Returns:
            El usuario creado por Supabase

        Raises:
            AuthError: Si el proveedor rechaza el registro
        """
        redirect_url = f"{self.settings.site_url.rstrip('/')}/"
        try:
            response = self._client.auth.sign_up(
                {
                    "email": email,
                    "password": password,
                    "options": {
                        "email_redirect_to": redirect_url,
                        "data": {"full_name": full_name},
                    },
                }
            )
        except Exception as e:
            logger.error("Error en sign up", email=email, error=str(e))
            raise AuthError(str(e)) from e

        logger.info("Usuario registrado", email=email)
        return response.user

    def sign_in(self, email: str, password: str) -> AuthState:
        """
        Inicia sesión con email y contraseña.

        Raises:
            AuthError: Si las credenciales son inválidas
        """
        try:
            response = self._client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except Exception as e:
            logger.warning("Login rechazado", email=email, error=str(e))
            raise AuthError(str(e)) from e

        if response.user is None:
            raise AuthError("Supabase no devolvió un usuario")

        self.state = self._build_state(response.user, response.session)
        logger.info(
            "Sesión iniciada",
            user_id=self.state.user_id,
            role=self.profile.role if self.profile else None,
        )
        return self.state

    def restore_session(self) -> Optional[AuthState]:
        """Adopta la sesión persistida por el cliente de Supabase, si existe."""
        session = self._client.auth.get_session()
        if session is None or session.user is None:
            self.state = None
            return None

        self.state = self._build_state(session.user, session)
        return self.state

    def sign_out(self) -> None:
        """Cierra la sesión actual."""
        try:
            self._client.auth.sign_out()
        except Exception as e:
            logger.error("Error en sign out", error=str(e))
            raise AuthError(str(e)) from e
        finally:
            self.state = None

    def update_profile(self, **updates) -> Optional[Profile]:
        """
        Actualiza el perfil del usuario logueado.

        Solo se aceptan los campos de SELF_EDITABLE_FIELDS; el rol y los
        identificadores se gestionan fuera de la aplicación.

        Raises:
            NotAuthenticatedError: Si no hay sesión
            PermissionDeniedError: Si se intenta cambiar un campo protegido
            ValueError: Si el perfil resultante no valida
        """
        if self.state is None:
            raise NotAuthenticatedError("No user logged in")

        forbidden = set(updates) - SELF_EDITABLE_FIELDS
        if forbidden:
            logger.warning(
                "Intento de editar campos protegidos del perfil",
                user_id=self.state.user_id,
                fields=sorted(forbidden),
            )
            raise PermissionDeniedError(
                f"Profile fields cannot be changed: {', '.join(sorted(forbidden))}"
            )

        if self.state.profile is not None:
            merged = Profile.model_validate({**self.state.profile.model_dump(), **updates})
        else:
            merged = None

        row = self.profile_repo.update(self.state.user_id, updates)
        if row:
            self.state.profile = Profile.model_validate(row)
        elif merged is not None:
            self.state.profile = merged
        return self.state.profile

    def require_user(self) -> AuthState:
        """Devuelve la sesión actual o falla si no hay usuario."""
        if self.state is None:
            raise NotAuthenticatedError("Please sign in to continue")
        return self.state

    def _build_state(self, user, session) -> AuthState:
        return AuthState(
            user_id=user.id,
            email=getattr(user, "email", None),
            access_token=getattr(session, "access_token", None),
            profile=self._fetch_profile(user.id),
        )

    def _fetch_profile(self, user_id: str) -> Optional[Profile]:
        try:
            row = self.profile_repo.get_by_user_id(user_id)
        except Exception as e:
            logger.error("Error obteniendo perfil", user_id=user_id, error=str(e))
            return None

        if row is None:
            logger.warning("Usuario sin perfil", user_id=user_id)
            return None
        return Profile.model_validate(row)
