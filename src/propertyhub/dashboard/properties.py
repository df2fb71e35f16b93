"""
Dashboard de propiedades para agentes y admins.

Los admins gestionan todas las propiedades; los agentes solo las propias.
"""

from typing import Optional

import structlog

from propertyhub.auth import AuthService, PermissionDeniedError
from propertyhub.database import PropertyRepository
from propertyhub.models import Profile, Property, PropertyForm

logger = structlog.get_logger()


class PropertyDashboard:
    """CRUD de propiedades sujeto al rol del usuario logueado."""

    def __init__(
        self,
        auth: AuthService,
        repository: Optional[PropertyRepository] = None,
    ):
        self.auth = auth
        self.repository = repository or PropertyRepository()

    def _require_manager(self) -> Profile:
        """
        Verifica que haya sesión y que el perfil sea agente o admin.

        Raises:
            NotAuthenticatedError: Si no hay usuario logueado
            PermissionDeniedError: Si el rol no puede gestionar propiedades
        """
        state = self.auth.require_user()
        profile = state.profile
        if profile is None or not profile.can_manage_properties:
            raise PermissionDeniedError(
                "Only agents and admins can manage properties."
            )
        return profile

    def list_properties(self) -> list[Property]:
        """Propiedades visibles para el usuario, más recientes primero."""
        profile = self._require_manager()
        try:
            if profile.is_admin:
                rows = self.repository.get_all()
            else:
                rows = self.repository.get_by_agent(profile.id)
        except Exception as e:
            logger.error("Error obteniendo propiedades", profile_id=profile.id, error=str(e))
            raise

        return [Property.model_validate(row) for row in rows]

    def save(self, form: PropertyForm, property_id: Optional[str] = None) -> dict:
        """
        Crea o actualiza una propiedad desde el formulario.

        Un alta queda a nombre del usuario actual; una edición conserva
        el agente original de la propiedad.

        Args:
            form: Estado del formulario
            property_id: ID a actualizar (None = alta)

        Returns:
            La fila guardada

        Raises:
            LookupError: Si la propiedad a editar no existe
            PermissionDeniedError: Si un agente edita una propiedad ajena
        """
        profile = self._require_manager()

        action = "update" if property_id else "create"
        try:
            if property_id:
                existing = self.repository.get_by_id(property_id)
                if existing is None:
                    raise LookupError(f"Property {property_id} not found")
                self._check_owner(existing, profile)
                prop = form.to_property(agent_id=existing.get("agent_id"))
                row = self.repository.update(property_id, prop)
            else:
                prop = form.to_property(agent_id=profile.id)
                row = self.repository.create(prop)
        except (LookupError, PermissionDeniedError, ValueError):
            raise
        except Exception as e:
            logger.error(
                "Error guardando propiedad",
                action=action,
                property_id=property_id,
                error=str(e),
            )
            raise

        logger.info("Propiedad guardada", action=action, profile_id=profile.id)
        return row

    def delete(self, property_id: str) -> bool:
        """Elimina una propiedad. Los agentes solo pueden borrar las propias."""
        profile = self._require_manager()
        try:
            existing = self.repository.get_by_id(property_id)
            if existing is None:
                logger.warning(
                    "Propiedad no encontrada para eliminar",
                    property_id=property_id,
                    profile_id=profile.id,
                )
                return False
            self._check_owner(existing, profile)
            return self.repository.delete(property_id)
        except PermissionDeniedError:
            raise
        except Exception as e:
            logger.error("Error eliminando propiedad", property_id=property_id, error=str(e))
            raise

    @staticmethod
    def _check_owner(row: dict, profile: Profile) -> None:
        if profile.is_admin or row.get("agent_id") == profile.id:
            return
        logger.warning(
            "Agente intentó modificar propiedad ajena",
            property_id=row.get("id"),
            profile_id=profile.id,
        )
        raise PermissionDeniedError("Agents can only manage their own properties.")

    @staticmethod
    def edit_form(prop: Property) -> PropertyForm:
        """Formulario precargado para editar `prop`."""
        return PropertyForm.from_property(prop)
