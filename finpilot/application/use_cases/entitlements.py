"""Use cases reading and syncing module entitlements."""

from finpilot.application.ports.entitlements_repository import (
    EntitlementsRepositoryPort,
)
from finpilot.domain.errors import InvalidEntitlementsError
from finpilot.domain.models import ModuleEntitlements
from finpilot.infrastructure.logging.logger import get_app_logger


class GetEntitlementsUseCase:
    """Load and validate the module entitlements of a user."""

    def __init__(
        self,
        repository: EntitlementsRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str) -> ModuleEntitlements:
        """Return the user's entitlements (all disabled without settings)."""
        flags = self._repository.fetch_user_flags(user_id)
        if flags is None:
            self._logger.info(f"No settings found for user {user_id}")
        return ModuleEntitlements.from_flags(flags, logger=self._logger)


class SyncEntitlementsWithPlanUseCase:
    """Overwrite a user's module flags with those of a plan."""

    def __init__(
        self,
        repository: EntitlementsRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, plan_id: str) -> ModuleEntitlements:
        """Apply the plan's modules to the user and return them.

        Raises:
            InvalidEntitlementsError: If the plan is missing or defines
                no modules.
        """
        modules = self._repository.fetch_plan_modules(plan_id)
        if modules is None:
            raise InvalidEntitlementsError(f"Plan not found: {plan_id}")
        entitlements = ModuleEntitlements.from_plan_modules(modules)
        self._repository.save_user_flags(user_id, entitlements.to_flags())
        self._logger.info(
            f"Synced user {user_id} with plan {plan_id}: "
            f"{', '.join(entitlements.enabled_modules()) or 'no modules'}"
        )
        return entitlements


__all__ = ["GetEntitlementsUseCase", "SyncEntitlementsWithPlanUseCase"]
