"""Port for module entitlements stored on settings and plans."""

from typing import Protocol


class EntitlementsRepositoryPort(Protocol):
    """Port exposing raw entitlement flag maps."""

    def fetch_plan_modules(self, plan_id: str) -> dict[str, object] | None:
        """Return the module map of a plan, or None when missing."""

    def fetch_user_flags(self, user_id: str) -> dict[str, object] | None:
        """Return the settings row of a user, or None when missing."""

    def save_user_flags(
        self,
        user_id: str,
        flags: dict[str, bool],
    ) -> None:
        """Upsert the module flags of a user."""


__all__ = ["EntitlementsRepositoryPort"]
