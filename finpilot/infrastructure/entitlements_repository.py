"""SQLAlchemy-backed repository for module entitlement flags."""

import json

from sqlalchemy import text

from finpilot.application.ports.database import DatabaseEnginePort
from finpilot.application.ports.entitlements_repository import (
    EntitlementsRepositoryPort,
)
from finpilot.domain.errors import InvalidEntitlementsError
from finpilot.domain.models.entitlements import MODULE_FLAGS

SELECT_PLAN_MODULES_SQL = text(
    """
    SELECT modules
    FROM plans
    WHERE id = :plan_id
    """
)

SELECT_USER_SETTINGS_SQL = text(
    """
    SELECT *
    FROM user_settings
    WHERE user_id = :user_id
    """
)

_KNOWN_FLAGS = frozenset(MODULE_FLAGS.values())


class SqlAlchemyEntitlementsRepository(EntitlementsRepositoryPort):
    """Entitlements stored on ``user_settings`` and ``plans.modules``."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_plan_modules(self, plan_id: str) -> dict[str, object] | None:
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_PLAN_MODULES_SQL,
                {"plan_id": plan_id},
            ).first()
        if row is None:
            return None
        modules = row.modules
        if isinstance(modules, str):
            modules = json.loads(modules)
        return dict(modules or {})

    def fetch_user_flags(self, user_id: str) -> dict[str, object] | None:
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_USER_SETTINGS_SQL,
                {"user_id": user_id},
            ).first()
        if row is None:
            return None
        return dict(row._mapping)

    def save_user_flags(
        self,
        user_id: str,
        flags: dict[str, bool],
    ) -> None:
        """Upsert the module flags of a user.

        Args:
            user_id: Store user identifier.
            flags: Store flag names mapped to booleans.

        Raises:
            InvalidEntitlementsError: If a flag name is not a known column.
        """
        unknown = sorted(set(flags) - _KNOWN_FLAGS)
        if unknown:
            raise InvalidEntitlementsError(
                f"Unknown entitlement flags: {', '.join(unknown)}"
            )
        if not flags:
            return
        columns = sorted(flags)
        column_list = ", ".join(columns)
        value_list = ", ".join(f":{name}" for name in columns)
        update_list = ", ".join(
            f"{name} = EXCLUDED.{name}" for name in columns
        )
        query = text(
            f"""
            INSERT INTO user_settings (user_id, {column_list})
            VALUES (:user_id, {value_list})
            ON CONFLICT (user_id) DO UPDATE SET {update_list}
            """
        )
        params = {"user_id": user_id}
        params.update({name: flags[name] for name in columns})
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            conn.execute(query, params)


__all__ = ["SqlAlchemyEntitlementsRepository"]
