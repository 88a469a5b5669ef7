"""Module entitlements as a closed set of named capabilities.

The store keeps entitlements as a map of ``<module>_ativo`` flags on
``user_settings`` rows and on plan definitions. Those maps are validated
here, at the fetch boundary, so the rest of the code only sees
``ModuleEntitlements``.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from logging import Logger

from finpilot.domain.errors import InvalidEntitlementsError

# Capability name -> store flag.
MODULE_FLAGS = {
    "dashboard": "dashboard_ativo",
    "ledger": "lancamentos_ativo",
    "clients": "clientes_ativo",
    "suppliers": "fornecedores_ativo",
    "inventory": "estoque_ativo",
    "store_credit": "crediario_ativo",
    "bank_accounts": "contas_bancarias_ativo",
    "bank_reconciliation": "conciliacao_bancaria_ativo",
    "recurring_payments": "recorrentes_ativo",
    "reports": "relatorios_ativo",
    "dre": "dre_ativo",
    "cashflow": "fluxo_de_caixa_ativo",
    "budget_planning": "planejamento_orcamentario_ativo",
    "ai_advisor": "ia_ativo",
    "message_dispatch": "disparos_ativo",
}

_CAPABILITY_BY_FLAG = {flag: name for name, flag in MODULE_FLAGS.items()}

# Non-flag columns that live next to the flags on settings rows.
_SETTINGS_COLUMNS = frozenset(
    {"id", "user_id", "created_at", "updated_at"}
)


@dataclass(frozen=True)
class ModuleEntitlements:
    """Enabled application modules for one user."""

    dashboard: bool = False
    ledger: bool = False
    clients: bool = False
    suppliers: bool = False
    inventory: bool = False
    store_credit: bool = False
    bank_accounts: bool = False
    bank_reconciliation: bool = False
    recurring_payments: bool = False
    reports: bool = False
    dre: bool = False
    cashflow: bool = False
    budget_planning: bool = False
    ai_advisor: bool = False
    message_dispatch: bool = False

    @classmethod
    def from_flags(
        cls,
        flags: Mapping[str, object] | None,
        logger: Logger | None = None,
    ) -> "ModuleEntitlements":
        """Build entitlements from a store flag map.

        Args:
            flags: Raw ``<module>_ativo`` map (missing flags are disabled).
            logger: Optional logger used to report unknown flags.

        Returns:
            ModuleEntitlements: Validated entitlements.

        Raises:
            InvalidEntitlementsError: If a known flag is not a boolean.
        """
        values: dict[str, bool] = {}
        for flag, raw in (flags or {}).items():
            capability = _CAPABILITY_BY_FLAG.get(flag)
            if capability is None:
                if flag not in _SETTINGS_COLUMNS and logger is not None:
                    logger.warning(f"Ignoring unknown module flag: {flag}")
                continue
            if raw is None:
                continue
            if not isinstance(raw, bool):
                raise InvalidEntitlementsError(
                    f"Module flag {flag} must be a boolean, got {raw!r}"
                )
            values[capability] = raw
        return cls(**values)

    @classmethod
    def from_plan_modules(
        cls,
        modules: Mapping[str, object] | None,
    ) -> "ModuleEntitlements":
        """Build entitlements from a plan's module map.

        Plan maps are looser than settings rows: any truthy value enables
        the module.

        Raises:
            InvalidEntitlementsError: If the plan defines no modules.
        """
        if not modules:
            raise InvalidEntitlementsError("Plan does not define modules.")
        return cls(
            **{
                name: bool(modules.get(flag))
                for name, flag in MODULE_FLAGS.items()
            }
        )

    def to_flags(self) -> dict[str, bool]:
        """Return the store flag map for these entitlements."""
        return {
            MODULE_FLAGS[name]: enabled
            for name, enabled in asdict(self).items()
        }

    def enabled_modules(self) -> list[str]:
        """Return enabled capability names in declaration order."""
        return [
            item.name for item in fields(self) if getattr(self, item.name)
        ]

    def allows(self, capability: str) -> bool:
        """Return whether a capability is enabled.

        Raises:
            InvalidEntitlementsError: If the capability is unknown.
        """
        if capability not in MODULE_FLAGS:
            raise InvalidEntitlementsError(
                f"Unknown module capability: {capability}"
            )
        return getattr(self, capability)


__all__ = ["MODULE_FLAGS", "ModuleEntitlements"]
