"""Tests for module entitlements."""

from unittest.mock import MagicMock

import pytest

from finpilot.domain.errors import InvalidEntitlementsError
from finpilot.domain.models.entitlements import (
    MODULE_FLAGS,
    ModuleEntitlements,
)


def test_from_flags_maps_store_flags_to_capabilities() -> None:
    """Known flags become capabilities; missing ones stay disabled."""
    entitlements = ModuleEntitlements.from_flags(
        {
            "user_id": "u1",
            "dashboard_ativo": True,
            "dre_ativo": True,
            "ia_ativo": False,
            "crediario_ativo": None,
        }
    )

    assert entitlements.dashboard is True
    assert entitlements.dre is True
    assert entitlements.ai_advisor is False
    assert entitlements.store_credit is False
    assert entitlements.enabled_modules() == ["dashboard", "dre"]


def test_from_flags_warns_on_unknown_flags() -> None:
    """Unknown flags are ignored with a warning; row columns silently."""
    logger = MagicMock()

    entitlements = ModuleEntitlements.from_flags(
        {"id": 1, "beta_ativo": True, "cashflow_x": True},
        logger=logger,
    )

    assert entitlements == ModuleEntitlements()
    assert logger.warning.call_count == 2


def test_from_flags_rejects_non_boolean_values() -> None:
    """Truthy strings are not accepted as booleans."""
    with pytest.raises(InvalidEntitlementsError):
        ModuleEntitlements.from_flags({"dre_ativo": "true"})


def test_to_flags_round_trips_through_from_flags() -> None:
    """to_flags produces every store flag."""
    entitlements = ModuleEntitlements(cashflow=True, budget_planning=True)

    flags = entitlements.to_flags()

    assert set(flags) == set(MODULE_FLAGS.values())
    assert flags["fluxo_de_caixa_ativo"] is True
    assert ModuleEntitlements.from_flags(flags) == entitlements


def test_from_plan_modules_casts_values() -> None:
    """Plan module maps enable any truthy flag."""
    entitlements = ModuleEntitlements.from_plan_modules(
        {"dashboard_ativo": 1, "dre_ativo": 0}
    )

    assert entitlements.dashboard is True
    assert entitlements.dre is False


@pytest.mark.parametrize("modules", [None, {}])
def test_from_plan_modules_requires_modules(modules) -> None:
    """A plan without modules is invalid."""
    with pytest.raises(InvalidEntitlementsError):
        ModuleEntitlements.from_plan_modules(modules)


def test_allows_checks_known_capabilities() -> None:
    """allows answers for known capabilities and rejects unknown ones."""
    entitlements = ModuleEntitlements(reports=True)

    assert entitlements.allows("reports") is True
    assert entitlements.allows("inventory") is False
    with pytest.raises(InvalidEntitlementsError):
        entitlements.allows("teleport")
