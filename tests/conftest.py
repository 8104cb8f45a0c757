"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from pathlib import Path

import pytest

from assetflow.config import RuleSet
from assetflow.types import Options, Rule


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def configs_root(fixtures_root: Path) -> Path:
    """Return the directory holding sample transformation configs."""
    return fixtures_root / "configs"


@pytest.fixture()
def fqdn_rule_set() -> RuleSet:
    """Hand-built rule set with explicit, wildcard and unranked rules."""
    return RuleSet(
        options=Options(),
        rules={
            "FQDN->IPAddress": Rule(source="fqdn", target="ipaddress", priority=1, confidence=80),
            "FQDN->DomainRecord": Rule(source="fqdn", target="domainrecord", priority=2, confidence=50),
            "FQDN->ALL": Rule(
                source="fqdn",
                target="all",
                confidence=50,
                exclude=frozenset({"tls", "fqdn", "rirorg"}),
            ),
            "DomainRecord->ALL": Rule(
                source="domainrecord",
                target="all",
                confidence=50,
                exclude=frozenset({"fqdn"}),
            ),
            "Netblock->none": Rule(source="netblock", target="none", confidence=50),
        },
    )
