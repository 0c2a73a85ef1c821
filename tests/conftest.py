"""Pytest configuration and shared fixtures for estimator tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from furniture_estimator.domain import RateTable, SofaSpec, TableSpec, WardrobeSpec


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def default_rates() -> RateTable:
    """Built-in default rate table."""
    return RateTable.defaults()


@pytest.fixture
def wardrobe() -> WardrobeSpec:
    """72x36x24 two-door wardrobe with two shelves, rod and back panel."""
    return WardrobeSpec(
        height=72,
        width=36,
        depth=24,
        num_shelves=2,
        num_drawers=0,
        num_doors=2,
        has_hanging_rod=True,
        has_back_panel=True,
    )


@pytest.fixture
def table() -> TableSpec:
    """48x24x30 table."""
    return TableSpec(table_length=48, table_width=24, table_height=30)


@pytest.fixture
def sofa() -> SofaSpec:
    """80x36x30 sofa with three seat and three back cushions and arms."""
    return SofaSpec(
        sofa_length=80,
        sofa_depth=36,
        sofa_height=30,
        num_seat_cushions=3,
        num_back_cushions=3,
        has_arms=True,
    )


@pytest.fixture
def rates_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated directory for persisted rates, also set as the default home."""
    directory = tmp_path / "estimator-home"
    monkeypatch.setenv("FURNITURE_ESTIMATOR_HOME", str(directory))
    return directory
