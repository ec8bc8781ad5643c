"""Pytest configuration and shared fixtures."""

import pytest

from scouting_scheduler.domain.models import EventConfig, Personnel
from scouting_scheduler.engine.generator import generate_schedule
from scouting_scheduler.services.turns import build_shift_config


def pytest_configure(config):
    """Configure pytest."""
    # Add custom markers
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )


@pytest.fixture
def frc_event():
    """72-match FRC event, six positions per match."""
    return EventConfig(
        local_label="Test Regional",
        tba_label="2026test",
        amount_of_teams=60,
        matches_per_team=8,
        total_matches=72,
        teams_per_match=6,
    )


@pytest.fixture
def ftc_event():
    return EventConfig(
        local_label="FTC Qualifier",
        tba_label="FTCScout",
        amount_of_teams=30,
        matches_per_team=5,
        total_matches=45,
        teams_per_match=4,
        alliance_blue="Azul",
        alliance_red="Rojo",
    )


@pytest.fixture
def six_scouters():
    return Personnel(
        lead_scouters=["L1", "L2"],
        scouters=[f"S{i}" for i in range(1, 7)],
        cameras=["C1"],
    )


@pytest.fixture
def eight_scouters():
    return Personnel(
        lead_scouters=["L1", "L2"],
        scouters=[f"S{i}" for i in range(1, 9)],
        cameras=["C1", "C2"],
    )


@pytest.fixture
def three_turns():
    """Turns 1-20, 21-40, 41-72."""
    return build_shift_config(72, [20, 40])


@pytest.fixture
def eight_scouter_schedule(frc_event, eight_scouters, three_turns):
    result = generate_schedule(frc_event, eight_scouters, three_turns)
    assert result.success
    return result.schedule
