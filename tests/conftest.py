"""Shared pytest fixtures and markers for all tests."""

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "cli: marks Textual pilot tests (deselect with '-m \"not cli\"')"
    )


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Keep DONTSAY_* variables from the caller's shell out of the tests."""
    for name in (
        "DONTSAY_COMPUTER_DELAY_MS",
        "DONTSAY_DEFAULT_TARGET",
        "DONTSAY_DEFAULT_STEPS",
        "DONTSAY_MAX_TARGET",
        "DONTSAY_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def classic_config():
    """Target 13, steps 1 and 2, reaching 13 loses."""
    from dontsay.models.config import GameConfig
    return GameConfig(target=13, steps=(1, 2))


@pytest.fixture
def last_move_wins_config():
    """Target 13, steps 1 and 2, reaching 13 wins."""
    from dontsay.models.config import GameConfig
    return GameConfig(target=13, steps=(1, 2), last_move_wins=True)


@pytest.fixture
def two_player_engine():
    """Engine with the classic configuration in two-player mode."""
    from dontsay.engine.game_engine import create_game
    from dontsay.models.state import GameMode
    return create_game(13, "1,2", GameMode.TWO_PLAYER)


@pytest.fixture
def vs_computer_engine():
    """Engine with the classic configuration against the computer."""
    from dontsay.engine.game_engine import create_game
    from dontsay.models.state import GameMode
    return create_game(13, "1,2", GameMode.VS_COMPUTER)
