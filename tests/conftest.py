from __future__ import annotations

import pytest

from src.engine.models import GameConfig, Player, PlayerId
from src.engine.registry import PluginRegistry
from src.games.matchsticks.plugin import MatchsticksPlugin

# Player 0 walks around the hexagon centred on (-1, 0), laying one matchstick
# per lap segment; player 1 alternately lays and picks up the same edge.
WINNING_SCRIPT: list[tuple[str, str]] = [
    ("expand", "0,-1:W"), ("expand", "1,0:W"),
    ("move", "0,-1"), ("resupply", "1,0:W"),
    ("expand", "-1,-1:S"), ("expand", "1,0:W"),
    ("move", "-1,-1"), ("resupply", "1,0:W"),
    ("expand", "-2,-1:E"), ("expand", "1,0:W"),
    ("move", "-2,0"), ("resupply", "1,0:W"),
    ("expand", "-2,0:W"), ("expand", "1,0:W"),
    ("move", "-2,1"), ("resupply", "1,0:W"),
    ("expand", "-2,1:S"), ("expand", "1,0:W"),
    ("move", "-1,1"), ("resupply", "1,0:W"),
    ("expand", "-1,0:E"),
]


@pytest.fixture
def winning_script() -> list[tuple[str, str]]:
    return list(WINNING_SCRIPT)


@pytest.fixture
def players() -> list[Player]:
    return [
        Player(player_id=PlayerId("p1"), display_name="Alice", seat_index=0),
        Player(player_id=PlayerId("p2"), display_name="Bob", seat_index=1),
    ]


@pytest.fixture
def plugin() -> MatchsticksPlugin:
    return MatchsticksPlugin()


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def test_registry():
    """Create a test plugin registry with a mock game plugin."""
    from tests.engine.test_registry import MockPlugin

    registry = PluginRegistry()
    registry.register(MockPlugin())
    return registry
