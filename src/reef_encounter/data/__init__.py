"""Load the Reef Encounter setup data."""

from pathlib import Path

from pydantic_yaml import parse_yaml_file_as

from .models import GameInfo

__all__ = ["data_path", "base_game"]

data_path = Path(__file__).parent

base_game: GameInfo = parse_yaml_file_as(GameInfo, data_path / "base_game.yaml")
"""Built-in game data: colors, quantities, layouts and schedules."""
