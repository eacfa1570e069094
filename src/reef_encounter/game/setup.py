"""Game construction and preparation."""

import logging
from enum import Enum
from typing import Any, Sequence

from reef_encounter.board.open_sea import OpenSeaBoard
from reef_encounter.board.reef import CoralReefBoard
from reef_encounter.data import base_game
from reef_encounter.data.models import GameInfo, LarvaCube, PolypTile, ResourceKind
from reef_encounter.errors import (
    InvalidChoiceError,
    InvalidPlayerCountError,
    SetupPhaseError,
)
from reef_encounter.rng import Seed, make_rng
from reef_encounter.state.player import Player
from reef_encounter.stock.pool import ShuffledPool
from reef_encounter.stock.supply import PartitionedSupply
from .prompts import ConsolePrompter, Prompter

logger = logging.getLogger(__name__)


class GamePhase(str, Enum):
    """Setup phase; only moves forward."""

    CONSTRUCTED = "constructed"
    PREPARING = "preparing"
    PREPARED = "prepared"
    STARTED = "started"


class Game:
    """A game of Reef Encounter, up to the point where play begins.

    All randomness (player order, board selection, bag shuffles) comes from a
    single RNG, so a fixed seed reproduces the whole setup.
    """

    def __init__(
        self,
        n_players: int,
        *,
        seed: Seed = None,
        prompter: Prompter | None = None,
        game_info: GameInfo = base_game,
    ):
        if n_players not in game_info.starting_hands:
            raise InvalidPlayerCountError(
                f"Invalid number of players: {n_players}, "
                f"expected one of {game_info.player_counts}"
            )
        self.n_players = n_players
        self.game_info = game_info
        self.rng = make_rng(seed)
        self.prompter = prompter
        self.phase = GamePhase.CONSTRUCTED

        # Creation order decides colors, the shuffle decides turn order
        player_colors = game_info.colors_for(ResourceKind.PLAYER)[:n_players]
        self.players = [
            Player.create(c, n_shrimp=game_info.shrimp_per_player)
            for c in player_colors
        ]
        self.player_order = list(self.players)
        self.rng.shuffle(self.player_order)

        self.coral_reef_boards = self.rng.sample(
            CoralReefBoard.starting_boards(game_info), k=n_players
        )
        self.open_sea_board = OpenSeaBoard.from_game_info(game_info)
        self.tile_bag: ShuffledPool[PolypTile] = ShuffledPool(
            game_info.initial_distribution(ResourceKind.POLYP_TILE),  # type: ignore
            rng=self.rng,
            colors=game_info.colors_for(ResourceKind.POLYP_TILE),
        )
        self.larva_cube_supply: PartitionedSupply[LarvaCube] = PartitionedSupply(
            game_info.initial_distribution(ResourceKind.LARVA_CUBE)  # type: ignore
        )
        logger.info(
            f"Created a {n_players}-player game, order: "
            + ", ".join(str(p) for p in self.player_order)
        )

    def _check_phase(self, expected: GamePhase, action: str) -> None:
        if self.phase != expected:
            raise SetupPhaseError(
                f"Can't {action} in phase {self.phase.value!r}, "
                f"expected {expected.value!r}"
            )

    @property
    def starting_hands(self) -> list[int]:
        """Hand sizes dealt in player order."""
        return list(self.game_info.starting_hands[self.n_players])

    # Preparation

    def prepare(self) -> None:
        """Distribute the starting pieces.

        If anything fails, the game stays in the PREPARING phase and can't be
        prepared again.
        """
        self._check_phase(GamePhase.CONSTRUCTED, "prepare")
        self.phase = GamePhase.PREPARING
        self._prepare_coral_reef_boards()
        self._prepare_open_sea_board()
        self._prepare_player_resources()
        self.phase = GamePhase.PREPARED

    def _prepare_coral_reef_boards(self) -> None:
        logger.info("Preparing the coral reef boards...")
        tile_colors = self.game_info.colors_for(ResourceKind.POLYP_TILE)
        for board in self.coral_reef_boards:
            tiles = self.tile_bag.draw_colors(*tile_colors)
            board.add_starting_tiles(tiles)

    def _prepare_open_sea_board(self) -> None:
        logger.info("Preparing the open sea board...")
        for space in self.open_sea_board.each_space():
            space.place_cube(self.larva_cube_supply.draw_color(space.larva_cube_color))

        batches = [
            self.tile_bag.draw_many(n) for n in self.game_info.open_sea_tile_batches
        ]
        self.rng.shuffle(batches)
        spaces = list(self.open_sea_board.each_space())
        for space, batch in zip(spaces, batches, strict=True):
            space.add_tiles(*batch)

    def _prepare_player_resources(self) -> None:
        logger.info("Preparing the player resources...")
        for player, n_tiles in zip(self.player_order, self.starting_hands):
            player.player_screen.behind.tiles += self.tile_bag.draw_many(n_tiles)

    # Start of play

    def start(self) -> None:
        """Let players make their opening choices."""
        self._check_phase(GamePhase.PREPARED, "start")
        if self.prompter is None:
            self.prompter = ConsolePrompter()
        logger.info("Starting game...")
        self._prompt_each_player_to_feed_parrot_fish()
        self._prompt_each_player_to_choose_two_cubes()
        self.phase = GamePhase.STARTED

    def _ask(self, player: Player, message: str, choices: Sequence[Any]) -> Any:
        choice = self.prompter(player, message, list(choices))  # type: ignore
        if choice not in choices:
            raise InvalidChoiceError(f"{player} chose {choice!r}, which wasn't offered")
        return choice

    def _prompt_each_player_to_feed_parrot_fish(self) -> None:
        for player in self.player_order:
            behind = player.player_screen.behind
            tile = self._ask(
                player, "please select a polyp tile to put in your parrot fish", behind.tiles
            )
            behind.tiles.remove(tile)
            player.parrot_fish.eat(tile)

    def _prompt_each_player_to_choose_two_cubes(self) -> None:
        cube_colors = self.game_info.colors_for(ResourceKind.LARVA_CUBE)
        for player in self.player_order:
            for _ in range(2):
                color = self._ask(
                    player,
                    "please select a larva cube to put behind your player screen",
                    cube_colors,
                )
                cube = self.larva_cube_supply.draw_color(color)
                player.player_screen.behind.cubes.append(cube)
