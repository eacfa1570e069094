"""Command-line driver: set up a game and report the result."""

import argparse
import logging
import sys

from reef_encounter.errors import ReefEncounterError
from reef_encounter.game.prompts import ConsolePrompter
from reef_encounter.game.setup import Game

logger = logging.getLogger(__name__)


def setup_report(game: Game) -> str:
    """Describe the prepared game."""
    lines = [f"Player order: {', '.join(str(p) for p in game.player_order)}"]
    for board in game.coral_reef_boards:
        lines.append(f"Coral reef board {board.name}: {board.count_tiles()} tiles")
    for space in game.open_sea_board.each_space():
        cube = space.larva_cube.color.value if space.larva_cube else "none"
        lines.append(
            f"Open sea {space.larva_cube_color.value} space: "
            f"cube {cube}, {len(space.tiles)} tiles"
        )
    for player in game.player_order:
        lines.append(f"{player}\n{player.supply_report()}")
    lines.append(f"Tiles left in the bag: {game.tile_bag.size}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Set up a game of Reef Encounter.")
    parser.add_argument("--players", type=int, default=2, help="number of players")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="also make the opening choices on the console",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    try:
        game = Game(args.players, seed=args.seed, prompter=ConsolePrompter())
        game.prepare()
        print(setup_report(game))
        if args.interactive:
            game.start()
            print(setup_report(game))
    except ReefEncounterError as exc:
        logger.error(f"Setup failed ({type(exc).__name__}): {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
