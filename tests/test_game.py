from collections import Counter
from random import Random

import pytest

from reef_encounter.data import base_game
from reef_encounter.data.models import Color, KindStock, ResourceKind
from reef_encounter.errors import (
    EmptyPoolError,
    InvalidChoiceError,
    InvalidPlayerCountError,
    SetupPhaseError,
)
from reef_encounter.game.setup import Game, GamePhase

PLAYER_COUNTS = [2, 3, 4]
SCHEDULES = {2: [6, 9], 3: [6, 7, 9], 4: [6, 7, 8, 9]}


def pick_first(player, message, choices):
    return choices[0]


def make_game(n_players: int, seed: int = 0) -> Game:
    return Game(n_players, seed=seed, prompter=pick_first)


@pytest.fixture(params=PLAYER_COUNTS)
def n_players(request) -> int:
    return request.param


@pytest.fixture
def prepared(n_players) -> Game:
    game = make_game(n_players)
    game.prepare()
    return game


class TestConstruction:
    @pytest.mark.parametrize("bad", [0, 1, 5, -2])
    def test_invalid_player_count(self, bad):
        with pytest.raises(InvalidPlayerCountError):
            Game(bad)

    def test_players(self, n_players):
        game = make_game(n_players)
        assert len(game.players) == n_players
        assert len({p.color for p in game.players}) == n_players
        assert all(len(p.player_screen.behind.shrimp) == 4 for p in game.players)
        assert all(p.parrot_fish is not None for p in game.players)

    def test_colors_follow_creation_order(self, n_players):
        game = make_game(n_players)
        palette = base_game.colors_for(ResourceKind.PLAYER)
        assert [p.color for p in game.players] == palette[:n_players]

    def test_player_order_is_a_permutation(self, n_players):
        game = make_game(n_players)
        assert len(game.player_order) == n_players
        assert all(p in game.player_order for p in game.players)
        assert {p.color for p in game.player_order} == {p.color for p in game.players}

    def test_player_order_is_randomized(self, n_players):
        orders = {
            tuple(p.color for p in make_game(n_players, seed=s).player_order)
            for s in range(20)
        }
        assert len(orders) > 1

    def test_boards(self, n_players):
        game = make_game(n_players)
        names = [b.name for b in game.coral_reef_boards]
        assert len(names) == len(set(names)) == n_players
        assert all(b.count_tiles() == 0 for b in game.coral_reef_boards)

    def test_open_sea_board(self, n_players):
        game = make_game(n_players)
        coral_tiles = game.open_sea_board.coral_tiles
        assert len(coral_tiles) == 10
        assert len({t.corals for t in coral_tiles}) == 10

    def test_tile_bag(self):
        game = make_game(2)
        assert game.tile_bag.size == 200
        counts = Counter(game.tile_bag.draw().color for _ in range(200))
        assert len(counts) == 5
        assert all(v == 40 for v in counts.values())
        assert game.tile_bag.is_empty

    def test_larva_cube_supply(self):
        game = make_game(2)
        supply = game.larva_cube_supply
        assert supply.size == 50
        assert all(supply.count(c) == 10 for c in supply.colors)
        assert len(supply.colors) == 5

    def test_phase(self):
        assert make_game(2).phase == GamePhase.CONSTRUCTED

    def test_random_instance_as_seed(self):
        first = Game(3, seed=Random(7))
        second = Game(3, seed=Random(7))
        assert [p.color for p in first.player_order] == [
            p.color for p in second.player_order
        ]


class TestPrepare:
    def test_coral_reef_boards_get_matching_tiles(self, prepared):
        for board in prepared.coral_reef_boards:
            assert board.count_tiles() == 5
            for pos in board.layout.starting_positions():
                assert pos.tile is not None
                assert pos.tile.color == pos.starting_color

    def test_open_sea_cubes(self, prepared):
        spaces = list(prepared.open_sea_board.each_space())
        assert len(prepared.open_sea_board.cubes) == 5
        assert len({s.larva_cube.color for s in spaces}) == 5
        assert all(s.larva_cube.color == s.larva_cube_color for s in spaces)
        assert prepared.larva_cube_supply.size == 45

    def test_open_sea_tiles(self, prepared):
        counts = [len(s.tiles) for s in prepared.open_sea_board.each_space()]
        assert sorted(counts) == [1, 2, 3, 3, 3]

    def test_starting_hands(self, prepared, n_players):
        sizes = [len(p.player_screen.behind.tiles) for p in prepared.player_order]
        assert sizes == SCHEDULES[n_players]
        assert prepared.starting_hands == SCHEDULES[n_players]

    def test_tile_bag_size(self, prepared, n_players):
        expected = 200 - 5 * n_players - 12 - sum(SCHEDULES[n_players])
        assert prepared.tile_bag.size == expected

    def test_two_player_tile_bag(self):
        game = make_game(2)
        game.prepare()
        assert game.tile_bag.size == 163

    def test_every_tile_accounted_for(self, prepared):
        on_boards = sum(b.count_tiles() for b in prepared.coral_reef_boards)
        on_sea = sum(len(s.tiles) for s in prepared.open_sea_board.each_space())
        in_hands = sum(len(p.player_screen.behind.tiles) for p in prepared.players)
        assert on_boards + on_sea + in_hands + prepared.tile_bag.size == 200

    def test_phase(self, prepared):
        assert prepared.phase == GamePhase.PREPARED

    def test_no_second_prepare(self, prepared):
        with pytest.raises(SetupPhaseError):
            prepared.prepare()

    def test_same_seed_same_setup(self, n_players):
        def snapshot(game: Game):
            return (
                [p.color for p in game.player_order],
                [b.name for b in game.coral_reef_boards],
                [
                    [t.color for t in p.player_screen.behind.tiles]
                    for p in game.player_order
                ],
                [len(s.tiles) for s in game.open_sea_board.each_space()],
            )

        first, second = make_game(n_players, seed=123), make_game(n_players, seed=123)
        first.prepare()
        second.prepare()
        assert snapshot(first) == snapshot(second)

    def test_exhausted_bag_aborts(self):
        kinds = dict(base_game.kinds)
        kinds[ResourceKind.POLYP_TILE] = KindStock(
            colors=base_game.colors_for(ResourceKind.POLYP_TILE), quantity=1
        )
        game_info = base_game.model_copy(update={"kinds": kinds})
        game = Game(2, seed=0, game_info=game_info)
        assert game.tile_bag.size == 5
        with pytest.raises(EmptyPoolError):
            game.prepare()
        assert game.phase == GamePhase.PREPARING
        with pytest.raises(SetupPhaseError):
            game.prepare()


class TestStart:
    def test_start_before_prepare(self):
        with pytest.raises(SetupPhaseError):
            make_game(2).start()

    def test_parrot_fish_and_cubes(self, prepared, n_players):
        prepared.start()
        assert prepared.phase == GamePhase.STARTED
        for player, hand in zip(prepared.player_order, SCHEDULES[n_players]):
            assert len(player.parrot_fish.eaten) == 1
            assert len(player.player_screen.behind.tiles) == hand - 1
            assert len(player.player_screen.behind.cubes) == 2
        assert prepared.larva_cube_supply.size == 50 - 5 - 2 * n_players

    def test_chosen_cube_color(self):
        game = Game(2, seed=0, prompter=lambda player, message, choices: choices[-1])
        game.prepare()
        game.start()
        for player in game.players:
            cubes = player.player_screen.behind.cubes
            assert [c.color for c in cubes] == [Color.YELLOW, Color.YELLOW]

    def test_invalid_choice(self):
        game = Game(2, seed=0, prompter=lambda player, message, choices: "nonsense")
        game.prepare()
        with pytest.raises(InvalidChoiceError):
            game.start()

    def test_no_second_start(self, prepared):
        prepared.start()
        with pytest.raises(SetupPhaseError):
            prepared.start()


def test_unvalidated_open_sea_batches_do_not_drop_tiles():
    batches = [3, 3, 3, 2, 1, 4]
    game_info = base_game.model_copy(update={"open_sea_tile_batches": batches})
    game = Game(2, seed=0, game_info=game_info)
    with pytest.raises(ValueError):
        game.prepare()
    assert game.phase == GamePhase.PREPARING
