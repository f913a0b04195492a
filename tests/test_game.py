"""
Tests for the game loop: init/run lifecycle, tick gating at the grid edges,
key handling and the scenarios of a default 10x10 game.
"""
import pytest

from gridwalk.world.game import Game, GameState, GameStatus
from gridwalk.world.grid import Direction
from gridwalk.world.settings import GameSettings


def _game_at(x, y, direction, rows=10, cols=10):
    settings = GameSettings(rows_count=rows, cols_count=cols,
                            start_x=x, start_y=y, start_direction=direction)
    game = Game(settings)
    game.run()
    return game


class TestLifecycle:

    def test_starts_uninitialized(self, game):
        assert isinstance(game.state, GameState)
        assert game.state.status is GameStatus.UNINITIALIZED
        assert not game.is_running

    def test_init_places_player_and_builds_grid(self, game, keys):
        game.init()
        assert game.player.position == (0, 0)
        assert game.player.direction is Direction.RIGHT
        assert len(game.renderer) == 100
        assert keys.handlers == [game.on_key_down]

    def test_init_binds_keys_once(self, game, keys):
        game.init()
        game.init()
        assert len(keys.handlers) == 1

    def test_init_resets_player(self, running_game):
        running_game.tick()
        running_game.on_key_down("S")
        running_game.init()
        assert running_game.player.position == (0, 0)
        assert running_game.player.direction is Direction.RIGHT

    def test_run_renders_and_schedules(self, running_game, scheduler):
        assert running_game.is_running
        assert running_game.renderer.colored_cells("red") == [(0, 0)]
        assert len(scheduler.calls) == 1
        callback, interval = scheduler.calls[0]
        assert interval == pytest.approx(0.2)

    def test_second_run_raises(self, running_game, scheduler):
        with pytest.raises(RuntimeError):
            running_game.run()
        assert len(scheduler.calls) == 1

    def test_run_without_scheduler(self):
        game = Game(GameSettings())
        game.run()
        assert game.is_running
        assert game.tick() is True


class TestTick:

    def test_tick_steps_and_renders(self, running_game):
        assert running_game.tick() is True
        assert running_game.player.position == (1, 0)
        assert running_game.renderer.colored_cells("red") == [(1, 0)]
        assert running_game.state.ticks == 1
        assert running_game.state.steps == 1

    def test_timer_callback_ticks(self, running_game, scheduler):
        scheduler.fire(3)
        assert running_game.player.position == (3, 0)

    @pytest.mark.parametrize("x, y, direction", [
        (0, 4, Direction.LEFT),
        (9, 4, Direction.RIGHT),
        (4, 0, Direction.UP),
        (4, 9, Direction.DOWN),
        (0, 0, Direction.UP),
        (9, 9, Direction.RIGHT),
    ])
    def test_blocked_at_edges(self, x, y, direction):
        game = _game_at(x, y, direction)
        before = game.renderer.colors()

        assert game.can_step() is False
        assert game.tick() is False
        assert game.player.position == (x, y)
        assert game.player.direction is direction
        assert game.renderer.colors() == before
        assert game.state.ticks == 1
        assert game.state.steps == 0

    def test_tick_before_init_is_skipped(self):
        game = Game(GameSettings())

        assert game.can_step() is False
        assert game.tick() is False
        assert game.player.position == (0, 0)
        assert game.state.ticks == 1
        assert game.state.steps == 0

    def test_non_square_grid_bounds(self):
        game = _game_at(0, 0, Direction.DOWN, rows=2, cols=5)
        assert game.tick() is True
        assert game.tick() is False
        assert game.player.position == (0, 1)

    def test_exactly_one_player_cell_after_every_tick(self, running_game):
        for _ in range(15):
            running_game.tick()
            colors = running_game.renderer.colors()
            assert colors.count("red") == 1
            assert colors.count("blue") == 99


class TestKeys:

    @pytest.mark.parametrize("key, direction", [
        ("UP", Direction.UP), ("W", Direction.UP),
        ("RIGHT", Direction.RIGHT), ("D", Direction.RIGHT),
        ("DOWN", Direction.DOWN), ("S", Direction.DOWN),
        ("LEFT", Direction.LEFT), ("A", Direction.LEFT),
    ])
    def test_mapped_keys(self, running_game, keys, key, direction):
        keys.press(key)
        assert running_game.player.direction is direction

    @pytest.mark.parametrize("key", ["SPACE", "Q", "", 32, None])
    def test_unmapped_keys_ignored(self, running_game, keys, key):
        keys.press("DOWN")
        keys.press(key)
        assert running_game.player.direction is Direction.DOWN


class TestScenarios:

    def test_walk_to_right_edge_and_stop(self, running_game, scheduler):
        scheduler.fire()
        assert running_game.player.position == (1, 0)

        scheduler.fire(8)
        assert running_game.player.position == (9, 0)

        scheduler.fire()
        assert running_game.player.position == (9, 0)
        assert running_game.renderer.colored_cells("red") == [(9, 0)]

    def test_turn_down_at_right_edge(self, running_game, scheduler, keys):
        scheduler.fire(10)
        assert running_game.player.position == (9, 0)

        keys.press("DOWN")
        scheduler.fire()
        assert running_game.player.position == (9, 1)

    def test_space_keeps_prior_direction(self, running_game, scheduler, keys):
        keys.press(32)
        keys.press("SPACE")
        scheduler.fire()
        assert running_game.player.position == (1, 0)

    def test_direction_change_between_ticks_applies_next_tick(self, running_game, scheduler, keys):
        scheduler.fire(2)
        keys.press("S")
        keys.press("A")
        scheduler.fire()
        assert running_game.player.position == (1, 0)

    def test_corner_turn_into_wall_is_skipped(self, running_game, scheduler, keys):
        scheduler.fire()
        keys.press("W")
        scheduler.fire()
        assert running_game.player.position == (1, 0)
        keys.press("D")
        scheduler.fire()
        assert running_game.player.position == (2, 0)
