import random

import pytest

from config import UP, DOWN, LEFT, RIGHT, DIRECTIONS, MIN_TICK_INTERVAL
from game import SnakeGame, RunState, Event


def started(grid_size=20, seed=0, **kwargs):
    game = SnakeGame(grid_size, seed=seed, **kwargs)
    game.start()
    return game


def serpentine(n):
    """Все клетки поля змейкой: чётные ряды слева направо, нечётные обратно"""
    cells = []
    for y in range(n):
        xs = range(n) if y % 2 == 0 else range(n - 1, -1, -1)
        cells.extend((x, y) for x in xs)
    return cells


def test_new_game_layout():
    game = SnakeGame(seed=1)
    assert game.state is RunState.NOT_STARTED
    assert game.snake == [(6, 10), (5, 10), (4, 10)]
    assert game.direction == RIGHT
    assert game.next_direction == RIGHT
    assert game.score == 0
    assert game.tick_interval == pytest.approx(125)
    assert game.food is not None
    assert game.food not in game.snake


def test_step_does_nothing_before_start():
    game = SnakeGame(seed=1)
    assert game.step() is None
    assert game.snake == [(6, 10), (5, 10), (4, 10)]


def test_start_runs_game():
    game = started()
    assert game.is_running
    assert game.state is RunState.RUNNING


def test_eating_grows_snake_and_speeds_up():
    game = started()
    game.set_layout([(6, 10), (5, 10), (4, 10)], RIGHT, food=(7, 10))

    assert game.step() is Event.FOOD_EATEN
    assert game.snake == [(7, 10), (6, 10), (5, 10), (4, 10)]
    assert game.score == 1
    assert game.tick_interval == pytest.approx(125 * 0.97)
    assert game.food is not None
    assert game.food != (7, 10)
    assert game.food not in game.snake


def test_move_keeps_length():
    game = started()
    game.set_layout([(6, 10), (5, 10), (4, 10)], RIGHT, food=(0, 0))

    assert game.step() is Event.MOVED
    assert game.snake == [(7, 10), (6, 10), (5, 10)]
    assert game.score == 0
    assert game.tick_interval == pytest.approx(125)
    assert not game.occupied((4, 10))


def test_reverse_is_ignored():
    game = started()
    game.set_layout([(6, 10), (5, 10), (4, 10)], RIGHT, food=(0, 0))

    game.change_direction(LEFT)
    assert game.next_direction == RIGHT
    game.step()
    assert game.direction == RIGHT
    assert game.head == (7, 10)


def test_last_direction_wins():
    game = started()
    game.set_layout([(6, 10), (5, 10), (4, 10)], RIGHT, food=(0, 0))

    game.change_direction(UP)
    game.change_direction(DOWN)
    game.step()
    assert game.direction == DOWN
    assert game.head == (6, 11)


def test_reverse_checked_against_current_direction():
    game = started()
    game.set_layout([(6, 10), (5, 10), (4, 10)], RIGHT, food=(0, 0))

    # UP принят, LEFT всё ещё разворот относительно текущего RIGHT
    game.change_direction(UP)
    game.change_direction(LEFT)
    game.step()
    assert game.head == (6, 9)

    game.change_direction(LEFT)
    game.step()
    assert game.head == (5, 9)


def test_invalid_direction_is_ignored():
    game = started()
    game.set_layout([(6, 10), (5, 10), (4, 10)], RIGHT, food=(0, 0))
    game.change_direction(UP)

    game.change_direction((1, 1))
    game.change_direction((0, 2))
    assert game.next_direction == UP
    game.step()
    assert game.head == (6, 9)


def test_too_small_grid_raises():
    with pytest.raises(ValueError):
        SnakeGame(5)


def test_wall_collision_freezes_snake():
    game = started()
    body = [(19, 5), (18, 5), (17, 5)]
    game.set_layout(body, RIGHT, food=(0, 0))

    assert game.step() is Event.GAME_OVER
    assert game.state is RunState.GAME_OVER
    assert game.snake == body
    assert game.step() is None
    assert game.snake == body


def test_self_collision_with_tail():
    game = started()
    body = [(5, 5), (4, 5), (3, 5), (3, 6), (4, 6), (5, 6)]
    game.set_layout(body, RIGHT, food=(0, 0))

    # Хвост (5, 6) ещё не ушёл - это столкновение
    game.change_direction(DOWN)
    assert game.step() is Event.GAME_OVER
    assert game.snake == body


def test_self_collision_with_body():
    game = started()
    body = [(4, 5), (4, 4), (5, 4), (5, 5), (5, 6), (4, 6), (3, 6)]
    game.set_layout(body, DOWN, food=(0, 0))

    game.change_direction(RIGHT)
    assert game.step() is Event.GAME_OVER


def test_tick_interval_floor():
    game = started()
    game.set_layout([(6, 10), (5, 10), (4, 10)], RIGHT, food=(7, 10))
    game.tick_interval = 61

    game.step()
    assert game.tick_interval == MIN_TICK_INTERVAL

    game.set_layout(game.snake, RIGHT, food=(8, 10))
    game.step()
    assert game.tick_interval == MIN_TICK_INTERVAL


def test_new_best_on_game_over():
    game = started(best_score=2)
    game.set_layout([(19, 5), (18, 5), (17, 5)], RIGHT, food=(0, 0))
    game.score = 3

    game.step()
    assert game.new_best
    assert game.best_score == 3


def test_no_new_best_for_lower_score():
    game = started(best_score=10)
    game.set_layout([(19, 5), (18, 5), (17, 5)], RIGHT, food=(0, 0))
    game.score = 3

    game.step()
    assert not game.new_best
    assert game.best_score == 10


def test_restart_after_game_over():
    game = started()
    game.set_layout([(18, 5), (17, 5), (16, 5)], RIGHT, food=(19, 5))
    game.step()
    game.step()
    assert game.state is RunState.GAME_OVER
    assert game.best_score == 1

    game.start()
    assert game.is_running
    assert game.score == 0
    assert game.snake == [(6, 10), (5, 10), (4, 10)]
    assert game.tick_interval == pytest.approx(125)
    assert not game.new_best
    assert game.best_score == 1

    game.set_layout([(19, 5), (18, 5), (17, 5)], RIGHT, food=(0, 0))
    game.step()
    assert game.best_score == 1


def test_spawn_food_finds_last_free_cell():
    game = started(grid_size=6)
    cells = serpentine(6)
    free = cells.pop(20)
    game.set_layout(cells, RIGHT, food=None)

    assert game.food == free
    assert game.spawn_food() == free


def test_spawn_food_on_full_board():
    game = started(grid_size=6)
    game.set_layout(serpentine(6), RIGHT, food=None)

    assert game.food is None
    assert game.spawn_food() is None
    assert game.food is None


def test_filling_board_is_win():
    game = started(grid_size=6)
    cells = serpentine(6)
    # Голова (1, 5), последняя свободная клетка (0, 5) с едой
    game.set_layout(list(reversed(cells[:-1])), LEFT, food=cells[-1])

    assert game.step() is Event.WIN
    assert game.state is RunState.GAME_OVER
    assert game.is_win()
    assert game.food is None
    assert game.score == 1
    assert game.step() is None


def test_same_seed_same_food():
    a = SnakeGame(seed=42)
    b = SnakeGame(seed=42)
    assert a.food == b.food


def test_invariants_hold_during_random_play():
    game = started(grid_size=8, seed=7)
    moves = random.Random(7)

    for _ in range(3000):
        if not game.is_running:
            game.start()
        game.change_direction(moves.choice(DIRECTIONS))
        game.step()

        if game.is_running:
            n = game.grid_size
            assert all(0 <= x < n and 0 <= y < n for x, y in game.snake)
            assert len(set(game.snake)) == len(game.snake)
            assert game.food not in game.snake
            # Матрица мира совпадает со списком сегментов
            assert int((game.grid != 0).sum()) == len(game.snake) + 1


def test_set_layout_keeps_game_progress():
    game = started()
    game.set_layout([(6, 10), (5, 10), (4, 10)], RIGHT, food=(7, 10))
    game.step()

    game.set_layout([(3, 3), (2, 3), (1, 3)], DOWN, food=(9, 9))
    assert game.is_running
    assert game.score == 1
    assert game.steps == 1
    assert game.direction == DOWN
    assert game.food == (9, 9)
    assert int((game.grid != 0).sum()) == 4
