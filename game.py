"""
Симуляция змейки: чистая машина состояний, которая двигается по тикам.

Матрица мира:
  0 = пусто
  1 = тело змейки
  2 = еда
  7 = голова

Отрисовка, управление и хранение рекорда живут снаружи
(renderer.py, controls.py, database.py), здесь нет ни ввода-вывода, ни таймеров.
"""
from enum import Enum

import numpy as np

from config import (GRID_CELLS, BASE_SPEED, SPEED_FACTOR, MIN_TICK_INTERVAL,
                    INITIAL_SNAKE_LENGTH, SCORE_FOR_FOOD, MAX_FOOD_ATTEMPTS,
                    RIGHT, DIRECTIONS)

EMPTY = 0
BODY = 1
FOOD = 2
HEAD = 7


class RunState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


class Event(Enum):
    """Что случилось за один тик"""
    MOVED = "moved"
    FOOD_EATEN = "food_eaten"
    GAME_OVER = "game_over"
    WIN = "win"  # змейка заполнила всё поле


class SnakeGame:
    def __init__(self, grid_size=None, base_speed=None, best_score=0, seed=None):
        self.grid_size = grid_size or GRID_CELLS
        self.base_speed = base_speed or BASE_SPEED
        if self.grid_size < 2 * INITIAL_SNAKE_LENGTH:
            raise ValueError(f"grid_size must be at least {2 * INITIAL_SNAKE_LENGTH}, "
                             f"got {self.grid_size}")
        if self.base_speed <= 0:
            raise ValueError(f"base_speed must be positive, got {self.base_speed}")

        self.best_score = best_score
        self.rng = np.random.default_rng(seed)
        self.reset()
        # До команды "старт" игра стоит
        self.state = RunState.NOT_STARTED

    @property
    def base_interval(self):
        """Интервал тика на старте, мс"""
        return 1000 / self.base_speed

    def reset(self):
        """Новая партия: змейка, направление, счёт, скорость и еда"""
        n = self.grid_size
        self.grid = np.zeros((n, n), dtype=np.int8)

        # Горизонтальная змейка в левой трети поля, голова смотрит вправо
        start_x, start_y = n // 3, n // 2
        self.snake = [(start_x - i, start_y) for i in range(INITIAL_SNAKE_LENGTH)]
        for x, y in self.snake[1:]:
            self.grid[y, x] = BODY
        self.grid[start_y, start_x] = HEAD

        self.direction = RIGHT
        self.next_direction = RIGHT
        self.score = 0
        self.steps = 0
        self.tick_interval = self.base_interval
        self.new_best = False
        self.state = RunState.RUNNING

        self.food = None
        self.spawn_food()

    def start(self):
        """Старт или рестарт по команде игрока"""
        self.reset()

    def set_layout(self, snake, direction=RIGHT, food=None):
        """
        Расставить змейку и еду вручную (голова первая).
        Меняются только змейка, направление и еда: состояние партии,
        счёт, шаги и new_best остаются как были.
        """
        n = self.grid_size
        self.grid = np.zeros((n, n), dtype=np.int8)
        self.snake = [tuple(p) for p in snake]
        for x, y in self.snake[1:]:
            self.grid[y, x] = BODY
        hx, hy = self.snake[0]
        self.grid[hy, hx] = HEAD

        self.direction = tuple(direction)
        self.next_direction = tuple(direction)
        self.food = None
        if food is None:
            self.spawn_food()
        else:
            self.food = tuple(food)
            self.grid[self.food[1], self.food[0]] = FOOD

    def _is_reverse(self, d):
        return d == (-self.direction[0], -self.direction[1])

    def change_direction(self, requested):
        """
        Запомнить новое направление до следующего тика.
        Разворот на 180 градусов и не единичный вектор молча игнорируются,
        побеждает последний вызов.
        """
        requested = tuple(requested)
        if requested not in DIRECTIONS:
            return
        if not self._is_reverse(requested):
            self.next_direction = requested

    def spawn_food(self):
        """
        Случайная свободная клетка для еды.
        Сначала ограниченное число случайных попыток, потом выбор из всех
        свободных клеток. Если поле заполнено, еды нет (None).
        """
        if self.food is not None and self.grid[self.food[1], self.food[0]] == FOOD:
            self.grid[self.food[1], self.food[0]] = EMPTY
        self.food = None

        n = self.grid_size
        if len(self.snake) >= n * n:
            return None

        for _ in range(MAX_FOOD_ATTEMPTS):
            x, y = self.rng.integers(n, size=2)
            if self.grid[y, x] == EMPTY:
                break
        else:
            empty = np.argwhere(self.grid == EMPTY)  # строки (y, x)
            if len(empty) == 0:
                return None
            y, x = empty[self.rng.integers(len(empty))]

        self.food = (int(x), int(y))
        self.grid[y, x] = FOOD
        return self.food

    def step(self):
        """
        Один тик. Возвращает Event или None, если игра не идёт.
        При столкновении змейка остаётся в положении до удара.
        """
        if self.state is not RunState.RUNNING:
            return None

        # Направление из ввода, повторно отсекаем разворот
        if not self._is_reverse(self.next_direction):
            self.direction = self.next_direction

        dx, dy = self.direction
        head_x, head_y = self.snake[0]
        new_x, new_y = head_x + dx, head_y + dy

        # Стена
        n = self.grid_size
        if new_x < 0 or new_x >= n or new_y < 0 or new_y >= n:
            return self._game_over()

        # Тело, включая хвост: он ещё на месте
        cell = self.grid[new_y, new_x]
        if cell == BODY or cell == HEAD:
            return self._game_over()

        self.steps += 1

        self.grid[head_y, head_x] = BODY
        self.snake.insert(0, (new_x, new_y))
        self.grid[new_y, new_x] = HEAD

        if (new_x, new_y) == self.food:
            self.score += SCORE_FOR_FOOD
            self.tick_interval = max(MIN_TICK_INTERVAL, self.tick_interval * SPEED_FACTOR)

            # Класть еду некуда - поле заполнено, это победа
            if self.spawn_food() is None:
                self._game_over()
                return Event.WIN
            return Event.FOOD_EATEN

        tail_x, tail_y = self.snake.pop()
        self.grid[tail_y, tail_x] = EMPTY
        return Event.MOVED

    def _game_over(self):
        self.state = RunState.GAME_OVER
        if self.score > self.best_score:
            self.best_score = self.score
            self.new_best = True
        return Event.GAME_OVER

    @property
    def head(self):
        return self.snake[0]

    @property
    def length(self):
        return len(self.snake)

    @property
    def is_running(self):
        return self.state is RunState.RUNNING

    def is_win(self):
        """Победа = змейка заполнила всё поле"""
        return len(self.snake) >= self.grid_size * self.grid_size

    def occupied(self, pos):
        x, y = pos
        return self.grid[y, x] in (BODY, HEAD)
