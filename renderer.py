"""
Отрисовка игры в pygame.
Размер клетки считается от текущего размера окна, поэтому поле
масштабируется при ресайзе.
"""
import pygame

from config import (MIN_BOARD_SIZE, PANEL_WIDTH, BACKGROUND, BOARD_BORDER,
                    SNAKE, SNAKE_HEAD, FOOD, PANEL, BUTTON, BUTTON_TEXT,
                    WHITE, GRAY, FLASH_DURATION)


class SnakeRenderer:
    def __init__(self, surface, grid_size):
        self.surface = surface
        self.grid_size = grid_size
        self.font = None
        self.big_font = None

        # Вспышка поверх поля (еда / конец игры)
        self.flash_color = None
        self.flash_until = 0

    def set_surface(self, surface):
        self.surface = surface

    def board_size(self):
        """Сторона квадратного поля в пикселях"""
        width, height = self.surface.get_size()
        return max(MIN_BOARD_SIZE, min(width - PANEL_WIDTH, height))

    def cell_size(self):
        return self.board_size() // self.grid_size

    def cell_rect(self, x, y):
        """Прямоугольник клетки с отступом 2px"""
        cs = self.cell_size()
        return pygame.Rect(x * cs + 2, y * cs + 2, cs - 4, cs - 4)

    def panel_left(self):
        return self.cell_size() * self.grid_size

    def flash(self, color, now=None):
        if now is None:
            now = pygame.time.get_ticks()
        self.flash_color = color
        self.flash_until = now + FLASH_DURATION

    def _draw_cell(self, x, y, color):
        rect = self.cell_rect(x, y)
        radius = int(self.cell_size() * 0.25)
        pygame.draw.rect(self.surface, color, rect, border_radius=radius)

    def draw_board(self, game, now=None):
        """Фон, граница, еда и змейка"""
        self.surface.fill(BACKGROUND)

        side = self.cell_size() * self.grid_size
        pygame.draw.rect(self.surface, BOARD_BORDER, (0, 0, side, side), 2)

        if game.food is not None:
            self._draw_cell(*game.food, FOOD)

        for i, (x, y) in enumerate(game.snake):
            color = SNAKE_HEAD if i == 0 else SNAKE  # Голова ярче
            self._draw_cell(x, y, color)

        if now is None:
            now = pygame.time.get_ticks()
        if self.flash_color is not None and now < self.flash_until:
            overlay = pygame.Surface((side, side), pygame.SRCALPHA)
            overlay.fill((*self.flash_color, 51))  # ~20% прозрачности
            self.surface.blit(overlay, (0, 0))

    def _fonts(self):
        if self.font is None:
            self.font = pygame.font.SysFont('arial', 18)
            self.big_font = pygame.font.SysFont('arial', 24)
        return self.font, self.big_font

    def draw_panel(self, game, dpad, games_played=0):
        """Панель справа: счёт, рекорд, управление, кнопки"""
        font, big_font = self._fonts()
        left = self.panel_left()
        width, height = self.surface.get_size()
        pygame.draw.rect(self.surface, PANEL, (left, 0, max(PANEL_WIDTH, width - left), height))

        speed = 1000 / game.tick_interval
        stats = [
            f"Score: {game.score}",
            f"Best: {game.best_score}",
            f"Length: {game.length}",
            f"Speed: {speed:.1f} cells/s",
            f"Games: {games_played}",
        ]
        for i, text in enumerate(stats):
            surf = font.render(text, True, WHITE)
            self.surface.blit(surf, (left + 10, 20 + i * 25))

        legend = ["Arrows / WASD", "SPACE Start", "ESC Quit"]
        for i, text in enumerate(legend):
            surf = font.render(text, True, GRAY)
            self.surface.blit(surf, (left + 10, 160 + i * 22))

        arrows = {"up": "^", "down": "v", "left": "<", "right": ">"}
        for name, rect in dpad.buttons.items():
            pygame.draw.rect(self.surface, BUTTON, rect, border_radius=6)
            surf = big_font.render(arrows[name], True, BUTTON_TEXT)
            self.surface.blit(surf, surf.get_rect(center=rect.center))

        label = "Restart" if game.is_running else "Start"
        pygame.draw.rect(self.surface, BUTTON, dpad.start_button, border_radius=6)
        surf = font.render(label, True, BUTTON_TEXT)
        self.surface.blit(surf, surf.get_rect(center=dpad.start_button.center))

    def draw(self, game, dpad, games_played=0):
        self.draw_board(game)
        self.draw_panel(game, dpad, games_played)
        pygame.display.flip()
