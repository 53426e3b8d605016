"""
Управление: клавиатура, кнопки-крестовина и свайпы -> направление.
Сюда приходят сырые события pygame, наружу уходят только готовые векторы.
"""
import pygame

from config import UP, DOWN, LEFT, RIGHT, SWIPE_THRESHOLD

KEY_TO_DIRECTION = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}

START_KEYS = (pygame.K_SPACE, pygame.K_RETURN)

BUTTON_TO_DIRECTION = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}


def key_to_direction(key):
    return KEY_TO_DIRECTION.get(key)


def is_start_key(key):
    return key in START_KEYS


def button_to_direction(name):
    return BUTTON_TO_DIRECTION.get(name)


def swipe_to_direction(dx, dy, threshold=SWIPE_THRESHOLD):
    """Свайп по доминирующей оси; короткое движение - это тап (None)"""
    abs_x, abs_y = abs(dx), abs(dy)
    if max(abs_x, abs_y) < threshold:
        return None
    if abs_x > abs_y:
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP


class DPad:
    """Кнопки на панели: крестовина и Start/Restart"""

    def __init__(self, left, top, size=44, gap=6):
        self.size = size
        self.gap = gap
        self.move_to(left, top)

    def move_to(self, left, top):
        """Расставить кнопки, в том числе после изменения размера окна"""
        size, gap = self.size, self.gap
        step = size + gap
        self.buttons = {
            "up": pygame.Rect(left + step, top, size, size),
            "left": pygame.Rect(left, top + step, size, size),
            "right": pygame.Rect(left + 2 * step, top + step, size, size),
            "down": pygame.Rect(left + step, top + 2 * step, size, size),
        }
        self.start_button = pygame.Rect(left, top + 3 * step + gap, 3 * size + 2 * gap, size)

    def button_at(self, pos):
        """Имя кнопки под курсором: направление, "start" или None"""
        for name, rect in self.buttons.items():
            if rect.collidepoint(pos):
                return name
        if self.start_button.collidepoint(pos):
            return "start"
        return None


class SwipeTracker:
    """Запоминает начало жеста и отдаёт направление в конце"""

    def __init__(self, threshold=SWIPE_THRESHOLD):
        self.threshold = threshold
        self.start = None

    def begin(self, pos):
        self.start = pos

    def cancel(self):
        """Забыть начало жеста (нажатие пришлось на кнопку)"""
        self.start = None

    def end(self, pos):
        if self.start is None:
            return None
        dx = pos[0] - self.start[0]
        dy = pos[1] - self.start[1]
        direction = swipe_to_direction(dx, dy, self.threshold)
        # Тап не сбрасывает начало жеста
        if direction is not None:
            self.start = None
        return direction
