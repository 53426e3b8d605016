# Настройки игры
# Поле 20x20, клетка 24 пикселя
GRID_CELLS = 20
CELL_SIZE = 24
MIN_BOARD_SIZE = 240  # минимальный размер поля в пикселях

WIDTH = GRID_CELLS * CELL_SIZE    # 480
HEIGHT = GRID_CELLS * CELL_SIZE   # 480
PANEL_WIDTH = 200                 # панель статистики справа

# Цвета
BACKGROUND = (15, 23, 42)
BOARD_BORDER = (40, 48, 66)
SNAKE_HEAD = (34, 197, 94)
SNAKE = (22, 163, 74)
FOOD = (245, 158, 11)
PANEL = (40, 40, 40)
BUTTON = (71, 85, 105)
BUTTON_TEXT = (255, 255, 255)
FLASH_FOOD = (34, 197, 94)
FLASH_GAME_OVER = (239, 68, 68)
WHITE = (255, 255, 255)
GRAY = (150, 150, 150)

# Направления
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# Скорость
BASE_SPEED = 8           # клеток в секунду на старте
SPEED_FACTOR = 0.97      # ускорение после каждой еды
MIN_TICK_INTERVAL = 60   # мс, быстрее не бывает
FPS = 60                 # частота отрисовки

# Начальная длина змейки
INITIAL_SNAKE_LENGTH = 3

# Очки за еду
SCORE_FOR_FOOD = 1

# Сколько раз пробуем случайную клетку для еды до перебора свободных
MAX_FOOD_ATTEMPTS = 100

# Управление
SWIPE_THRESHOLD = 20     # пиксели, короче - это тап
FLASH_DURATION = 120     # мс

# Хранилище рекорда
DB_PATH = "snake_scores.db"
BEST_SCORE_KEY = "snake_best"
