"""
Игра в змейку: окно pygame, управление и игровой цикл.

Использование:
    python play.py                   # Рекорд в snake_scores.db
    python play.py path/to/scores.db # Другой файл базы
"""
import sys
import pygame

from game import SnakeGame, Event
from controls import (key_to_direction, is_start_key, button_to_direction,
                      DPad, SwipeTracker)
from renderer import SnakeRenderer
from database import ScoreDatabase
from config import (WIDTH, HEIGHT, PANEL_WIDTH, GRID_CELLS, FPS, DB_PATH,
                    FLASH_FOOD, FLASH_GAME_OVER)


class SnakePlayer:
    def __init__(self, db_path=None):
        pygame.init()

        self.screen = pygame.display.set_mode((WIDTH + PANEL_WIDTH, HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption('Snake')
        self.clock = pygame.time.Clock()

        self.db = ScoreDatabase(db_path)
        best = self.db.load_best_score()
        print(f"Scores: {self.db.db_path} (best: {best})")

        self.game = SnakeGame(GRID_CELLS, best_score=best)
        self.renderer = SnakeRenderer(self.screen, GRID_CELLS)
        self.dpad = DPad(self.renderer.panel_left() + 10, 240)
        self.swipe = SwipeTracker()

        self.games = self.db.get_stats()[0]
        self.elapsed = 0  # мс с последнего тика

    def start_game(self):
        self.game.start()
        self.elapsed = 0

    def on_resize(self, size):
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        self.renderer.set_surface(self.screen)
        self.dpad.move_to(self.renderer.panel_left() + 10, 240)

    def handle_events(self):
        """Обработка событий. False = выход"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False

            if event.type == pygame.VIDEORESIZE:
                self.on_resize(event.size)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if is_start_key(event.key):
                    if not self.game.is_running:
                        self.start_game()
                    continue
                direction = key_to_direction(event.key)
                if direction:
                    self.game.change_direction(direction)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                name = self.dpad.button_at(event.pos)
                if name is None:
                    self.swipe.begin(event.pos)
                    continue
                # Свайп только с поля, старый тап не превращается в жест
                self.swipe.cancel()
                if name == "start":
                    self.start_game()
                else:
                    self.game.change_direction(button_to_direction(name))

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                direction = self.swipe.end(event.pos)
                if direction:
                    self.game.change_direction(direction)

            elif event.type == pygame.FINGERDOWN:
                pos = self._finger_pos(event)
                if self.dpad.button_at(pos) is None:
                    self.swipe.begin(pos)
                else:
                    self.swipe.cancel()

            elif event.type == pygame.FINGERUP:
                direction = self.swipe.end(self._finger_pos(event))
                if direction:
                    self.game.change_direction(direction)

        return True

    def _finger_pos(self, event):
        # Координаты пальца нормализованы в [0, 1]
        width, height = self.screen.get_size()
        return event.x * width, event.y * height

    def update(self, dt):
        """Накопить время и сделать тик, когда прошёл интервал"""
        if not self.game.is_running:
            return None
        self.elapsed += dt
        if self.elapsed < self.game.tick_interval:
            return None
        self.elapsed = 0

        result = self.game.step()
        if result is Event.FOOD_EATEN:
            self.renderer.flash(FLASH_FOOD)
        elif result in (Event.GAME_OVER, Event.WIN):
            self.on_game_over(result)
        return result

    def on_game_over(self, result):
        game = self.game
        self.renderer.flash(FLASH_GAME_OVER)
        self.db.save_game(game.score, game.length, game.steps, won=result is Event.WIN)
        self.games += 1

        if result is Event.WIN:
            print(f"Game {self.games}: WIN! Score {game.score}")
        else:
            print(f"Game {self.games}: Score {game.score}")

        if game.new_best:
            self.db.save_best_score(game.best_score)
            print(f"🏆 New best: {game.best_score}")

    def loop(self):
        running = True
        while running:
            running = self.handle_events()
            dt = self.clock.tick(FPS)
            self.update(dt)
            self.renderer.draw(self.game, self.dpad, self.games)

        pygame.quit()
        self.print_results()
        self.db.close()

    def print_results(self, last=5):
        """Итоги: статистика и последние партии"""
        count, avg_score, max_score = self.db.get_stats()
        if not count:
            return
        print(f"\nResults: {count} games")
        print(f"Avg: {avg_score:.1f}")
        print(f"Best: {max_score}")

        print("Last games:")
        for game_id, score, length, steps, won, created_at in self.db.get_recent_games(last):
            mark = " WIN" if won else ""
            print(f"  #{game_id} {created_at} | score {score}, length {length}, steps {steps}{mark}")


if __name__ == "__main__":
    path = sys.argv[1] if len(sys.argv) > 1 else DB_PATH
    player = SnakePlayer(path)
    player.loop()
