"""
SQLite база данных для рекорда и истории партий.
"""
import sqlite3

from config import DB_PATH, BEST_SCORE_KEY


class ScoreDatabase:
    def __init__(self, db_path=None):
        self.db_path = db_path or DB_PATH
        self.conn = None
        self._init_db()

    def _init_db(self):
        """Инициализация базы данных"""
        self.conn = sqlite3.connect(self.db_path)
        cursor = self.conn.cursor()

        # Ключ-значение, здесь живёт рекорд
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS settings (
                key TEXT PRIMARY KEY,
                value INTEGER
            )
        ''')

        # Таблица сыгранных партий
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS games (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                score INTEGER,
                length INTEGER,
                steps INTEGER,
                won INTEGER DEFAULT 0,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        ''')

        self.conn.commit()

    def load_best_score(self):
        """Рекорд, 0 если его ещё нет"""
        cursor = self.conn.cursor()
        cursor.execute('SELECT value FROM settings WHERE key = ?', (BEST_SCORE_KEY,))
        row = cursor.fetchone()
        if row and row[0] is not None:
            return int(row[0])
        return 0

    def save_best_score(self, score):
        """Сохранить рекорд (меньше уже сохранённого не записывается)"""
        cursor = self.conn.cursor()
        cursor.execute('''
            INSERT INTO settings (key, value) VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET value = MAX(value, excluded.value)
        ''', (BEST_SCORE_KEY, int(score)))
        self.conn.commit()

    def save_game(self, score, length, steps, won=False):
        """Записать результат партии"""
        cursor = self.conn.cursor()
        cursor.execute('''
            INSERT INTO games (score, length, steps, won)
            VALUES (?, ?, ?, ?)
        ''', (score, length, steps, int(won)))
        self.conn.commit()
        return cursor.lastrowid

    def get_recent_games(self, limit=10):
        """Последние партии, новые первыми"""
        cursor = self.conn.cursor()
        cursor.execute('''
            SELECT id, score, length, steps, won, created_at
            FROM games
            ORDER BY id DESC
            LIMIT ?
        ''', (limit,))
        return cursor.fetchall()

    def get_stats(self):
        """(число партий, средний счёт, лучший счёт)"""
        cursor = self.conn.cursor()
        cursor.execute('SELECT COUNT(*), AVG(score), MAX(score) FROM games')
        count, avg_score, max_score = cursor.fetchone()
        return count, avg_score or 0.0, max_score or 0

    def close(self):
        """Закрыть соединение"""
        if self.conn:
            self.conn.close()
            self.conn = None
