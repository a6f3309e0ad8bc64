# snake_session.py

"""
Sesión de juego compartida por la ventana (arcade) y la terminal (curses).
Une la lógica, los menús, el temporizador de pasos y el récord guardado.
"""

from collections import namedtuple

from best_score import SCORE_FILE, BestScoreStore
from snake_logic import BOARD_HEIGHT, BOARD_WIDTH, DOT_SIZE, GameLoop
from snake_menus import (DIFFICULTY_ORDER, OUTCOME_CHANGE_DIFFICULTY,
                         OUTCOME_QUIT, OUTCOME_RESTART, DifficultyMenu,
                         GameOverMenu, NameEntry, difficulty_delay_seconds,
                         resolve_difficulty)

# --- Pantallas ---
SCREEN_NAME = 'name'
SCREEN_DIFFICULTY = 'difficulty'
SCREEN_PLAYING = 'playing'
SCREEN_GAME_OVER = 'game_over'
SCREEN_CLOSED = 'closed'

SessionSnapshot = namedtuple(
    'SessionSnapshot',
    ['snake', 'apple', 'score', 'running', 'best_score', 'best_player',
     'player_name', 'difficulty', 'screen'])


class TickTimer:
    """Acumula delta_time y avisa cuando toca dar un paso."""

    def __init__(self, interval):
        self.interval = interval
        self.elapsed = 0.0

    def reset(self, interval=None):
        if interval is not None:
            self.interval = interval
        self.elapsed = 0.0

    def advance(self, delta_time):
        self.elapsed += delta_time
        if self.elapsed >= self.interval:
            self.elapsed -= self.interval
            # Tras un parón largo no se encadenan pasos atrasados
            if self.elapsed >= self.interval:
                self.elapsed = 0.0
            return True
        return False


class GameSession:
    def __init__(self, store=None, player_name=None, difficulty=None,
                 width=BOARD_WIDTH, height=BOARD_HEIGHT, cell_size=DOT_SIZE, rng=None):
        self.store = store if store is not None else BestScoreStore()
        self.store.load_best()

        self.loop = GameLoop(width, height, cell_size, rng=rng)
        self.name_entry = NameEntry()
        self.difficulty_menu = DifficultyMenu()
        self.game_over_menu = GameOverMenu()

        self.player_name = None
        self.difficulty = resolve_difficulty(difficulty)
        self.timer = TickTimer(difficulty_delay_seconds(self.difficulty))
        self.screen = SCREEN_NAME
        # Con la dificultad dada por línea de comandos no se muestra el menú
        self.skip_difficulty_menu = difficulty is not None

        if player_name is not None and player_name.strip():
            self.player_name = player_name.strip()
            self._after_name()

    @property
    def closed(self):
        return self.screen == SCREEN_CLOSED

    # --- Pantalla de nombre ---
    def submit_name(self):
        name = self.name_entry.submit()
        if name is None:
            return False
        self.player_name = name
        self._after_name()
        return True

    def _after_name(self):
        if self.skip_difficulty_menu:
            self.start_game()
        else:
            self.screen = SCREEN_DIFFICULTY

    def answer_cancel(self, confirm=None):
        if self.name_entry.answer_cancel(confirm):
            self.close()

    # --- Pantalla de dificultad ---
    def choose_difficulty(self, difficulty=None):
        """ Sin argumento usa la opción del cursor del menú. """
        if difficulty is None:
            difficulty = self.difficulty_menu.choose()
        self.difficulty = resolve_difficulty(difficulty)
        self.difficulty_menu.choose(DIFFICULTY_ORDER.index(self.difficulty))
        self.start_game()

    def close_difficulty_menu(self):
        self.choose_difficulty(self.difficulty_menu.close())

    # --- Partida ---
    def start_game(self):
        self.loop.initialize()
        self.timer.reset(difficulty_delay_seconds(self.difficulty))
        self.screen = SCREEN_PLAYING
        print(f"Nueva partida: {self.player_name} ({self.difficulty}, {self.timer.interval:.2f}s por paso)")

    def steer(self, direction):
        if self.screen != SCREEN_PLAYING:
            return False
        return self.loop.set_direction(direction)

    def update(self, delta_time):
        """ Llamar en cada frame. Devuelve True si se ejecutó un paso. """
        if self.screen != SCREEN_PLAYING:
            return False
        if not self.timer.advance(delta_time):
            return False

        if not self.loop.tick():
            self._finish_run()
        return True

    def _finish_run(self):
        print(f"Partida terminada. {self.player_name}: {self.loop.score} puntos.")
        self.store.record_run(self.player_name, self.loop.score)
        self.game_over_menu.reset()
        self.screen = SCREEN_GAME_OVER

    # --- Pantalla de fin de partida ---
    def choose_game_over(self, outcome=None):
        if outcome is None:
            outcome = self.game_over_menu.choose()
        if outcome == OUTCOME_RESTART:
            self.start_game()
        elif outcome == OUTCOME_CHANGE_DIFFICULTY:
            self.screen = SCREEN_DIFFICULTY
        elif outcome == OUTCOME_QUIT:
            self.close()
        else:
            raise ValueError(f"Opción de fin de partida desconocida: {outcome}")

    def close(self):
        self.screen = SCREEN_CLOSED

    def snapshot(self):
        game = self.loop.snapshot()
        return SessionSnapshot(
            snake=game.snake,
            apple=game.apple,
            score=game.score,
            running=game.running,
            best_score=self.store.best_score,
            best_player=self.store.best_player,
            player_name=self.player_name,
            difficulty=self.difficulty,
            screen=self.screen,
        )


def add_common_arguments(parser):
    """ Argumentos compartidos por la versión de ventana y la de terminal. """
    parser.add_argument("--name", type=str, default=None,
                        help="Nombre del jugador (si se omite se pide al empezar).")
    parser.add_argument("--difficulty", type=str, default=None, choices=DIFFICULTY_ORDER,
                        help="Dificultad inicial (si se omite se elige en un menú).")
    parser.add_argument("--score-file", type=str, default=SCORE_FILE,
                        help="Fichero donde se guarda la mejor puntuación (default: %(default)s).")
    return parser


def session_from_args(args):
    return GameSession(store=BestScoreStore(args.score_file),
                       player_name=args.name,
                       difficulty=args.difficulty)
