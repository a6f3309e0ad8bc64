# snake_logic.py

"""
Lógica pura del juego Snake
===========================
* Sin dependencias de interfaz: la ventana (arcade) y la terminal (curses)
  sólo leen instantáneas y envían cambios de dirección.
* Coordenadas con origen arriba a la izquierda; la Y crece hacia abajo.
* La serpiente es una deque de tuplas (x, y) con la cabeza en el índice 0.
"""

import random
import threading
from collections import deque, namedtuple
from enum import Enum

import numpy as np

# --- Constantes del Tablero ---
BOARD_WIDTH = 600
BOARD_HEIGHT = 600
DOT_SIZE = 10  # Tamaño de cada celda y de cada paso

# --- Constantes de la Serpiente ---
INITIAL_DOTS = 3
INITIAL_HEAD_CELL = 5  # La cabeza empieza en la celda (5, 5): (50, 50) con DOT_SIZE = 10
# Los segmentos con índice <= 4 nunca cuentan como choque consigo misma
SELF_COLLISION_SAFE_INDEX = 4

# --- Valores de la matriz del tablero ---
CELL_EMPTY = 0
CELL_BODY = 1
CELL_HEAD = 2
CELL_APPLE = 3


class Direction(Enum):
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    @property
    def opposite(self):
        return Direction((-self.dx, -self.dy))


# Instantánea de sólo lectura que consumen los renderizadores
GameSnapshot = namedtuple(
    'GameSnapshot', ['snake', 'apple', 'score', 'running', 'direction', 'dots'])


class GameLoop:
    def __init__(self, width=BOARD_WIDTH, height=BOARD_HEIGHT, cell_size=DOT_SIZE, rng=None):
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.rng = rng if rng is not None else random.Random()

        self._lock = threading.RLock()

        # Los demás atributos se inicializan en initialize()
        self.snake = deque()
        self.dots = 0
        self.apple = (0, 0)
        self.direction = Direction.RIGHT
        self.heading = Direction.RIGHT  # Dirección del último movimiento ejecutado
        self.running = False
        self.score = 0

        self.initialize()

    @property
    def cols(self):
        return self.width // self.cell_size

    @property
    def rows(self):
        return self.height // self.cell_size

    @property
    def head(self):
        return self.snake[0]

    def initialize(self):
        """ Configura el juego para un nuevo inicio o reinicio. """
        with self._lock:
            self.dots = INITIAL_DOTS
            self.score = 0

            start = INITIAL_HEAD_CELL * self.cell_size
            self.snake = deque(
                (start - i * self.cell_size, start) for i in range(self.dots))

            self.direction = Direction.RIGHT
            self.heading = Direction.RIGHT
            self.locate_apple()
            self.running = True

    def locate_apple(self):
        """ Coloca la manzana en una celda aleatoria (puede caer bajo la serpiente). """
        with self._lock:
            apple_x = self.rng.randrange(self.cols) * self.cell_size
            apple_y = self.rng.randrange(self.rows) * self.cell_size
            self.apple = (apple_x, apple_y)

    def set_direction(self, requested):
        """
        Cambia la dirección activa salvo que sea la contraria a la actual
        o a la del último movimiento. Devuelve True si hubo cambio.
        """
        with self._lock:
            if requested == self.direction.opposite or requested == self.heading.opposite:
                return False
            if requested == self.direction:
                return False
            self.direction = requested
            return True

    def tick(self):
        """ Avanza un paso de juego. Devuelve si la partida sigue en curso. """
        with self._lock:
            if not self.running:
                return False

            self._check_apple()
            self._move()
            self._check_collision()
            return self.running

    def _check_apple(self):
        # Se compara con la cabeza ANTES de moverse
        if self.head == self.apple:
            self.dots += 1
            self.score += 1
            self.locate_apple()

    def _move(self):
        head_x, head_y = self.head
        new_head = (head_x + self.direction.dx * self.cell_size,
                    head_y + self.direction.dy * self.cell_size)

        # Cada segmento ocupa la posición previa de su predecesor: basta con
        # añadir la nueva cabeza y quitar la cola sobrante
        self.snake.appendleft(new_head)
        while len(self.snake) > self.dots:
            self.snake.pop()
        self.heading = self.direction

    def _check_collision(self):
        head = self.head

        # 1. Choque consigo misma (sólo segmentos con índice > 4)
        for z in range(len(self.snake) - 1, SELF_COLLISION_SAFE_INDEX, -1):
            if self.snake[z] == head:
                self.running = False
                break

        # 2. Choque con los bordes
        head_x, head_y = head
        if not (0 <= head_x < self.width and 0 <= head_y < self.height):
            self.running = False

    def snapshot(self):
        with self._lock:
            return GameSnapshot(
                snake=tuple(self.snake),
                apple=self.apple,
                score=self.score,
                running=self.running,
                direction=self.direction,
                dots=self.dots,
            )

    def board_matrix(self):
        """
        Devuelve el tablero como matriz numpy (filas x columnas) con
        CELL_EMPTY, CELL_BODY, CELL_HEAD y CELL_APPLE. Las celdas fuera del
        tablero (cabeza tras chocar con un borde) se omiten.
        """
        with self._lock:
            board = np.full((self.rows, self.cols), CELL_EMPTY, dtype=np.int8)

            apple_col = self.apple[0] // self.cell_size
            apple_row = self.apple[1] // self.cell_size
            if 0 <= apple_row < self.rows and 0 <= apple_col < self.cols:
                board[apple_row, apple_col] = CELL_APPLE

            # Se pinta de la cola a la cabeza para que la cabeza quede encima
            for i in range(len(self.snake) - 1, -1, -1):
                col = self.snake[i][0] // self.cell_size
                row = self.snake[i][1] // self.cell_size
                if 0 <= row < self.rows and 0 <= col < self.cols:
                    board[row, col] = CELL_HEAD if i == 0 else CELL_BODY
            return board
