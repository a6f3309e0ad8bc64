# snake_ui.py

import argparse

import arcade
from arcade.types import Color

from snake_logic import BOARD_HEIGHT, BOARD_WIDTH, DOT_SIZE, Direction
from snake_menus import DIFFICULTY_LABELS, DIFFICULTY_PRESETS, GAME_OVER_LABELS
from snake_session import (SCREEN_DIFFICULTY, SCREEN_GAME_OVER, SCREEN_NAME,
                           SCREEN_PLAYING, add_common_arguments,
                           session_from_args)

# --- Constantes de la Pantalla ---
SCREEN_WIDTH = BOARD_WIDTH
SCREEN_HEIGHT = BOARD_HEIGHT
SCREEN_TITLE = "Snake"

# --- Colores ---
BACKGROUND_COLOR = Color(30, 30, 30)
APPLE_COLOR = arcade.color.RED
HEAD_COLOR = arcade.color.GREEN
BODY_COLOR = arcade.color.YELLOW
TEXT_COLOR = arcade.color.WHITE
HIGHLIGHT_COLOR = arcade.color.YELLOW
WARNING_COLOR = arcade.color.ORANGE

# --- Teclas ---
KEY_TO_DIRECTION = {
    arcade.key.LEFT: Direction.LEFT,
    arcade.key.RIGHT: Direction.RIGHT,
    arcade.key.UP: Direction.UP,
    arcade.key.DOWN: Direction.DOWN,
}
CONFIRM_KEYS = (arcade.key.RETURN, arcade.key.ENTER)


class SnakeGameUI(arcade.Window):
    def __init__(self, session, width=SCREEN_WIDTH, height=SCREEN_HEIGHT, title=SCREEN_TITLE):
        super().__init__(width, height, title, update_rate=1/60)
        self.background_color = BACKGROUND_COLOR
        self.session = session

    # --- Conversión de coordenadas ---
    def _cell_bottom(self, y):
        # La lógica tiene la Y hacia abajo; arcade la tiene hacia arriba
        return self.height - y - DOT_SIZE

    # --- Dibujo ---
    def on_draw(self):
        self.clear()
        screen = self.session.screen

        if screen == SCREEN_NAME:
            self.draw_name_prompt()
        elif screen == SCREEN_DIFFICULTY:
            self.draw_difficulty_menu()
        elif screen == SCREEN_PLAYING:
            self.draw_board()
            self.draw_score()
        elif screen == SCREEN_GAME_OVER:
            self.draw_score()
            self.draw_game_over()

    def draw_board(self):
        state = self.session.snapshot()

        apple_x, apple_y = state.apple
        arcade.draw_circle_filled(
            center_x=apple_x + DOT_SIZE / 2,
            center_y=self._cell_bottom(apple_y) + DOT_SIZE / 2,
            radius=DOT_SIZE / 2, color=APPLE_COLOR)

        for i, (x, y) in enumerate(state.snake):
            arcade.draw_lbwh_rectangle_filled(
                x, self._cell_bottom(y), DOT_SIZE, DOT_SIZE,
                HEAD_COLOR if i == 0 else BODY_COLOR)

    def draw_score(self):
        """ Dibuja la puntuación actual y el récord. """
        state = self.session.snapshot()
        arcade.draw_text(f"Puntuación: {state.score}", 10, self.height - 20,
                         TEXT_COLOR, font_size=14, bold=True)
        arcade.draw_text(f"Récord: {state.best_score} ({state.best_player})",
                         self.width - 10, self.height - 20,
                         TEXT_COLOR, font_size=14, bold=True, anchor_x="right")

    def _draw_options(self, labels, selected, top_y):
        for i, label in enumerate(labels):
            is_selected = i == selected
            arcade.draw_text(f"> {label} <" if is_selected else label,
                             self.width / 2, top_y - i * 35,
                             HIGHLIGHT_COLOR if is_selected else TEXT_COLOR,
                             font_size=18, anchor_x="center", anchor_y="center")

    def draw_name_prompt(self):
        entry = self.session.name_entry
        center_x = self.width / 2
        center_y = self.height / 2

        if entry.confirming_cancel:
            arcade.draw_text("¿Seguro que quieres cancelar?", center_x, center_y + 40,
                             TEXT_COLOR, font_size=20, anchor_x="center", anchor_y="center")
            yes_label = "[Sí]" if entry.confirm_yes else "Sí"
            no_label = "No" if entry.confirm_yes else "[No]"
            arcade.draw_text(f"{yes_label}    {no_label}", center_x, center_y - 10,
                             HIGHLIGHT_COLOR, font_size=18, anchor_x="center", anchor_y="center")
            arcade.draw_text("← → elegir, ENTER confirmar", center_x, center_y - 60,
                             TEXT_COLOR, font_size=12, anchor_x="center", anchor_y="center")
            return

        arcade.draw_text("Introduce tu nombre:", center_x, center_y + 60,
                         TEXT_COLOR, font_size=20, anchor_x="center", anchor_y="center")
        arcade.draw_text(f"{entry.text}_", center_x, center_y,
                         HIGHLIGHT_COLOR, font_size=22, anchor_x="center", anchor_y="center")
        if entry.warning:
            arcade.draw_text(entry.warning, center_x, center_y - 50,
                             WARNING_COLOR, font_size=12, anchor_x="center", anchor_y="center")
        arcade.draw_text("ENTER = Aceptar    ESC = Cancelar", center_x, center_y - 100,
                         TEXT_COLOR, font_size=12, anchor_x="center", anchor_y="center")

    def draw_difficulty_menu(self):
        menu = self.session.difficulty_menu
        arcade.draw_text("Elige la dificultad", self.width / 2, self.height / 2 + 90,
                         TEXT_COLOR, font_size=22, anchor_x="center", anchor_y="center")
        labels = [f"{i + 1}. {DIFFICULTY_LABELS[key]} ({DIFFICULTY_PRESETS[key]} ms)"
                  for i, key in enumerate(menu.options)]
        self._draw_options(labels, menu.selected, self.height / 2 + 30)

    def draw_game_over(self):
        """ Dibuja el mensaje de Game Over y el menú de fin de partida. """
        state = self.session.snapshot()
        menu = self.session.game_over_menu
        arcade.draw_text("Game Over", self.width / 2, self.height / 2 + 80,
                         TEXT_COLOR, font_size=20, bold=True, anchor_x="center", anchor_y="center")
        arcade.draw_text(f"{state.player_name}: {state.score}", self.width / 2, self.height / 2 + 45,
                         TEXT_COLOR, font_size=16, anchor_x="center", anchor_y="center")
        labels = [GAME_OVER_LABELS[outcome] for outcome in menu.options]
        self._draw_options(labels, menu.selected, self.height / 2 - 10)

    # --- Actualización ---
    def on_update(self, delta_time):
        self.session.update(delta_time)

    # --- Entrada ---
    def on_text(self, text):
        screen = self.session.screen
        if screen == SCREEN_NAME:
            self.session.name_entry.type_text(text)
        elif screen == SCREEN_DIFFICULTY and text in ("1", "2", "3"):
            self.session.choose_difficulty(int(text))

    def on_key_press(self, key, modifiers):
        screen = self.session.screen

        if screen == SCREEN_NAME:
            self._on_name_key(key)
        elif screen == SCREEN_DIFFICULTY:
            if key == arcade.key.UP:
                self.session.difficulty_menu.move(-1)
            elif key == arcade.key.DOWN:
                self.session.difficulty_menu.move(1)
            elif key in CONFIRM_KEYS:
                self.session.choose_difficulty()
            elif key == arcade.key.ESCAPE:
                self.session.close_difficulty_menu()
        elif screen == SCREEN_PLAYING:
            # Cualquier otra tecla se ignora durante la partida
            if key in KEY_TO_DIRECTION:
                self.session.steer(KEY_TO_DIRECTION[key])
        elif screen == SCREEN_GAME_OVER:
            menu = self.session.game_over_menu
            if key in (arcade.key.UP, arcade.key.LEFT):
                menu.move(-1)
            elif key in (arcade.key.DOWN, arcade.key.RIGHT):
                menu.move(1)
            elif key in CONFIRM_KEYS:
                self.session.choose_game_over()
            elif key == arcade.key.ESCAPE:
                self.session.choose_game_over(menu.close())

        if self.session.closed:
            arcade.exit()

    def _on_name_key(self, key):
        entry = self.session.name_entry
        if entry.confirming_cancel:
            if key in (arcade.key.LEFT, arcade.key.RIGHT):
                entry.toggle_confirm_choice()
            elif key in CONFIRM_KEYS:
                self.session.answer_cancel()
            elif key == arcade.key.ESCAPE:
                self.session.answer_cancel(False)
            return

        if key == arcade.key.BACKSPACE:
            entry.backspace()
        elif key in CONFIRM_KEYS:
            self.session.submit_name()
        elif key == arcade.key.ESCAPE:
            entry.cancel()

    def on_close(self):  # Se llama cuando se cierra la ventana
        print("Ventana cerrada por el usuario.")
        self.session.close()
        super().on_close()


def main():
    parser = argparse.ArgumentParser(description="Snake - versión de ventana (arcade)")
    add_common_arguments(parser)
    args = parser.parse_args()

    session = session_from_args(args)
    try:
        SnakeGameUI(session)
        arcade.run()
    except Exception as e:
        print(f"Error durante la ejecución de Arcade: {e}")
        print("Asegúrate de que Arcade está instalado y de que hay una pantalla disponible.")
    finally:
        print("Juego finalizado.")


if __name__ == "__main__":
    main()
