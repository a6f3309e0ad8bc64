# snake_shell.py
import curses
import argparse
import time

from snake_logic import CELL_APPLE, CELL_BODY, CELL_EMPTY, CELL_HEAD, Direction
from snake_menus import DIFFICULTY_LABELS, DIFFICULTY_PRESETS, GAME_OVER_LABELS, OUTCOME_QUIT, OUTCOME_RESTART
from snake_session import (SCREEN_DIFFICULTY, SCREEN_GAME_OVER, SCREEN_NAME,
                           SCREEN_PLAYING, add_common_arguments,
                           session_from_args)

# Cada celda lógica se dibuja con dos caracteres para que se vea cuadrada
CELL_CHARS = {
    CELL_EMPTY: "  ",
    CELL_BODY: "ss",
    CELL_HEAD: "SS",
    CELL_APPLE: "**",
}
BORDER_CHARS = "##"

FRAME_TIMEOUT_MS = 20  # Espera máxima de getch(); el ritmo lo marca el TickTimer

KEY_TO_DIRECTION_CURSES = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
}
ENTER_KEYS = (curses.KEY_ENTER, 10, 13)
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)
ESCAPE_KEY = 27


def board_lines(board):
    """ Convierte la matriz del tablero en líneas de texto con borde '##'. """
    rows, cols = board.shape
    border = BORDER_CHARS * (cols + 2)
    lines = [border]
    for r in range(rows):
        inner = "".join(CELL_CHARS[int(cell)] for cell in board[r])
        lines.append(BORDER_CHARS + inner + BORDER_CHARS)
    lines.append(border)
    return lines


def required_terminal_size(board_rows, board_cols):
    # +2 bordes, +1 línea de puntuación
    return board_rows + 3, (board_cols + 2) * len(BORDER_CHARS)


def safe_addstr(stdscr, row, col, text):
    term_rows, term_cols = stdscr.getmaxyx()
    if not (0 <= row < term_rows and 0 <= col < term_cols):
        return
    try:
        stdscr.addstr(row, col, text[:max(0, term_cols - col - 1)])
    except curses.error:
        pass  # Escribir en la última celda de la terminal lanza error aunque se dibuje


def draw_centered(stdscr, row, text):
    _, term_cols = stdscr.getmaxyx()
    safe_addstr(stdscr, row, max(0, (term_cols - len(text)) // 2), text)


def draw_options(stdscr, first_row, labels, selected):
    for i, label in enumerate(labels):
        draw_centered(stdscr, first_row + i, f"> {label} <" if i == selected else label)


def draw_game_shell(stdscr, session):
    stdscr.erase()
    state = session.snapshot()
    term_rows, _ = stdscr.getmaxyx()
    middle = term_rows // 2

    if state.screen == SCREEN_NAME:
        entry = session.name_entry
        if entry.confirming_cancel:
            draw_centered(stdscr, middle - 2, "¿Seguro que quieres cancelar?")
            draw_centered(stdscr, middle, "[Sí]    No" if entry.confirm_yes else "Sí    [No]")
            draw_centered(stdscr, middle + 2, "<- -> elegir, ENTER confirmar")
        else:
            draw_centered(stdscr, middle - 2, "Introduce tu nombre:")
            draw_centered(stdscr, middle, f"{entry.text}_")
            if entry.warning:
                draw_centered(stdscr, middle + 2, entry.warning)
            draw_centered(stdscr, middle + 4, "ENTER = Aceptar    ESC = Cancelar")

    elif state.screen == SCREEN_DIFFICULTY:
        menu = session.difficulty_menu
        draw_centered(stdscr, middle - 3, "Elige la dificultad")
        labels = [f"{i + 1}. {DIFFICULTY_LABELS[key]} ({DIFFICULTY_PRESETS[key]} ms)"
                  for i, key in enumerate(menu.options)]
        draw_options(stdscr, middle - 1, labels, menu.selected)

    elif state.screen == SCREEN_PLAYING:
        lines = board_lines(session.loop.board_matrix())
        for r, line in enumerate(lines):
            safe_addstr(stdscr, r, 0, line)
        safe_addstr(stdscr, len(lines), 2,
                    f"Score: {state.score}    Best: {state.best_score} ({state.best_player})")

    elif state.screen == SCREEN_GAME_OVER:
        menu = session.game_over_menu
        draw_centered(stdscr, middle - 4, "GAME OVER")
        draw_centered(stdscr, middle - 3, f"{state.player_name}: {state.score}    "
                                          f"Best: {state.best_score} ({state.best_player})")
        labels = [GAME_OVER_LABELS[outcome] for outcome in menu.options]
        draw_options(stdscr, middle - 1, labels, menu.selected)
        draw_centered(stdscr, middle + 3, "'r' reiniciar, 'q' salir")

    stdscr.refresh()


def handle_key_shell(session, user_key):
    """ Traduce una tecla de curses a la acción de la pantalla activa. """
    if user_key == -1:  # -1 es no input
        return
    screen = session.screen

    if screen == SCREEN_NAME:
        entry = session.name_entry
        if entry.confirming_cancel:
            if user_key in (curses.KEY_LEFT, curses.KEY_RIGHT):
                entry.toggle_confirm_choice()
            elif user_key in ENTER_KEYS:
                session.answer_cancel()
            elif user_key == ESCAPE_KEY:
                session.answer_cancel(False)
        elif user_key in ENTER_KEYS:
            session.submit_name()
        elif user_key in BACKSPACE_KEYS:
            entry.backspace()
        elif user_key == ESCAPE_KEY:
            entry.cancel()
        elif 32 <= user_key < 127:
            entry.type_text(chr(user_key))

    elif screen == SCREEN_DIFFICULTY:
        if user_key == curses.KEY_UP:
            session.difficulty_menu.move(-1)
        elif user_key == curses.KEY_DOWN:
            session.difficulty_menu.move(1)
        elif user_key in ENTER_KEYS:
            session.choose_difficulty()
        elif user_key in (ord('1'), ord('2'), ord('3')):
            session.choose_difficulty(user_key - ord('0'))
        elif user_key == ESCAPE_KEY:
            session.close_difficulty_menu()

    elif screen == SCREEN_PLAYING:
        if user_key in KEY_TO_DIRECTION_CURSES:
            session.steer(KEY_TO_DIRECTION_CURSES[user_key])

    elif screen == SCREEN_GAME_OVER:
        menu = session.game_over_menu
        if user_key in (curses.KEY_UP, curses.KEY_LEFT):
            menu.move(-1)
        elif user_key in (curses.KEY_DOWN, curses.KEY_RIGHT):
            menu.move(1)
        elif user_key in ENTER_KEYS:
            session.choose_game_over()
        elif user_key == ord('r'):
            session.choose_game_over(OUTCOME_RESTART)
        elif user_key == ord('q'):
            session.choose_game_over(OUTCOME_QUIT)
        elif user_key == ESCAPE_KEY:
            session.choose_game_over(menu.close())


def game_loop_shell_curses(stdscr, session):
    curses.curs_set(0)
    stdscr.nodelay(1)
    stdscr.keypad(True)
    stdscr.timeout(FRAME_TIMEOUT_MS)

    term_rows, term_cols = stdscr.getmaxyx()
    min_req_rows, min_req_cols = required_terminal_size(session.loop.rows, session.loop.cols)

    if term_rows < min_req_rows or term_cols < min_req_cols:
        stdscr.clear()
        safe_addstr(stdscr, 0, 0, "Terminal is too small.")
        safe_addstr(stdscr, 1, 0, f"Required: {min_req_rows} rows, {min_req_cols} cols.")
        safe_addstr(stdscr, 2, 0, f"Available: {term_rows} rows, {term_cols} cols.")
        safe_addstr(stdscr, 4, 0, "Press any key to exit.")
        stdscr.nodelay(0)
        stdscr.getch()
        return

    last_time = time.monotonic()
    while not session.closed:
        user_key = stdscr.getch()
        handle_key_shell(session, user_key)

        now = time.monotonic()
        session.update(now - last_time)
        last_time = now

        if not session.closed:
            draw_game_shell(stdscr, session)


def main_shell():
    parser = argparse.ArgumentParser(description="Snake - versión de terminal (curses)")
    add_common_arguments(parser)
    args = parser.parse_args()

    session = session_from_args(args)
    try:
        curses.wrapper(game_loop_shell_curses, session)
    except curses.error as e:
        print(f"Error de Curses: {e}")
        print("Asegúrate de que la terminal es compatible y tiene el tamaño adecuado.")


if __name__ == "__main__":
    main_shell()
