# snake_menus.py

"""
Menús del juego como máquinas de estado sin bloqueo.
La ventana y la terminal sólo dibujan su estado y les pasan las teclas.
"""

# --- Dificultad (milisegundos entre pasos) ---
DIFFICULTY_PRESETS = {
    'easy': 240,
    'medium': 180,
    'hard': 120,
}
DIFFICULTY_ORDER = ('easy', 'medium', 'hard')
DIFFICULTY_LABELS = {
    'easy': "Fácil",
    'medium': "Media",
    'hard': "Difícil",
}
DEFAULT_DIFFICULTY = 'medium'

# --- Nombre del jugador ---
MAX_NAME_LENGTH = 20
EMPTY_NAME_WARNING = "El nombre no puede estar vacío. Introduce un nombre válido."

# --- Opciones de fin de partida (mismo orden que el diálogo original) ---
OUTCOME_RESTART = 'restart'
OUTCOME_QUIT = 'quit'
OUTCOME_CHANGE_DIFFICULTY = 'change_difficulty'
GAME_OVER_OPTIONS = (OUTCOME_RESTART, OUTCOME_QUIT, OUTCOME_CHANGE_DIFFICULTY)
GAME_OVER_LABELS = {
    OUTCOME_RESTART: "Jugar otra vez",
    OUTCOME_QUIT: "Salir",
    OUTCOME_CHANGE_DIFFICULTY: "Cambiar dificultad",
}


def resolve_difficulty(choice):
    """
    Acepta el nombre ('hard'), la etiqueta ('Difícil') o el índice 1-3.
    Cualquier otra cosa (o None) devuelve la dificultad media.
    """
    if choice is None:
        return DEFAULT_DIFFICULTY
    if isinstance(choice, int) and not isinstance(choice, bool):
        if 1 <= choice <= len(DIFFICULTY_ORDER):
            return DIFFICULTY_ORDER[choice - 1]
        return DEFAULT_DIFFICULTY

    text = str(choice).strip().lower()
    if text in DIFFICULTY_PRESETS:
        return text
    for key, label in DIFFICULTY_LABELS.items():
        if label.lower() == text:
            return key
    if text.isdigit():
        return resolve_difficulty(int(text))
    return DEFAULT_DIFFICULTY


def difficulty_delay_seconds(difficulty):
    return DIFFICULTY_PRESETS[resolve_difficulty(difficulty)] / 1000.0


class NameEntry:
    """Pide el nombre del jugador. Cancelar abre una confirmación Sí/No."""

    def __init__(self, max_length=MAX_NAME_LENGTH):
        self.max_length = max_length
        self.text = ""
        self.warning = None
        self.confirming_cancel = False
        self.confirm_yes = False

    def type_text(self, text):
        if self.confirming_cancel:
            return
        for char in text:
            if not char.isprintable() or len(self.text) >= self.max_length:
                continue
            self.text += char
        self.warning = None

    def backspace(self):
        if not self.confirming_cancel:
            self.text = self.text[:-1]

    def submit(self):
        """ Devuelve el nombre limpio, o None si está vacío (y se vuelve a pedir). """
        if self.confirming_cancel:
            return None
        name = self.text.strip()
        if not name:
            self.text = ""
            self.warning = EMPTY_NAME_WARNING
            return None
        self.warning = None
        return name

    def cancel(self):
        self.confirming_cancel = True
        self.confirm_yes = False  # Por defecto el botón "No"

    def toggle_confirm_choice(self):
        if self.confirming_cancel:
            self.confirm_yes = not self.confirm_yes

    def answer_cancel(self, confirm=None):
        """
        True si el jugador confirma que quiere salir del juego.
        Sin argumento usa la opción marcada en la confirmación.
        """
        if not self.confirming_cancel:
            return False
        if confirm is None:
            confirm = self.confirm_yes
        self.confirming_cancel = False
        self.confirm_yes = False
        return bool(confirm)


class OptionMenu:
    def __init__(self, options, default_index=0):
        self.options = tuple(options)
        self.default_index = default_index
        self.selected = default_index

    @property
    def current(self):
        return self.options[self.selected]

    def reset(self):
        self.selected = self.default_index

    def move(self, step):
        self.selected = (self.selected + step) % len(self.options)
        return self.current

    def choose(self, index=None):
        """ Elige la opción del cursor o la del índice dado (0-based). """
        if index is not None:
            if not 0 <= index < len(self.options):
                return None
            self.selected = index
        return self.current


class DifficultyMenu(OptionMenu):
    def __init__(self):
        super().__init__(DIFFICULTY_ORDER, DIFFICULTY_ORDER.index(DEFAULT_DIFFICULTY))

    def close(self):
        # Cerrar sin elegir equivale a la dificultad media
        self.reset()
        return DEFAULT_DIFFICULTY


class GameOverMenu(OptionMenu):
    def __init__(self):
        super().__init__(GAME_OVER_OPTIONS, 0)

    def close(self):
        return OUTCOME_QUIT
