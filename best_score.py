# best_score.py

"""
Persistencia de la mejor puntuación
===================================
Fichero de una sola línea: "<jugador> <puntuación> <dd.mm.aaaa HH:MM>".
Cualquier fallo de lectura o escritura se avisa por pantalla y se sustituye
por los valores por defecto; nunca interrumpe el juego.
"""

import os
from datetime import datetime

SCORE_FILE = "best_score.txt"
DEFAULT_BEST_PLAYER = "Unknown"
DEFAULT_BEST_SCORE = 0
TIMESTAMP_FORMAT = "%d.%m.%Y %H:%M"


def format_record(name, score, timestamp):
    return f"{name} {score} {timestamp.strftime(TIMESTAMP_FORMAT)}\n"


def parse_record(line):
    """
    Interpreta una línea del fichero. Devuelve (nombre, puntuación, fecha o None).
    Lanza ValueError si la línea no es válida.
    """
    line = line.strip()
    if not line:
        raise ValueError("línea vacía")

    # Se separa desde la derecha: el nombre puede contener espacios
    parts = line.rsplit(" ", 3)
    timestamp = None
    if len(parts) == 4:
        try:
            timestamp = datetime.strptime(f"{parts[2]} {parts[3]}", TIMESTAMP_FORMAT)
            name, score_text = parts[0], parts[1]
        except ValueError:
            timestamp = None
    if timestamp is None:
        # Sin fecha válida: formato antiguo "<jugador> <puntuación>"
        name, _, score_text = line.rpartition(" ")

    name = name.strip()
    if not name:
        raise ValueError(f"línea sin nombre de jugador: {line!r}")
    score = int(score_text)
    if score < 0:
        raise ValueError(f"puntuación negativa: {score}")
    return name, score, timestamp


class BestScoreStore:
    def __init__(self, filepath=SCORE_FILE):
        self.filepath = filepath
        self.best_player = DEFAULT_BEST_PLAYER
        self.best_score = DEFAULT_BEST_SCORE
        self.best_timestamp = None

    def _reset_to_defaults(self):
        self.best_player = DEFAULT_BEST_PLAYER
        self.best_score = DEFAULT_BEST_SCORE
        self.best_timestamp = None

    def load_best(self):
        """ Carga (jugador, puntuación) del fichero o los valores por defecto. """
        if not os.path.exists(self.filepath):
            print(f"No se encontró {self.filepath}. Usando valores por defecto.")
            self._reset_to_defaults()
            return self.best_player, self.best_score

        try:
            with open(self.filepath, 'r', encoding='utf-8') as f:
                first_line = f.readline()
            name, score, timestamp = parse_record(first_line)
            self.best_player = name
            self.best_score = score
            self.best_timestamp = timestamp
        except (OSError, UnicodeDecodeError, ValueError) as e:
            print(
                f"Advertencia: Error al cargar la mejor puntuación desde {self.filepath}: {e}. Usando valores por defecto.")
            self._reset_to_defaults()
        return self.best_player, self.best_score

    def save_best(self, name, score, timestamp=None):
        """ Sobrescribe el fichero con el nuevo récord. Devuelve True si se guardó. """
        if timestamp is None:
            timestamp = datetime.now()

        record_dir = os.path.dirname(self.filepath)
        if record_dir and not os.path.exists(record_dir):
            try:
                os.makedirs(record_dir, exist_ok=True)
            except OSError as e:
                print(f"Error al crear el directorio {record_dir}: {e}")
                return False

        try:
            with open(self.filepath, 'w', encoding='utf-8') as f:
                f.write(format_record(name, score, timestamp))
        except OSError as e:
            print(f"Error al guardar la mejor puntuación en {self.filepath}: {e}")
            return False

        self.best_player = name
        self.best_score = score
        self.best_timestamp = timestamp
        return True

    def record_run(self, name, score, now=None):
        """ Guarda la partida sólo si supera el récord actual. """
        if score <= self.best_score:
            return False
        print(f"¡Nuevo récord! {name}: {score} (anterior: {self.best_score} de {self.best_player})")
        if now is None:
            now = datetime.now()
        saved = self.save_best(name, score, now)
        # Aunque falle la escritura, el récord se mantiene en memoria para esta sesión
        self.best_player = name
        self.best_score = score
        self.best_timestamp = now
        return saved
