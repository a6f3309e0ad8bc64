import os
import tempfile
import unittest
from datetime import datetime

from best_score import (DEFAULT_BEST_PLAYER, DEFAULT_BEST_SCORE,
                        BestScoreStore, format_record, parse_record)


class TestRecordFormat(unittest.TestCase):
    def test_format_matches_single_line_layout(self):
        line = format_record("Ana", 12, datetime(2024, 3, 5, 9, 7))
        self.assertEqual(line, "Ana 12 05.03.2024 09:07\n")

    def test_parse_full_line(self):
        name, score, timestamp = parse_record("Ana 12 05.03.2024 09:07\n")
        self.assertEqual((name, score), ("Ana", 12))
        self.assertEqual(timestamp, datetime(2024, 3, 5, 9, 7))

    def test_parse_name_with_spaces(self):
        name, score, _ = parse_record("Ana María 7 01.01.2025 23:59")
        self.assertEqual((name, score), ("Ana María", 7))

    def test_parse_line_without_timestamp(self):
        self.assertEqual(parse_record("Bob 3"), ("Bob", 3, None))

    def test_parse_rejects_garbage(self):
        for line in ["", "   ", "Bob", "Bob tres", "Bob -4 01.01.2025 10:00", " 5"]:
            with self.assertRaises(ValueError, msg=line):
                parse_record(line)


class TestBestScoreStore(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.filepath = os.path.join(self.tmp_dir.name, "best_score.txt")
        self.store = BestScoreStore(self.filepath)

    def tearDown(self):
        self.tmp_dir.cleanup()

    def _write(self, content):
        with open(self.filepath, 'w', encoding='utf-8') as f:
            f.write(content)

    def test_missing_file_gives_defaults(self):
        self.assertEqual(self.store.load_best(), (DEFAULT_BEST_PLAYER, DEFAULT_BEST_SCORE))
        self.assertEqual(self.store.load_best(), ("Unknown", 0))

    def test_malformed_file_gives_defaults(self):
        self._write("nadie sabe\n")
        self.assertEqual(self.store.load_best(), ("Unknown", 0))
        self.assertIsNone(self.store.best_timestamp)

    def test_empty_file_gives_defaults(self):
        self._write("")
        self.assertEqual(self.store.load_best(), ("Unknown", 0))

    def test_save_then_load(self):
        when = datetime(2025, 6, 1, 18, 30)
        self.assertTrue(self.store.save_best("Lucía", 42, when))

        other = BestScoreStore(self.filepath)
        self.assertEqual(other.load_best(), ("Lucía", 42))
        self.assertEqual(other.best_timestamp, when)
        with open(self.filepath, encoding='utf-8') as f:
            self.assertEqual(f.read(), "Lucía 42 01.06.2025 18:30\n")

    def test_save_creates_missing_directory(self):
        nested = BestScoreStore(os.path.join(self.tmp_dir.name, "datos", "best_score.txt"))
        self.assertTrue(nested.save_best("Eva", 3))
        self.assertEqual(BestScoreStore(nested.filepath).load_best(), ("Eva", 3))

    def test_record_run_only_overwrites_higher_score(self):
        self._write("Ana 10 05.03.2024 09:07\n")
        self.store.load_best()

        self.assertFalse(self.store.record_run("Bob", 10))
        self.assertFalse(self.store.record_run("Bob", 4))
        self.assertEqual(BestScoreStore(self.filepath).load_best(), ("Ana", 10))

        self.assertTrue(self.store.record_run("Bob", 11, datetime(2025, 1, 2, 3, 4)))
        self.assertEqual((self.store.best_player, self.store.best_score), ("Bob", 11))
        self.assertEqual(BestScoreStore(self.filepath).load_best(), ("Bob", 11))

    def test_write_failure_is_not_raised(self):
        # Un directorio en lugar de un fichero hace fallar la escritura
        store = BestScoreStore(self.tmp_dir.name)
        self.assertFalse(store.save_best("Ana", 5))
        self.assertEqual(store.best_score, 0)

        self.assertFalse(store.record_run("Ana", 5))
        # El récord de la sesión se mantiene en memoria
        self.assertEqual((store.best_player, store.best_score), ("Ana", 5))

    def test_unreadable_path_gives_defaults(self):
        store = BestScoreStore(self.tmp_dir.name)
        self.assertEqual(store.load_best(), ("Unknown", 0))


if __name__ == '__main__':
    unittest.main()
