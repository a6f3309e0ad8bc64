import unittest

from snake_menus import (DEFAULT_DIFFICULTY, DIFFICULTY_PRESETS,
                         EMPTY_NAME_WARNING, MAX_NAME_LENGTH,
                         OUTCOME_CHANGE_DIFFICULTY, OUTCOME_QUIT,
                         OUTCOME_RESTART, DifficultyMenu, GameOverMenu,
                         NameEntry, difficulty_delay_seconds,
                         resolve_difficulty)


class TestDifficulty(unittest.TestCase):
    def test_presets(self):
        self.assertEqual(DIFFICULTY_PRESETS, {'easy': 240, 'medium': 180, 'hard': 120})
        self.assertEqual(DEFAULT_DIFFICULTY, 'medium')

    def test_resolve_accepts_names_labels_and_indices(self):
        self.assertEqual(resolve_difficulty('hard'), 'hard')
        self.assertEqual(resolve_difficulty(' EASY '), 'easy')
        self.assertEqual(resolve_difficulty('Difícil'), 'hard')
        self.assertEqual(resolve_difficulty(1), 'easy')
        self.assertEqual(resolve_difficulty('3'), 'hard')

    def test_resolve_falls_back_to_medium(self):
        for choice in [None, '', 'imposible', 0, 4, -1, True]:
            self.assertEqual(resolve_difficulty(choice), 'medium', msg=repr(choice))

    def test_delay_in_seconds(self):
        self.assertAlmostEqual(difficulty_delay_seconds('easy'), 0.24)
        self.assertAlmostEqual(difficulty_delay_seconds(None), 0.18)


class TestNameEntry(unittest.TestCase):
    def setUp(self):
        self.entry = NameEntry()

    def test_empty_name_is_reprompted(self):
        self.entry.type_text("   ")
        self.assertIsNone(self.entry.submit())
        self.assertEqual(self.entry.warning, EMPTY_NAME_WARNING)
        self.assertEqual(self.entry.text, "")

        self.entry.type_text("Ana")
        self.assertIsNone(self.entry.warning)
        self.assertEqual(self.entry.submit(), "Ana")

    def test_name_is_stripped_and_limited(self):
        self.entry.type_text("  Ana  ")
        self.assertEqual(self.entry.submit(), "Ana")

        long_entry = NameEntry()
        long_entry.type_text("x" * (MAX_NAME_LENGTH + 10))
        self.assertEqual(len(long_entry.text), MAX_NAME_LENGTH)

    def test_control_characters_are_ignored(self):
        self.entry.type_text("A\rn\ta\n")
        self.assertEqual(self.entry.text, "Ana")

    def test_backspace(self):
        self.entry.type_text("Anaa")
        self.entry.backspace()
        self.assertEqual(self.entry.text, "Ana")

    def test_cancel_then_refuse_returns_to_prompt(self):
        self.entry.type_text("An")
        self.entry.cancel()
        self.assertTrue(self.entry.confirming_cancel)
        self.assertFalse(self.entry.confirm_yes)

        # Durante la confirmación no se escribe
        self.entry.type_text("x")
        self.assertEqual(self.entry.text, "An")

        self.assertFalse(self.entry.answer_cancel())
        self.assertFalse(self.entry.confirming_cancel)
        self.entry.type_text("a")
        self.assertEqual(self.entry.submit(), "Ana")

    def test_cancel_then_confirm_exits(self):
        self.entry.cancel()
        self.entry.toggle_confirm_choice()
        self.assertTrue(self.entry.confirm_yes)
        self.assertTrue(self.entry.answer_cancel())

    def test_answer_without_cancel_does_nothing(self):
        self.assertFalse(self.entry.answer_cancel(True))


class TestOptionMenus(unittest.TestCase):
    def test_difficulty_menu_defaults_to_medium(self):
        menu = DifficultyMenu()
        self.assertEqual(menu.current, 'medium')
        self.assertEqual(menu.move(1), 'hard')
        self.assertEqual(menu.move(1), 'easy')
        self.assertEqual(menu.close(), 'medium')
        self.assertEqual(menu.current, 'medium')

    def test_difficulty_menu_choose_by_index(self):
        menu = DifficultyMenu()
        self.assertEqual(menu.choose(0), 'easy')
        self.assertIsNone(menu.choose(3))
        self.assertEqual(menu.current, 'easy')

    def test_game_over_menu(self):
        menu = GameOverMenu()
        self.assertEqual(menu.options, (OUTCOME_RESTART, OUTCOME_QUIT, OUTCOME_CHANGE_DIFFICULTY))
        self.assertEqual(menu.choose(), OUTCOME_RESTART)
        self.assertEqual(menu.move(-1), OUTCOME_CHANGE_DIFFICULTY)
        menu.reset()
        self.assertEqual(menu.current, OUTCOME_RESTART)
        self.assertEqual(menu.close(), OUTCOME_QUIT)


if __name__ == '__main__':
    unittest.main()
