import unittest
from unittest import mock

from bkspell.spell_checker import SpellChecker
from bkspell import streamlit_ui


class TestStreamlitSpellChecker(unittest.TestCase):
    def setUp(self) -> None:
        self.checker = SpellChecker(tolerance=1, algorithm="levenshtein")
        self.checker.add_words(["cat", "cot", "dog"])
        self.st = mock.patch.object(streamlit_ui, "st").start()
        self.st.columns.return_value = (mock.MagicMock(), mock.MagicMock())
        self.st.slider.return_value = 1

    def tearDown(self) -> None:
        mock.patch.stopall()

    def test_prompt_when_no_word(self):
        self.st.text_input.return_value = "  "
        streamlit_ui.display_spell_checker(self.checker)
        self.st.info.assert_called_once_with("Type a word to get suggestions.")
        self.st.columns.assert_not_called()

    def test_exact_match(self):
        self.st.text_input.return_value = "Cat"
        streamlit_ui.display_spell_checker(self.checker)
        self.st.success.assert_called_once()
        self.assertIn("Word is spelled correctly.", self.st.success.call_args[0][0])

    def test_suggestions(self):
        self.st.text_input.return_value = "cut"
        streamlit_ui.display_spell_checker(self.checker)
        self.assertIn("Did you mean: cat, cot?", self.st.info.call_args[0][0])
        col1, _ = self.st.columns.return_value
        col1.metric.assert_called_once_with("Suggestions", 2)

    def test_no_suggestions_uses_slider_tolerance(self):
        self.st.text_input.return_value = "cut"
        self.st.slider.return_value = 0
        streamlit_ui.display_spell_checker(self.checker)
        self.assertIn("No suggestions found.", self.st.warning.call_args[0][0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
