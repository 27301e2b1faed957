# main.py
"""
BK-Tree Spell Checker - Streamlit front end
Usage: streamlit run main.py
"""

import logging

import streamlit as st

from bkspell.config import APP_NAME, APP_VERSION
from bkspell.spell_checker import SpellChecker
from bkspell.streamlit_ui import display_spell_checker
from bkspell.utils import get_distance_algorithm, get_word_list_path

logging.basicConfig(level=logging.WARNING)

st.set_page_config(
    page_title=APP_NAME,
    page_icon="🔎",
    layout="centered",
    menu_items={"About": f"{APP_NAME} v{APP_VERSION}"},
)


@st.cache_resource(show_spinner="Building structure...")
def load_checker(words_path: str, algorithm: str) -> SpellChecker:
    # built once per process; sessions only search afterwards
    return SpellChecker.from_word_list(words_path, algorithm=algorithm)


def main():
    st.title(f"🔎 {APP_NAME}")
    words_path = get_word_list_path()
    try:
        checker = load_checker(words_path, get_distance_algorithm())
    except (OSError, UnicodeDecodeError) as e:
        st.error(f"❌ Could not load word list {words_path}: {e}")
        st.info("Set BKSPELL_WORD_LIST to a file with one word per line.")
        return
    display_spell_checker(checker)


main()
