import streamlit as st

from .config import MAX_UI_TOLERANCE
from .spell_checker import CheckReport, SpellChecker


def display_report(report: CheckReport) -> None:
    """Display one check result.

    Parameters
    ----------
    report:
        Outcome of :meth:`SpellChecker.check` for the word typed by the user.
    """
    if report.result.exact_match:
        st.success(f"✅ {report.message}")
    elif report.result.candidates:
        st.info(f"\U0001f4a1 {report.message}")
    else:
        st.warning(f"⚠️ {report.message}")

    col1, col2 = st.columns(2)
    col1.metric("Suggestions", len(report.result.candidates))
    col2.metric("Search time", f"{report.elapsed * 1000:.3f} ms")


def display_spell_checker(checker: SpellChecker) -> None:
    """Render the query form and the result of the current query."""
    st.header("\U0001f50e Spell checker")
    st.caption(f"{len(checker)} words indexed ({checker.algorithm})")

    word = st.text_input("Word to check")
    tolerance = st.slider(
        "Tolerance (edit distance)",
        min_value=0,
        max_value=MAX_UI_TOLERANCE,
        value=min(checker.tolerance, MAX_UI_TOLERANCE),
    )

    if not word or not word.strip():
        st.info("Type a word to get suggestions.")
        return

    display_report(checker.check(word, tolerance))
