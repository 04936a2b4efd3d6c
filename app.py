"""
Streamlit Calculator (programmer mode + history)

Features:
- Keypad calculator with a running expression and a display readout.
- Safe evaluation through a dedicated parser (no eval()).
- Memory register: M+ M- MR MC.
- Programmer mode: binary / hex view of the displayed value, with copy buttons.
- Last 10 calculations kept in st.session_state, newest first.
- Keyboard field: type 7+3 and press Enter.

Run:
    pip install -e .
    streamlit run app.py
"""

import html

import streamlit as st

from neoncalc import config
from neoncalc.controller import Calculator
from neoncalc.logging_config import setup_logging

setup_logging(level=config.LOG_LEVEL, log_file=config.LOG_FILE)

st.set_page_config(page_title=config.PAGE_TITLE, page_icon="🧮", layout="centered")

# ---------- STYLES ----------
st.markdown(
    """
    <style>
    .stButton button { width: 100%; font-weight: 600; }
    .nc-expression {
        text-align: right; font-family: monospace; font-size: 0.95rem;
        color: #67e8f9; padding: 6px 10px; border-radius: 6px;
        background: rgba(15, 23, 42, 0.7); overflow: hidden; white-space: nowrap;
    }
    .nc-display {
        text-align: right; font-family: monospace; font-size: 2rem;
        color: #a5f3fc; padding: 12px; border-radius: 6px; margin: 8px 0 12px 0;
        background: rgba(15, 23, 42, 0.8); border: 1px solid rgba(6, 182, 212, 0.3);
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# Initialize the controller in session_state
if "calculator" not in st.session_state:
    st.session_state.calculator = Calculator()


# ---------- CALLBACKS ----------
def press(label: str) -> None:
    st.session_state.calculator.submit(label)


def type_keys() -> None:
    text = st.session_state.keyboard_input
    if text:
        st.session_state.calculator.type_text(text, submit=True)
    st.session_state.keyboard_input = ""


def toggle_programmer() -> None:
    st.session_state.calculator.toggle_programmer()


def toggle_history() -> None:
    st.session_state.calculator.toggle_history()


state = st.session_state.calculator.state

# ---------- READOUTS ----------
st.title("🧮 " + config.PAGE_TITLE)

st.markdown(
    f"<div class='nc-expression'>{html.escape(state.expression or '0')}</div>",
    unsafe_allow_html=True,
)
st.markdown(
    f"<div class='nc-display'>{html.escape(state.display)}</div>",
    unsafe_allow_html=True,
)

# ---------- MEMORY ROW ----------
mem_cols = st.columns(len(config.MEMORY_KEYS))
for label, column in zip(config.MEMORY_KEYS, mem_cols):
    column.button(label, key=f"key_{label}", on_click=press, args=(label,))

# ---------- KEYPAD ----------
for row in config.KEYPAD_ROWS:
    spans = [span for _, span, _ in row]
    padding = config.KEYPAD_COLUMNS - sum(spans)
    columns = st.columns(spans + [padding] if padding else spans)
    for (label, _, variant), column in zip(row, columns):
        column.button(
            label,
            key=f"key_{label}",
            on_click=press,
            args=(label,),
            type="primary" if variant == "operator" else "secondary",
        )

st.text_input(
    "Keyboard",
    key="keyboard_input",
    on_change=type_keys,
    placeholder="Type e.g. 7+3 and press Enter",
)

# ---------- PROGRAMMER MODE ----------
st.button(
    "Hide Programmer Mode" if state.show_programmer else "Show Programmer Mode",
    key="toggle_programmer",
    on_click=toggle_programmer,
)
if state.show_programmer:
    st.markdown("**Binary:**")
    st.code(state.binary, language=None)
    st.markdown("**Hex:**")
    st.code(state.hex, language=None)
    if state.radix_truncated:
        st.caption(config.TRUNCATION_NOTE)

# ---------- HISTORY ----------
st.button(
    "Hide History" if state.show_history else "Show History",
    key="toggle_history",
    on_click=toggle_history,
)
if state.show_history:
    if state.history:
        for entry in state.history:
            st.text(entry)
    else:
        st.info("No history yet")

# Footer
st.markdown("---")
st.caption("Expressions are evaluated by a dedicated parser; Python's eval() is never used.")
