import os

import streamlit as st

from examcalc import AngleMode, CalculatorError, evaluate_expression

# --- Configuration ---
DEFAULT_ANGLE_MODE = AngleMode.coerce(os.getenv("EXAMCALC_ANGLE_MODE", "DEG"))
ANGLE_OPTIONS = [AngleMode.DEGREES.value, AngleMode.RADIANS.value]

st.set_page_config(page_title="Exam Calculator", layout="centered")

st.title("🧮 Exam Calculator")

# --- Session State ---
if "last_answer" not in st.session_state:
    st.session_state["last_answer"] = 0.0
if "display" not in st.session_state:
    st.session_state["display"] = ""
if "error" not in st.session_state:
    st.session_state["error"] = ""


def run_evaluation():
    try:
        result = evaluate_expression(
            st.session_state["expression"],
            st.session_state["angle_mode"],
            st.session_state["last_answer"],
        )
    except CalculatorError as e:
        # A failed call leaves the previous answer untouched.
        st.session_state["error"] = str(e)
        return
    st.session_state["last_answer"] = result.value
    st.session_state["display"] = result.formatted
    st.session_state["error"] = ""


def all_clear():
    st.session_state["expression"] = ""
    st.session_state["display"] = ""
    st.session_state["error"] = ""
    st.session_state["last_answer"] = 0.0


# --- Sidebar ---
st.sidebar.radio(
    "Angle mode",
    options=ANGLE_OPTIONS,
    index=ANGLE_OPTIONS.index(DEFAULT_ANGLE_MODE.value),
    key="angle_mode",
)
st.sidebar.caption("Functions: sin cos tan asin acos atan log ln log10 sqrt exp")
st.sidebar.caption("Symbols: pi e ans")

# --- UI Layout ---
st.text_input("Expression", key="expression", placeholder="e.g. sin(30) + 12/3")

col1, col2 = st.columns(2)
col1.button("=", key="evaluate", on_click=run_evaluation)
col2.button("AC", key="all_clear", on_click=all_clear)

st.caption(f"Angle: {st.session_state['angle_mode']} · ans = {st.session_state['last_answer']:g}")

if st.session_state["error"]:
    st.error(st.session_state["error"])
elif st.session_state["display"]:
    st.success(f"= {st.session_state['display']}")
