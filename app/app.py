"""
app/app.py — ABCU Advising Assistant (web view)
Run from repo root:
  streamlit run app/app.py

Optional secrets:
  .streamlit/secrets.toml
    APP_PASSWORD = "ABCUAdvisor"
  or the ADVISING_APP_PASSWORD environment variable (.env works too)
"""

from __future__ import annotations
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]  # project root
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import io

import streamlit as st

from advising.access import check_passcode, expected_passcode, is_open
from advising.catalog import Catalog
from advising.files import resolve_filename
from advising.loader import load_courses, load_uploaded
from advising.logger import setup_logging
from advising.paths import DATA_DIR, DEFAULT_INPUT, EXPECTED_BASE
from advising.render import catalog_frame, render_detail

setup_logging()


# ---------------------------
# Streamlit config
# ---------------------------
st.set_page_config(
    page_title="ABCU Advising Assistant",
    page_icon="📚",
    layout="wide",
)


# ---------------------------
# Helpers
# ---------------------------
def load_summary(result) -> str:
    msg = f"Loaded {result.loaded} courses."
    if result.skipped:
        msg += f" Skipped malformed lines: {', '.join(str(n) for n in result.skipped)}."
    if result.duplicates:
        msg += f" Ignored duplicate ids: {', '.join(result.duplicates)}."
    return msg


def build_catalog(path) -> tuple[Catalog | None, str]:
    catalog = Catalog()
    result = load_courses(path, catalog)
    if result is None:
        return None, f"Could not open file: {path}"
    return catalog, load_summary(result)


# ---------------------------
# Passcode gate (optional)
# ---------------------------
PASSCODE = expected_passcode(st.secrets)


def advisor_gate():
    st.session_state.setdefault("advisor_ok", False)

    if not PASSCODE:
        st.sidebar.info("🔓 No ADVISING_APP_PASSWORD set. Course data is open to anyone with the link.")
        return

    if st.session_state["advisor_ok"]:
        st.sidebar.success("🔒 Advisor access")
        if st.sidebar.button("Sign out", use_container_width=True):
            st.session_state["advisor_ok"] = False
            st.session_state.pop("catalog", None)
            st.rerun()
        return

    st.title("🔒 ABCU Advising")
    pw = st.text_input("Advisor passcode", type="password")
    if st.button("Open advising tools"):
        if check_passcode(pw, PASSCODE):
            st.session_state["advisor_ok"] = True
            st.rerun()
        else:
            st.error("That passcode is not right.")


advisor_gate()
if not is_open(PASSCODE, st.session_state.get("advisor_ok", False)):
    st.stop()


# ---------------------------
# Header
# ---------------------------
st.title("📚 ABCU Advising Assistant")
st.caption("Course list in alphanumeric order • Course details with prerequisite titles")


# ---------------------------
# Sidebar — Course Data
# ---------------------------
st.sidebar.header("Course Data")
st.sidebar.caption(f"Default file: {DEFAULT_INPUT.name} (stored in data/)")

typed_name = st.sidebar.text_input("File name (case-insensitive, with or without .csv)", EXPECTED_BASE)
upload = st.sidebar.file_uploader("Or upload a course file", type=["csv", "txt"])

if st.sidebar.button("Load Data Structure", use_container_width=True):
    if upload is not None:
        catalog = Catalog()
        msg = load_summary(load_uploaded(upload.getvalue(), catalog, upload.name))
    else:
        resolved = resolve_filename(typed_name)
        if resolved is None:
            catalog, msg = None, f'The file name does not match "{EXPECTED_BASE}" (ignoring case).'
        else:
            catalog, msg = build_catalog(DATA_DIR / resolved)

    if catalog is not None:
        st.session_state["catalog"] = catalog
        st.sidebar.success(f"✅ {msg}")
    else:
        st.sidebar.error(msg)

catalog: Catalog | None = st.session_state.get("catalog")
if catalog is None:
    st.info("Please load courses before printing the list or searching for a course.")
    st.stop()


# ---------------------------
# Course list
# ---------------------------
st.subheader("Here is the course schedule")
df = catalog_frame(catalog)
st.dataframe(df, use_container_width=True)

csv_buf = io.StringIO()
df.to_csv(csv_buf, index=False)
st.download_button(
    "Download course list as CSV",
    data=csv_buf.getvalue(),
    file_name="course_list.csv",
    mime="text/csv",
)


# ---------------------------
# Course detail
# ---------------------------
st.subheader("Course details")
query = st.text_input("What course do you want to know about?", "")
if query:
    st.code("\n".join(render_detail(catalog, query)), language=None)

st.markdown("---")
st.caption("Prototype • Passcode-enabled • Upload course file • Export list")
