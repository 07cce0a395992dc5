# ui/streamlit_app.py

import sys
from pathlib import Path

import streamlit as st

# Make sure we can import from ovfdash/
ROOT_DIR = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT_DIR))

from ovfdash import auth  # type: ignore
from ovfdash.dashboard import build_dashboard  # type: ignore
from ovfdash.data_client import load_patients  # type: ignore
from ovfdash.presentation import fracture_bar_spec, outcome_pie_spec, patient_table  # type: ignore
from ovfdash.views import ALL_YEARS, available_years  # type: ignore


st.set_page_config(page_title="Spinal OVF Consult Dashboard", layout="wide")


@st.cache_data(ttl=3600)
def _records():
    return load_patients()


def _login_form() -> None:
    st.title("Spinal OVF Consult Dashboard")
    with st.form("login"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login")

    if submitted:
        if auth.check_credentials(username, password):
            st.session_state["session"] = auth.SESSION_VALUE
            st.rerun()
        else:
            st.error("Invalid credentials")


if auth.login_required(st.session_state.get("session")):
    _login_form()
    st.stop()

records = _records()
years = available_years(records)

# ---------- Header ----------

head_left, head_right = st.columns([3, 1])
with head_left:
    st.title("Spinal OVF Consult Dashboard")
    st.caption("Overview of patient consults and surgical status")
with head_right:
    year = st.selectbox("Year", [ALL_YEARS] + years, format_func=lambda y: "All Years" if y == ALL_YEARS else y)
    if auth.credentials_configured() and st.button("Logout"):
        st.session_state.pop("session", None)
        st.rerun()

query = st.text_input("Search ID, Outcome, Fracture level", "")

view = build_dashboard(records, year=year, query=query)

# ---------- Summary cards ----------

c1, c2, c3, c4 = st.columns(4)
c1.metric("Total Consults", view["total"])
c2.metric("Surgery Candidates", view["surgery_candidates"])
c3.metric("Observation / Conservative", view["conservative"])
c4.metric("Avg. Hospitalization", f"{view['avg_stay']['mean']} days")

c5, c6 = st.columns(2)
c5.metric(
    "Avg. Post-op Days",
    f"{view['avg_postop_days']['mean']} days",
    help=f"{view['avg_postop_days']['count']} patients with usable dates",
)
c6.metric(
    "Avg. Injury to Surgery",
    f"{view['avg_time_to_surgery']['mean']} days",
    help=f"{view['avg_time_to_surgery']['count']} patients with usable dates",
)

# ---------- Charts ----------

left, right = st.columns(2)
with left:
    st.subheader("Outcome Distribution")
    st.vega_lite_chart(outcome_pie_spec(view["outcome_distribution"]), use_container_width=True)
with right:
    st.subheader("Fracture Levels")
    st.vega_lite_chart(fracture_bar_spec(view["fracture_levels"]), use_container_width=True)

left, right = st.columns(2)
with left:
    st.subheader("Hospitalization by Treatment")
    st.bar_chart(view["stay_by_path"], x="name", y="value")
with right:
    st.subheader("Post-op Days by Procedure")
    if view["procedure_postop"]:
        st.dataframe(view["procedure_postop"], use_container_width=True, hide_index=True)
    else:
        st.write("No procedure data.")

# ---------- Patient table ----------

st.subheader("Patient List")

if not view["rows"]:
    st.info("No patients found matching your search.")
else:
    table, mri_columns = patient_table(view["rows"])
    st.dataframe(
        table,
        use_container_width=True,
        hide_index=True,
        column_config={
            col: st.column_config.LinkColumn(col, display_text=col.replace("MRI", "View"))
            for col in mri_columns
        },
    )
