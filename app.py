# DataViz Pro - Streamlit front end
# Upload a CSV, inspect summary statistics, draw a chart and read rule-based
# insights. All computation lives in the dataviz package; this file only wires
# widgets to it and renders the results.

import html
import logging

import matplotlib.pyplot as plt
import streamlit as st

from dataviz.charts import ChartKind
from dataviz.config import load_settings
from dataviz.errors import DataVizError
from dataviz.loader import load_csv, load_sample, parse_csv_text
from dataviz.log import setup_logging
from dataviz.plotting import render_chart
from dataviz.report import build_text_report
from dataviz.session import AnalysisSession
from dataviz.table import format_number

logger = logging.getLogger("dataviz.app")

# ----------------------------- App Config -----------------------------
st.set_page_config(
    page_title="DataViz Pro",
    page_icon="📊",
    layout="wide"
)


def _secrets_overrides():
    """Settings found in Streamlit secrets; empty when no secrets file exists."""
    try:
        return dict(st.secrets)
    except Exception:
        return {}


settings = load_settings(_secrets_overrides())
setup_logging(settings.log_level)

# ----------------------------- CSS Styling -----------------------------
st.markdown(
    """
    <style>
        .stat-card {
            background: #ffffff;
            border-radius: 10px;
            padding: 14px;
            margin-bottom: 10px;
            box-shadow: 0 4px 12px rgba(0,0,0,0.05);
            text-align: center;
        }
        .stat-value {
            font-size: 1.6rem;
            font-weight: 700;
            color: #667eea;
        }
        .stat-label {
            color: #6b7280;
            font-size: 0.9rem;
        }
        .insight-card {
            background: #ffffff;
            border-left: 4px solid #764ba2;
            border-radius: 6px;
            padding: 10px 14px;
            margin-bottom: 8px;
        }
    </style>
    """,
    unsafe_allow_html=True
)

# ----------------------------- Session State Init -----------------------------
if 'session' not in st.session_state:
    st.session_state['session'] = AnalysisSession(settings)
if 'result' not in st.session_state:
    st.session_state['result'] = None

session = st.session_state['session']
session.settings = settings


# ----------------------------- Helpers -----------------------------
def stat_card(value, label):
    st.markdown(
        f'<div class="stat-card"><div class="stat-value">{html.escape(str(value))}</div>'
        f'<div class="stat-label">{html.escape(label)}</div></div>',
        unsafe_allow_html=True
    )


def render_statistics():
    """Row/column counts plus average, max and min for every numeric column."""
    summary = session.summary()
    cards = [(summary.row_count, "Total Rows"), (summary.column_count, "Columns")]
    for col in summary.columns:
        cards.append((col.mean_display, f"{col.name} (Avg)"))
        cards.append((format_number(col.max), f"{col.name} (Max)"))
        cards.append((format_number(col.min), f"{col.name} (Min)"))
    per_row = 4
    for start in range(0, len(cards), per_row):
        cols = st.columns(per_row)
        for slot, (value, label) in zip(cols, cards[start:start + per_row]):
            with slot:
                stat_card(value, label)


def load_into_session(loader, filename):
    try:
        table = loader()
    except DataVizError as e:
        logger.warning("Could not load %s: %s", filename, e)
        st.error(str(e))
        return
    session.load(table, filename)
    st.session_state['result'] = None
    st.success(f"Successfully loaded {len(table)} rows of data!")


# ----------------------------- UI: Sidebar + Navigation -----------------------------
with st.sidebar:
    st.title("DataViz Pro")
    st.markdown("Drop a CSV, get statistics, a chart and quick insights.")
    st.markdown("---")
    nav = st.radio("Go to", ["Upload & Preview", "Analyze", "Report"])
    st.markdown("---")
    st.markdown("**UI Settings**")
    show_grid = st.checkbox("Show grid on plots", value=True)
    st.markdown("---")
    st.markdown("Built with Streamlit + Pandas + Matplotlib")

# ----------------------------- Page: Upload & Preview -----------------------------
if nav == "Upload & Preview":
    st.header("📤 Upload & Preview Dataset")
    upload_col1, upload_col2 = st.columns([2, 1])

    with upload_col1:
        uploaded_file = st.file_uploader("Upload CSV file", type=["csv"], key="uploader")
        if uploaded_file is not None:
            upload_id = getattr(uploaded_file, "file_id", uploaded_file.name)
            # the uploader keeps its file across reruns; load each upload once
            if st.session_state.get('upload_id') != upload_id:
                st.session_state['upload_id'] = upload_id
                load_into_session(lambda: load_csv(uploaded_file), uploaded_file.name)
        st.markdown("**or**")
        csv_text = st.text_area("Paste CSV text (small datasets)", height=120, placeholder="col1,col2\\n1,2\\n3,4")
        if st.button("Load pasted CSV"):
            if csv_text and csv_text.strip():
                load_into_session(lambda: parse_csv_text(csv_text), "pasted_csv")
            else:
                st.warning("Nothing to load: the text box is empty.")

    with upload_col2:
        st.markdown("### Sample Data")
        if st.button("Load sample CSV"):
            load_into_session(load_sample, "sample_data.csv")
        if st.button("Clear dataset from session"):
            session.clear()
            st.session_state['result'] = None
            st.success("Session dataset cleared.")

    st.markdown("---")
    if session.has_data:
        st.subheader("Data Preview")
        st.dataframe(session.table.to_frame(limit=settings.preview_rows), use_container_width=True)
        st.markdown("---")
        st.subheader("Statistics")
        render_statistics()
    else:
        st.info("Welcome to DataViz Pro! Upload a CSV file to get started.")

# ----------------------------- Page: Analyze -----------------------------
elif nav == "Analyze":
    st.header("📊 Analyze")
    if not session.has_data:
        st.warning("Please upload data first.")
    else:
        columns = list(session.table.columns)
        sel1, sel2, sel3 = st.columns(3)
        with sel1:
            chart_type = st.selectbox("Chart type", options=[k.value for k in ChartKind], index=0)
        with sel2:
            x_axis = st.selectbox("X-Axis", options=[""] + columns, format_func=lambda c: c or "Select X-Axis")
        with sel3:
            y_axis = st.selectbox("Y-Axis", options=[""] + columns, format_func=lambda c: c or "Select Y-Axis")

        if st.button("Analyze", type="primary"):
            try:
                with st.spinner("Analyzing..."):
                    st.session_state['result'] = session.analyze(chart_type, x_axis, y_axis)
                st.success("Analysis completed successfully!")
            except DataVizError as e:
                st.error(str(e))

        result = st.session_state['result']
        if result is not None:
            fig = render_chart(result.series, result.layout, grid=show_grid)
            st.pyplot(fig)
            plt.close(fig)

            st.subheader("🤖 Insights")
            if result.insights:
                for text in result.insights:
                    st.markdown(f'<div class="insight-card">{html.escape(text)}</div>', unsafe_allow_html=True)
            else:
                st.info("No specific insights generated for current analysis.")

# ----------------------------- Page: Report -----------------------------
elif nav == "Report":
    st.header("📥 Report")
    if not session.has_data:
        st.warning("No dataset loaded. Please upload one on the Upload & Preview page.")
    else:
        result = st.session_state['result']
        insights = result.insights if result is not None else []
        report_text = build_text_report(
            session.summary(),
            insights,
            series=session.last_series,
            filename=session.filename,
        )
        if result is None:
            st.info("Run an analysis to include insights and chart data in the report.")
        st.download_button("Download text report", data=report_text.encode('utf-8'),
                           file_name="dataviz_report.txt", mime="text/plain")
        st.text_area("Report preview", value=report_text, height=300)
