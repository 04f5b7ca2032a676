import streamlit as st
import pandas as pd
import plotly.express as px
from loguru import logger
from streamlit_folium import st_folium

from ipgroupmap.config import (
    DATA_PATH,
    ESCAPE_POPUPS,
    LOG_LEVEL,
    MAP_HEIGHT,
    PAGE_SIZE,
    RANDOM_SEED,
    STRICT_COORDINATES,
)
from ipgroupmap.errors import LoadError
from ipgroupmap.logs import configure_logging
from ipgroupmap.mapspec import GROUP_STYLES
from ipgroupmap.pipeline import build_dashboard
from ipgroupmap.render import render_map
from ipgroupmap.table import filter_table, page_count, paginate

# --- CONFIGURATION ---
st.set_page_config(page_title="IP Group Map", layout="wide")
configure_logging(LOG_LEVEL)

# Marker colors as CSS for the legend and chart.
LEGEND_COLORS = {
    'red': '#D63E2A',
    'blue': '#38AADD',
    'green': '#72B026',
}

# --- DATA ---

@st.cache_data(show_spinner=False)
def load_dashboard(path, seed, strict, escape):
    """
    Load and label the dataset once per (path, seed, strictness).
    Every session reads the same snapshot, so labels never change between reruns.
    """
    return build_dashboard(path, seed=seed, strict=strict, escape=escape)


def legend_frame(dashboard):
    rows = []
    for label, count in dashboard.counts.items():
        style = GROUP_STYLES[label]
        rows.append({
            'Group': label,
            'Color': style.color,
            'Icons': ', '.join(style.icons),
            'Records': count,
        })
    return pd.DataFrame(rows)


# --- UI ---

st.title("🌐 IP Group Map")

try:
    with st.spinner("Loading IP records..."):
        dashboard = load_dashboard(str(DATA_PATH), RANDOM_SEED, STRICT_COORDINATES, ESCAPE_POPUPS)
except LoadError as e:
    logger.exception("Dashboard data could not be loaded")
    st.error(f"Could not load the dataset: {e}")
    st.stop()

st.caption(f"Source: `{dashboard.source.name}` · {len(dashboard.records)} records · seed {RANDOM_SEED}")

if dashboard.dropped:
    st.warning(f"⚠️ {dashboard.dropped} record(s) with non-numeric coordinates were dropped.")

col_map, col_side = st.columns([3, 2])

with col_map:
    m = render_map(dashboard.map_spec)
    st_folium(m, width="100%", height=MAP_HEIGHT, returned_objects=[])

with col_side:
    tab_about, tab_data = st.tabs(["ℹ️ About", "🔎 Explore the data"])

    with tab_about:
        st.markdown(
            "**What this shows:** synthetic IP addresses, already resolved to a location, "
            "plotted as markers. Each address was put into one of three groups at random "
            "when the data was loaded; the groups mean nothing beyond that. "
            "Toggle groups with the layer control, click a marker for its details, "
            "and use the ruler to measure distances and areas."
        )

        c1, c2, c3 = st.columns(3)
        c1.metric("Records", len(dashboard.records))
        c2.metric("Countries", dashboard.records['country_name'].replace('', pd.NA).nunique())
        c3.metric("Dropped", dashboard.dropped)

        st.subheader("Legend")
        legend = legend_frame(dashboard)
        for _, row in legend.iterrows():
            css = LEGEND_COLORS.get(row['Color'], row['Color'])
            st.markdown(
                f"<span style='color:{css}'>●</span> **{row['Group']}** "
                f"({row['Records']} records) · icons: {row['Icons']}",
                unsafe_allow_html=True,
            )

        fig = px.bar(
            legend,
            x='Group',
            y='Records',
            color='Group',
            color_discrete_map={r['Group']: LEGEND_COLORS.get(r['Color'], r['Color']) for _, r in legend.iterrows()},
        )
        fig.update_layout(showlegend=False, height=260, margin=dict(l=0, r=0, t=10, b=0))
        st.plotly_chart(fig, width='stretch')

    with tab_data:
        table = dashboard.table

        search = st.text_input("Search", key="table_search", placeholder="Search all columns")

        # Top-of-column filters
        filter_cols = st.columns(len(table.columns))
        filters = {}
        for col, header in zip(filter_cols, table.columns):
            with col:
                filters[header] = st.text_input(header, key=f"filter_{header}", placeholder="Filter")

        filtered = filter_table(table, filters, search=search)
        pages = page_count(filtered, PAGE_SIZE)
        page = st.number_input("Page", min_value=1, max_value=pages, value=1, step=1)

        st.dataframe(paginate(filtered, page, PAGE_SIZE), width='stretch', hide_index=True)
        st.caption(f"Showing page {page} of {pages} · {len(filtered)} of {len(table)} records match.")

        st.download_button(
            label="📥 Download table (CSV)",
            data=filtered.to_csv(index=False),
            file_name="ip_groups.csv",
            mime="text/csv",
        )
