import streamlit as st
import sys
from pathlib import Path

# Add project root to path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Now use absolute imports
from ghg_sunburst.config import Settings
from ghg_sunburst.data.loader import load_json
from ghg_sunburst.data.sectors import SectorCatalog, load_classification
from ghg_sunburst.exceptions import DataLoadError
from explorer_gui.pages.sunburst_page import show_sunburst
from explorer_gui.pages.raw_data_page import show_raw_data


@st.cache_resource(show_spinner=False)
def _load_dataset(sources: tuple, timeout: float):
    return load_json(sources, "sunburst data", timeout=timeout, base_dir=ROOT)


@st.cache_resource(show_spinner=False)
def _load_names(sources: tuple, timeout: float):
    return load_classification(sources, timeout=timeout, base_dir=ROOT)


def main():
    st.set_page_config(page_title="GHG Sources Sunburst", layout="wide")
    st.title("USEEIO GHG Sources Disaggregation")

    settings = Settings.from_env()
    try:
        with st.spinner("Loading..."):
            dataset = _load_dataset(settings.data_sources, settings.request_timeout)
            names = _load_names(settings.class_sources, settings.request_timeout)
    except DataLoadError as e:
        st.error(f"❌ Failed to load or render the chart: {e}")
        return

    catalog = SectorCatalog.from_dataset(dataset, names)
    if not len(catalog):
        st.warning("Dataset contains no sectors.")
        return

    page = st.sidebar.radio(
        "Navigate",
        ("Sunburst", "Sector Data"),
        index=0,
        key="nav_main",
    )

    if page == "Sunburst":
        show_sunburst(dataset, catalog, settings)
    elif page == "Sector Data":
        show_raw_data(dataset)

if __name__ == "__main__":
    main()
