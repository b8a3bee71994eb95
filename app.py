"""Policy Models — Streamlit entry point."""

import logging
import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from tabs import tab_home, tab_housing_simulation, tab_tradeoffs


def main():
    logging.basicConfig(level=logging.INFO)

    st.set_page_config(
        page_title="Policy Models",
        page_icon="🏠",
        layout="wide",
    )

    tab1, tab2, tab3 = st.tabs([
        "🏠 Home",
        "🏘️ Housing Simulation",
        "⚖️ Tradeoffs",
    ])

    with tab1:
        tab_home.render()
    with tab2:
        tab_housing_simulation.render()
    with tab3:
        tab_tradeoffs.render()


if __name__ == "__main__":
    main()
