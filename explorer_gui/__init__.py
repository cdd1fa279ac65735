"""Streamlit explorer for the GHG sources sunburst.

Run with:
    streamlit run explorer_gui/main.py
"""
