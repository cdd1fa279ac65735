"""Reusable Streamlit widgets for the GHG sunburst explorer."""
