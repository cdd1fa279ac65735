"""Pages package for the GHG sunburst explorer."""
