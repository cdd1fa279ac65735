"""GHG Sunburst - command line tools"""
