"""
GHG Sunburst - GHG sources disaggregation explorer
Setup configuration for package installation
"""

from setuptools import setup, find_packages
from pathlib import Path

readme = Path(__file__).parent / "README.md"
long_description = readme.read_text(encoding="utf-8") if readme.exists() else ""

setup(
    name="ghg-sunburst",
    version="0.1.0",
    author="DecarbNexus",
    description="Sunburst explorer for USEEIO sector Scope 1 GHG sources",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["ghg_sunburst", "ghg_sunburst.*", "explorer_gui", "explorer_gui.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.28.0",
    ],
    extras_require={
        'gui': [
            "streamlit>=1.35.0",
            "pandas>=1.5.0",
            "plotly>=5.15.0",
        ],
        'dev': [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'ghg-sunburst-info=ghg_sunburst.cli.info:main',
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
