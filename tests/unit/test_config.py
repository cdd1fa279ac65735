"""
Unit tests for runtime settings and display helpers
"""

import pytest
from ghg_sunburst.config import DEFAULT_DATA_SOURCES, Settings
from ghg_sunburst.core.formatting import figure_title, format_pct, tooltip_text


class TestSettings:
    """Test environment overrides"""

    def test_defaults(self):
        settings = Settings.from_env({})

        assert settings == Settings()
        assert settings.data_sources == DEFAULT_DATA_SOURCES

    def test_overrides(self):
        settings = Settings.from_env({
            'GHG_SUNBURST_DATA_URL': 'https://example.org/d.json',
            'GHG_SUNBURST_CLASS_URL': 'local.jsonld',
            'GHG_SUNBURST_MIN_PCT': '2.5',
            'GHG_SUNBURST_TIMEOUT': '4',
        })

        assert settings.data_sources[0] == 'https://example.org/d.json'
        assert settings.data_sources[1:] == DEFAULT_DATA_SOURCES
        assert settings.class_sources[0] == 'local.jsonld'
        assert settings.default_min_pct == 2.5
        assert settings.request_timeout == 4.0

    def test_bad_numbers_ignored(self, caplog):
        with caplog.at_level('WARNING'):
            settings = Settings.from_env({'GHG_SUNBURST_MIN_PCT': 'lots', 'GHG_SUNBURST_TIMEOUT': '-1'})

        assert settings.default_min_pct == 0.0
        assert settings.request_timeout == 15.0
        assert 'GHG_SUNBURST_MIN_PCT' in caplog.text

    def test_negative_min_pct_clamped(self):
        assert Settings.from_env({'GHG_SUNBURST_MIN_PCT': '-3'}).default_min_pct == 0.0

    @pytest.mark.parametrize('width,expected', [(None, 525), (2000, 675), (100, 315)])
    def test_chart_size(self, width, expected):
        assert Settings().chart_size(width) == expected


class TestFormatting:
    """Test display strings"""

    @pytest.mark.parametrize('value,expected', [(0.1234, '12.3%'), (1.0, '100.0%'), (0, '0.0%'), (None, '')])
    def test_format_pct(self, value, expected):
        assert format_pct(value) == expected

    def test_tooltip(self, steel_layout):
        co2 = steel_layout.index[(0, 0, 0)]

        assert tooltip_text(co2) == 'Electric Power Generation ▸ Coal ▸ CO2\nContribution: 20.0%'

    def test_figure_title(self):
        title = figure_title('Iron and steel mills')

        assert title.startswith('Iron and steel mills Scope 1 emissions')
        assert title.endswith('(% of total Scope 1 MTCO2e emissions)')


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
