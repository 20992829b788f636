"""Tests for pillar aggregation and composite rating."""

import pytest

from esg_scoring.methodology import DEFAULT_METHODOLOGY, ESGBand, Indicator, Pillar
from esg_scoring.services.aggregator import aggregate_pillars, weighted_mean
from esg_scoring.services.rater import band_for, composite_score, rate


class TestWeightedMean:
    def test_basic(self):
        assert weighted_mean({"a": 100.0, "b": 0.0}, {"a": 0.25, "b": 0.75}) == pytest.approx(25.0)

    def test_uses_only_weighted_keys(self):
        assert weighted_mean({"a": 60.0, "b": 0.0, "c": 99.0}, {"a": 0.5, "b": 0.5}) == pytest.approx(30.0)

    def test_uniform_scores_never_exceed_range(self):
        weights = DEFAULT_METHODOLOGY.indicator_weights[Pillar.ENVIRONMENTAL]
        result = weighted_mean({i: 100.0 for i in weights}, weights)
        assert result <= 100.0
        assert result == pytest.approx(100.0)


class TestAggregatePillars:
    def test_sample_pillars(self):
        normalized = {
            pillar: {indicator: 50.0 for indicator in weights}
            for pillar, weights in DEFAULT_METHODOLOGY.indicator_weights.items()
        }
        normalized[Pillar.GOVERNANCE][Indicator.COMPLIANCE_VIOLATIONS] = 100.0
        pillars = aggregate_pillars(normalized, DEFAULT_METHODOLOGY)
        assert pillars[Pillar.ENVIRONMENTAL] == pytest.approx(50.0)
        assert pillars[Pillar.SOCIAL] == pytest.approx(50.0)
        # compliance violations weigh 0.25 of governance
        assert pillars[Pillar.GOVERNANCE] == pytest.approx(62.5)


class TestComposite:
    def test_default_weights(self):
        pillars = {Pillar.ENVIRONMENTAL: 52.0, Pillar.SOCIAL: 72.0, Pillar.GOVERNANCE: 66.0}
        assert composite_score(pillars, DEFAULT_METHODOLOGY) == pytest.approx(62.2)

    def test_custom_weights(self):
        methodology = DEFAULT_METHODOLOGY.with_pillar_weights(
            environmental=1.0, social=0.0, governance=0.0
        )
        pillars = {Pillar.ENVIRONMENTAL: 52.0, Pillar.SOCIAL: 72.0, Pillar.GOVERNANCE: 66.0}
        assert composite_score(pillars, methodology) == pytest.approx(52.0)

    def test_rate_returns_band(self):
        pillars = {Pillar.ENVIRONMENTAL: 90.0, Pillar.SOCIAL: 90.0, Pillar.GOVERNANCE: 90.0}
        overall, band = rate(pillars, DEFAULT_METHODOLOGY)
        assert overall == pytest.approx(90.0)
        assert band is ESGBand.LEADING


class TestBands:
    @pytest.mark.parametrize(
        "score, expected",
        [
            (100.0, ESGBand.LEADING),
            (80.0, ESGBand.LEADING),
            (79.999, ESGBand.ADVANCING),
            (60.0, ESGBand.ADVANCING),
            (59.99, ESGBand.DEVELOPING),
            (40.0, ESGBand.DEVELOPING),
            (39.999, ESGBand.LAGGING),
            (0.0, ESGBand.LAGGING),
        ],
    )
    def test_half_open_thresholds(self, score, expected):
        assert band_for(score, DEFAULT_METHODOLOGY) is expected
