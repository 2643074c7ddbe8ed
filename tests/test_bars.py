"""
Tests for activitybar/bars — LoadingBar and ProgressBar renderers.
"""

import pytest

from activitybar.bars import BARS, BarRenderer, LoadingBar, ProgressBar
from activitybar.bars.loading import _bounce
from activitybar.ui.theme import PROGRESS_BAR_COLOR, PROGRESS_COMPLETE_COLOR


class TestLoadingBar:
    @pytest.mark.parametrize("width", [0, 1, 2, 7, 25])
    def test_length_is_width_plus_brackets(self, width):
        bar = LoadingBar()
        for tick in range(60):
            assert len(bar.render(tick, width)) == width + 2

    def test_zero_width_is_empty_brackets(self):
        assert LoadingBar().render(5, 0).plain == "[]"

    def test_negative_width_is_empty_brackets(self):
        assert LoadingBar().render(5, -3).plain == "[]"

    def test_width_one_marker_never_moves(self):
        bar = LoadingBar()
        assert {bar.render(t, 1).plain for t in range(10)} == {"[•]"}

    def test_marker_sweeps_right(self):
        bar = LoadingBar()
        assert bar.render(0, 5).plain == "[•    ]"
        assert bar.render(2, 5).plain == "[  •  ]"
        assert bar.render(4, 5).plain == "[    •]"

    def test_marker_bounces_back(self):
        bar = LoadingBar()
        assert bar.render(5, 5).plain == "[   • ]"
        assert bar.render(8, 5).plain == "[•    ]"

    def test_bounce_positions_stay_in_range(self):
        for width in range(1, 12):
            for tick in range(100):
                assert 0 <= _bounce(tick, width) < width

    def test_exactly_one_marker(self):
        bar = LoadingBar()
        for tick in range(30):
            assert bar.render(tick, 9).plain.count("•") == 1

    def test_custom_marker(self):
        assert LoadingBar("=").render(1, 3).plain == "[ = ]"

    @pytest.mark.parametrize("marker", ["", "<=>"])
    def test_marker_must_be_single_char(self, marker):
        with pytest.raises(ValueError):
            LoadingBar(marker)


class TestProgressBar:
    def test_half_full(self):
        assert ProgressBar(0.5).render(0, 10).plain == "[█████░░░░░]"

    def test_empty(self):
        assert ProgressBar().render(0, 4).plain == "[░░░░]"

    def test_full(self):
        assert ProgressBar(1.0).render(0, 4).plain == "[████]"

    @pytest.mark.parametrize("progress, expected", [(-0.5, "[░░░░]"), (1.7, "[████]")])
    def test_out_of_range_clamped(self, progress, expected):
        assert ProgressBar(progress).render(0, 4).plain == expected

    def test_nan_draws_empty_bar(self):
        t = ProgressBar(float("nan")).render(0, 10)
        assert t.plain == "[" + "░" * 10 + "]"

    def test_tick_ignored(self):
        bar = ProgressBar(0.25)
        assert {bar.render(t, 8).plain for t in range(20)} == {"[██░░░░░░]"}

    @pytest.mark.parametrize("width", [0, 1, 13, 25])
    def test_length_is_width_plus_brackets(self, width):
        for pct in (0.0, 0.33, 0.5, 0.99, 1.0):
            assert len(ProgressBar(pct).render(0, width)) == width + 2

    def test_negative_width_is_empty_brackets(self):
        assert ProgressBar(0.5).render(0, -1).plain == "[]"

    def test_progress_is_mutable(self):
        bar = ProgressBar()
        bar.progress = 0.75
        assert bar.render(0, 4).plain == "[███░]"

    def test_complete_color_when_full(self):
        t = ProgressBar(1.0).render(0, 4)
        assert any(s.style == PROGRESS_COMPLETE_COLOR for s in t.spans)
        assert not any(s.style == PROGRESS_BAR_COLOR for s in t.spans)

    def test_progress_color_when_partial(self):
        t = ProgressBar(0.5).render(0, 4)
        assert any(s.style == PROGRESS_BAR_COLOR for s in t.spans)


class TestRegistry:
    def test_styles(self):
        assert set(BARS) == {"loading", "progress"}

    @pytest.mark.parametrize("name", sorted(BARS))
    def test_renderers_satisfy_protocol(self, name):
        assert isinstance(BARS[name](), BarRenderer)
