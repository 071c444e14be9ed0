import math

import pytest

from layeredknowledge import shift_by
from layeredknowledge.analysis.series import as_array, observed_pairs
from layeredknowledge.errors import SizeMismatchError


class TestShiftBy:
    def test_lag_keeps_length(self):
        assert shift_by([1.0, 2.0, 3.0, 4.0], 1) == [None, 1.0, 2.0, 3.0]
        assert shift_by([1.0, 2.0, 3.0, 4.0], 2) == [None, None, 1.0, 2.0]

    def test_shift_longer_than_series(self):
        assert shift_by([1.0, 2.0], 5) == [None, None]

    def test_missing_entries_are_carried(self):
        assert shift_by([None, 2.0, None], 1) == [None, None, 2.0]

    @pytest.mark.parametrize("periods", [0, -1])
    def test_non_positive_periods(self, periods):
        with pytest.raises(ValueError):
            shift_by([1.0, 2.0], periods)


class TestObservedPairs:
    def test_pairwise_deletion(self):
        x, y = observed_pairs([1.0, None, 3.0, 4.0], [5.0, 6.0, float("nan"), 8.0])

        assert list(x) == [1.0, 4.0]
        assert list(y) == [5.0, 8.0]

    def test_size_mismatch(self):
        with pytest.raises(SizeMismatchError):
            observed_pairs([1.0], [1.0, 2.0])

    def test_as_array_maps_none_to_nan(self):
        values = as_array([1, None])

        assert values[0] == 1.0
        assert math.isnan(values[1])
