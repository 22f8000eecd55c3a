"""
Tests for field=value parsing and partitioning.
"""

import pytest

from tsverdict.core.base import ConfigurationError
from tsverdict.core.partition import matches, parse_field_match, remove_brackets, split_time_series
from tsverdict.core.timeseries import MetricTimeSeries


def _ts(key, **attributes):
    return MetricTimeSeries([1], [1.0], attributes, key)


class TestParseFieldMatch:

    def test_compare_wrapper(self):
        assert parse_field_match("compare(env=prod;host=a)") == {"env": "prod", "host": "a"}

    def test_bare(self):
        assert parse_field_match("env=prod") == {"env": "prod"}

    def test_order_preserved(self):
        spec = parse_field_match("compare(z=1;a=2;m=3)")
        assert list(spec) == ["z", "a", "m"]

    def test_value_may_contain_equals(self):
        assert parse_field_match("q=a=b") == {"q": "a=b"}

    def test_trailing_separator(self):
        assert parse_field_match("compare(env=prod;)") == {"env": "prod"}

    def test_partial_wrapper_left_alone(self):
        assert remove_brackets("compare(env=prod") == "compare(env=prod"

    def test_missing_equals(self):
        with pytest.raises(ConfigurationError):
            parse_field_match("compare(env)")

    def test_empty_field_name(self):
        with pytest.raises(ConfigurationError):
            parse_field_match("=prod")

    @pytest.mark.parametrize("token", ["compare()", "", "   ", ";", "compare(a=1;;b=2)", "a=1; ;b=2"])
    def test_rejects_empty_pairs(self, token):
        with pytest.raises(ConfigurationError):
            parse_field_match(token)

    def test_trailing_separators_tolerated(self):
        assert parse_field_match("a=1;b=2;;") == {"a": "1", "b": "2"}


class TestSplitTimeSeries:

    def test_example(self):
        a = _ts("A", env="prod")
        b = _ts("B", env="staging")
        c = _ts("C")
        left, right = split_time_series([a, b, c], {"env": "prod"})
        assert left == [a]
        assert right == [b, c]

    def test_all_fields_required(self):
        a = _ts("A", env="prod", host="x")
        b = _ts("B", env="prod", host="y")
        left, right = split_time_series([a, b], {"env": "prod", "host": "x"})
        assert left == [a]
        assert right == [b]

    def test_total_and_disjoint(self):
        series = [_ts(i, env="prod" if i % 3 == 0 else "dev") for i in range(20)]
        left, right = split_time_series(series, {"env": "prod"})
        assert len(left) + len(right) == len(series)
        assert not {id(s) for s in left} & {id(s) for s in right}

    def test_preserves_order(self):
        series = [_ts(i, env="prod" if i % 2 else "dev") for i in range(6)]
        left, right = split_time_series(series, {"env": "prod"})
        assert [s.join_key for s in left] == [1, 3, 5]
        assert [s.join_key for s in right] == [0, 2, 4]

    def test_exact_string_match(self):
        assert not matches({"env": "Prod"}, {"env": "prod"})
        assert not matches({"env": "prod "}, {"env": "prod"})
        assert matches({"env": "prod", "other": "x"}, {"env": "prod"})
