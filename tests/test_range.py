import math

import pytest

from nagios_range import End, Polarity, Range, Start, StartGreaterThanEnd


class TestRangeInit:
    def test_default_is_zero_to_infinity(self):
        r = Range()
        assert not r.invert
        assert Start(0) == r.start
        assert r.end_is_unbounded

    def test_explicit_start_end(self):
        r = Range(0.5, 4)
        assert r.is_outside()
        assert 0.5 == r.start.inner()
        assert 4 == r.end.inner()

    def test_explicit_polarity(self):
        r = Range(10, 20, Polarity.INSIDE)
        assert r.is_inside()
        assert r.invert

    def test_fail_if_start_gt_end(self):
        with pytest.raises(StartGreaterThanEnd):
            Range(4, 3)

    def test_fail_if_start_gt_end_regardless_of_polarity(self):
        with pytest.raises(StartGreaterThanEnd):
            Range(-10, -20, Polarity.INSIDE)

    def test_start_equal_end(self):
        r = Range(3, 3)
        assert 3 in r

    def test_unbounded_from_bound_objects(self):
        r = Range(Start(), End())
        assert r.start_is_unbounded
        assert r.end_is_unbounded

    def test_unbounded_from_ieee_infinities(self):
        assert Range(Start(), End(5)) == Range(-math.inf, 5)

    def test_polarity_must_be_enum(self):
        with pytest.raises(TypeError):
            Range(0, 1, "inside")  # type: ignore

    def test_is_immutable(self):
        r = Range(1, 2)
        with pytest.raises(AttributeError):
            r.start = Start(0)  # type: ignore

    def test_replace_creates_new_range(self):
        r = Range(1, 2)
        s = r.replace(polarity=Polarity.INSIDE)
        assert r.is_outside()
        assert Range(1, 2, Polarity.INSIDE) == s

    def test_replace_validates(self):
        with pytest.raises(StartGreaterThanEnd):
            Range(1, 2).replace(start=5)

    def test_replace_opens_bounds(self):
        r = Range(1, 2).replace(start=Start(), end=math.inf)
        assert r.start_is_unbounded
        assert r.end_is_unbounded
        assert Range(1, 2) == Range(1, 2).replace(start=None)

    def test_huge_int_bound_should_raise_value_error(self):
        with pytest.raises(ValueError):
            Range(0, 10**400)
        with pytest.raises(ValueError):
            Range.coerce(10**400)


class TestRangeCoerce:
    def test_int(self):
        r = Range.coerce(42)
        assert r.is_outside()
        assert 0 == r.start.inner()
        assert 42 == r.end.inner()

    def test_float(self):
        assert Range(0, 0.12) == Range.coerce(0.12)

    def test_string(self):
        assert Range.parse("@3:5") == Range.coerce("@3:5")

    def test_number_equals_parsed_number(self):
        assert Range.parse("5") == Range.coerce(5)

    def test_range_is_returned_as_is(self):
        orig = Range.parse("@3:5")
        assert orig is Range.coerce(orig)

    def test_unknown_type_should_raise(self):
        with pytest.raises(TypeError):
            Range.coerce([1, 2])  # type: ignore

    def test_bool_should_raise(self):
        with pytest.raises(TypeError):
            Range.coerce(True)


class TestRangeContains:
    def test_contains(self):
        r = Range(1.7, 2.5)
        assert 1.6 not in r
        assert 1.7 in r
        assert 2.5 in r
        assert 2.6 not in r

    def test_contains_ignores_polarity(self):
        r = Range(1, 2, Polarity.INSIDE)
        assert r.contains(1.5)
        assert not r.contains(3)

    def test_unbounded_sides_always_satisfied(self):
        r = Range(Start(), End())
        assert r.contains(-1e308)
        assert r.contains(1e308)
        assert r.contains(-math.inf)

    def test_nan_is_never_contained(self):
        assert not Range(Start(), End()).contains(math.nan)


class TestRangeAlerts:
    @pytest.mark.parametrize(
        "spec, value, expected",
        [
            ("10", 5, False),
            ("10", 15, True),
            ("10", -1, True),
            ("10:", 5, True),
            ("10:", 100, False),
            ("~:10", -1000, False),
            ("~:10", 20, True),
            ("@10:20", 15, True),
            ("@10:20", 25, False),
            ("@10:20", 10, True),
            ("@10:20", 20, True),
            ("10:20", 10, False),
            ("10:20", 20, False),
        ],
    )
    def test_alerts(self, spec, value, expected):
        assert expected == Range.parse(spec).alerts(value)

    @pytest.mark.parametrize("value", [-5, 0, 0.5, 3, 7, 11, 1e9])
    def test_polarity_truth_table(self, value):
        outside = Range(0, 7)
        inside = outside.replace(polarity=Polarity.INSIDE)
        assert outside.alerts(value) == (not outside.contains(value))
        assert inside.alerts(value) == inside.contains(value)

    def test_outside_alerts_for_nan(self):
        assert Range(0, 10).alerts(math.nan)

    def test_huge_int_sample(self):
        r = Range.parse("10")
        assert r.alerts(10**400)
        assert not r.contains(10**400)
        assert 10**400 in Range.parse("10:")
        assert not Range.parse("@~:10").alerts(10**400)


class TestRangeStr:
    def test_default(self):
        assert "0:" == str(Range())

    def test_explicit_start_stop(self):
        assert "1.5:5" == str(Range.parse("1.5:5"))

    def test_omitted_start_is_written(self):
        assert "0:6.7" == str(Range.parse("6.7"))

    def test_omit_end(self):
        assert "-6.5:" == Range.parse("-6.5:").to_text()

    def test_neg_infinity(self):
        assert "~:-3" == str(Range.parse("~:-3.0"))

    def test_invert(self):
        assert "@3:7" == str(Range.parse("@3:7"))

    def test_large_number(self):
        assert "0:2800000000" == str(Range.parse("2800000000"))

    def test_repr(self):
        assert "Range('2:3')" == repr(Range.parse("2:3"))

    @pytest.mark.parametrize(
        "spec", ["10", "10:", ":10", "~:10", "@10:20", "@~:", "-0.25:1e3", "@0.1"]
    )
    def test_text_round_trip(self, spec):
        r = Range.parse(spec)
        again = Range.parse(r.to_text())
        assert r == again
        for value in (-1e6, -0.25, 0, 0.1, 10, 15, 20, 1e6):
            assert r.alerts(value) == again.alerts(value)

    def test_violation_outside(self):
        assert "outside range 2:3" == Range.parse("2:3").violation

    def test_violation_greater_than(self):
        assert "outside range 0:4" == Range.parse("4").violation

    def test_violation_inside(self):
        assert "inside range @2:3" == Range.parse("@2:3").violation


class TestRangeEquality:
    def test_equal(self):
        assert Range.parse("@3:5") == Range(3, 5, Polarity.INSIDE)

    def test_polarity_differs(self):
        assert Range.parse("@3:5") != Range.parse("3:5")

    def test_bounds_differ(self):
        assert Range.parse("3:5") != Range.parse("3:6")

    def test_hashable(self):
        assert 1 == len({Range.parse("10"), Range.parse(":10"), Range(0, 10)})

    def test_other_type(self):
        assert Range.parse("10") != "0:10"
