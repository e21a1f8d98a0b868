import pytest

from registrar.engines import ModeConverter, PeriodAggregator, round_half_up
from registrar.models import GradeEntry, SpecialStatus


@pytest.fixture
def aggregator():
    return PeriodAggregator()


@pytest.fixture
def converter():
    return ModeConverter()


class TestPeriodAggregator:

    def test_college_average_uses_three_periods(self, aggregator):
        entry = GradeEntry("it-201", period1=95, period2=85, period3=90, period4=10)

        assert aggregator.average(entry, is_college=True) == 90.0

    def test_secondary_average_skips_ungraded_periods(self, aggregator):
        entry = GradeEntry("math-8", period1=80, period2=None, period3=75, period4=85)

        assert aggregator.average(entry, is_college=False) == 80.0

    def test_secondary_average_uses_fourth_period(self, aggregator):
        entry = GradeEntry("eng-8", period1=88, period2=90, period3=91, period4=93)

        assert aggregator.average(entry, is_college=False) == 90.5

    @pytest.mark.parametrize("status", list(SpecialStatus))
    def test_special_status_suppresses_average(self, aggregator, status):
        entry = GradeEntry("x", period1=99, period2=99, period3=99, period4=99, special_status=status)

        assert aggregator.average(entry, is_college=False) is None
        assert aggregator.average(entry, is_college=True) is None

    def test_no_grades_yet_is_none(self, aggregator):
        entry = GradeEntry("x")

        assert aggregator.average(entry, is_college=False) is None
        assert entry.special_status is None

    def test_college_ignores_a_lone_fourth_period(self, aggregator):
        entry = GradeEntry("x", period4=90)

        assert aggregator.average(entry, is_college=True) is None

    def test_average_rounds_half_up_to_two_decimals(self, aggregator):
        # 87.125 is exact in binary, so this checks the rounding rule itself
        entry = GradeEntry("x", period1=87.25, period2=87.0)

        assert aggregator.average(entry, is_college=False) == 87.13

    def test_average_of_thirds(self, aggregator):
        entry = GradeEntry("x", period1=90, period2=91, period3=91)

        assert aggregator.average(entry, is_college=True) == 90.67

    def test_is_passed(self, aggregator):
        assert aggregator.is_passed(GradeEntry("x", period1=75), False)
        assert not aggregator.is_passed(GradeEntry("x", period1=74.99), False)
        assert not aggregator.is_passed(GradeEntry("x"), False)
        assert not aggregator.is_passed(GradeEntry("x", period1=90, special_status=SpecialStatus.W), False)

    def test_unrecognised_status_does_not_suppress_average(self, aggregator):
        entry = GradeEntry("x", period1=90, special_status="DROPPED")

        assert aggregator.average(entry, is_college=False) == 90.0
        assert aggregator.is_passed(entry, False)

    def test_non_numeric_periods_are_skipped(self, aggregator):
        entry = GradeEntry("x", period1=90, period2="abc", period3="80")

        assert aggregator.average(entry, is_college=True) == 85.0


def test_round_half_up():
    assert round_half_up(0.125) == 0.13
    assert round_half_up(2.5, 0) == 3
    assert round_half_up(80.0) == 80.0


class TestNumericGrade:

    @pytest.mark.parametrize("percentage, expected", [
        (100, 1.00),
        (98, 1.00),
        (97.99, 1.25),
        (95, 1.25),
        (92, 1.50),
        (90, 1.75),
        (89, 1.75),
        (88.99, 2.00),
        (86, 2.00),
        (83, 2.25),
        (80, 2.50),
        (77, 2.75),
        (75, 3.00),
        (74.99, 5.00),
        (50, 5.00),
    ])
    def test_bands(self, converter, percentage, expected):
        assert converter.numeric_grade(percentage) == expected

    @pytest.mark.parametrize("percentage", [None, 0, "abc"])
    def test_ungraded_is_none(self, converter, percentage):
        assert converter.numeric_grade(percentage) is None

    def test_never_increases_with_percentage(self, converter):
        previous = converter.numeric_grade(1)
        for tenths in range(10, 1001):
            current = converter.numeric_grade(tenths / 10)
            assert current <= previous
            previous = current


class TestDescriptiveLabel:

    @pytest.mark.parametrize("percentage, expected", [
        (98, "Excellent"),
        (97.99, "Superior"),
        (92, "Superior"),
        (90, "Very Good"),
        (86, "Very Good"),
        (83, "Good"),
        (80, "Fair"),
        (79.99, "Passed"),
        (75, "Passed"),
        (74, "Failed"),
    ])
    def test_bands(self, converter, percentage, expected):
        assert converter.descriptive_label(percentage) == expected

    @pytest.mark.parametrize("percentage", [None, 0])
    def test_ungraded_is_incomplete(self, converter, percentage):
        assert converter.descriptive_label(percentage) == "Incomplete"

    @pytest.mark.parametrize("status, label", [
        ("INC", "Incomplete"),
        ("FA", "Failed (Absent)"),
        ("FW", "Failed (Withdrawn)"),
        ("W", "Withdrawn"),
        (SpecialStatus.FW, "Failed (Withdrawn)"),
    ])
    def test_special_status_overrides_percentage(self, converter, status, label):
        assert converter.descriptive_label(99, status) == label

    def test_unknown_status_is_ignored(self, converter):
        assert converter.descriptive_label(99, "DROPPED") == "Excellent"


def test_period_label(converter):
    assert converter.period_label(None) == ""
    assert converter.period_label(0) == ""
    assert converter.period_label(84) == "Good"


def test_status_label(converter):
    assert converter.status_label("FA") == "Failed (Absent)"
    assert converter.status_label(None) == ""
    assert converter.status_label("bogus") == ""


@pytest.mark.parametrize("grade, expected", [
    (1.0, 98),
    (1.75, 89),
    (3, 75),
    (5.0, 70),
    (1.6, None),
    (4.0, None),
    (None, None),
])
def test_numeric_to_percentage(converter, grade, expected):
    assert converter.numeric_to_percentage(grade) == expected
