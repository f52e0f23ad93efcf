"""Unit tests for pricing analytics and course filtering."""
import pytest

from chef_menu.services.catalog.analytics import (
    average_by_course,
    menu_summary,
    overall_average,
    round_price,
    total_count,
)
from chef_menu.services.catalog.filters import filter_by_course, section_title
from chef_menu.services.catalog.models import Course, CourseFilter


class TestAnalytics:
    """Test counts and averages."""

    def test_empty_snapshot(self, catalog):
        """Test that an empty catalog yields zero for every figure."""
        snapshot = catalog.snapshot()

        assert total_count(snapshot) == 0
        assert average_by_course(snapshot) == {
            Course.STARTER: 0,
            Course.MAIN: 0,
            Course.DESSERT: 0,
        }
        assert overall_average(snapshot) == 0

    def test_single_soup(self, catalog):
        """Test figures after adding a single starter."""
        catalog.add("Soup", "Hot soup", "starter", "45")
        snapshot = catalog.snapshot()

        assert total_count(snapshot) == 1
        assert average_by_course(snapshot)[Course.STARTER] == 45
        assert average_by_course(snapshot)[Course.MAIN] == 0
        assert overall_average(snapshot) == 45

    def test_two_mains(self, catalog):
        """Test the average of two main courses."""
        catalog.add("Steak", "Grilled", "main", "100")
        catalog.add("Fish", "Line fish", "main", "150")

        assert average_by_course(catalog.snapshot())[Course.MAIN] == 125

    def test_sample_catalog(self, sample_catalog):
        """Test per-course and overall averages on a mixed catalog."""
        snapshot = sample_catalog.snapshot()

        assert total_count(snapshot) == 6
        assert average_by_course(snapshot) == {
            Course.STARTER: 42.5,
            Course.MAIN: 125.0,
            Course.DESSERT: 32.75,
        }
        assert overall_average(snapshot) == 66.75

    def test_recomputed_after_mutation(self, sample_catalog):
        """Test that figures follow the catalog rather than a stale value."""
        before = overall_average(sample_catalog.snapshot())
        sample_catalog.add("Lobster", "Whole lobster", "main", "600")

        assert overall_average(sample_catalog.snapshot()) != before

    def test_averages_rounded_to_cents(self, catalog):
        """Test that averages carry at most two decimals."""
        catalog.add("A", "a", "starter", "10")
        catalog.add("B", "b", "starter", "10")
        catalog.add("C", "c", "starter", "11")

        assert average_by_course(catalog.snapshot())[Course.STARTER] == 10.33
        assert overall_average(catalog.snapshot()) == 10.33

    @pytest.mark.parametrize(
        "value,expected",
        [(2.675, 2.68), (0.125, 0.13), (-0.125, -0.13), (1.004, 1.0), (45, 45.0)],
    )
    def test_round_price_half_away_from_zero(self, value, expected):
        """Test rounding of the cent digit."""
        assert round_price(value) == expected

    def test_menu_summary(self, sample_catalog):
        """Test that the summary bundles the individual figures."""
        snapshot = sample_catalog.snapshot()
        summary = menu_summary(snapshot)

        assert summary.total_items == total_count(snapshot)
        assert summary.overall_average == overall_average(snapshot)
        assert summary.average_by_course == average_by_course(snapshot)


class TestFilterByCourse:
    """Test course-filtered views."""

    def test_all_returns_snapshot(self, sample_catalog):
        """Test that 'all' returns every item in the original order."""
        snapshot = sample_catalog.snapshot()
        assert filter_by_course(snapshot, CourseFilter.ALL) == snapshot

    def test_specific_course(self, sample_catalog):
        """Test that only matching items are returned, in order."""
        result = filter_by_course(sample_catalog.snapshot(), CourseFilter.STARTER)

        assert [item.dish_name for item in result] == ["Soup", "Salad"]
        assert all(item.course == Course.STARTER for item in result)

    def test_courses_partition_snapshot(self, sample_catalog):
        """Test that the three course views together cover the snapshot."""
        snapshot = sample_catalog.snapshot()
        lengths = [
            len(filter_by_course(snapshot, selector))
            for selector in (CourseFilter.STARTER, CourseFilter.MAIN, CourseFilter.DESSERT)
        ]

        assert sum(lengths) == total_count(snapshot)

    def test_two_mains_in_insertion_order(self, catalog):
        """Test that two mains come back exactly, in insertion order."""
        steak = catalog.add("Steak", "Grilled", "main", "100")
        catalog.add("Soup", "Hot soup", "starter", "45")
        fish = catalog.add("Fish", "Line fish", "main", "150")

        assert filter_by_course(catalog.snapshot(), CourseFilter.MAIN) == (steak, fish)

    def test_empty_result(self, catalog):
        """Test that no matches give an empty sequence, not an error."""
        catalog.add("Soup", "Hot soup", "starter", "45")

        assert filter_by_course(catalog.snapshot(), CourseFilter.DESSERT) == ()

    def test_accepts_plain_values(self, sample_catalog):
        """Test that selector strings are accepted."""
        snapshot = sample_catalog.snapshot()
        assert filter_by_course(snapshot, "main") == filter_by_course(snapshot, CourseFilter.MAIN)

    def test_unknown_selector(self, sample_catalog):
        """Test that an unknown selector is rejected."""
        with pytest.raises(ValueError):
            filter_by_course(sample_catalog.snapshot(), "brunch")


class TestSectionTitle:
    """Test headings for filtered views."""

    def test_titles(self):
        """Test the heading for each selector."""
        assert section_title(CourseFilter.ALL) == "Complete Menu"
        assert section_title(CourseFilter.STARTER) == "Starters"
        assert section_title(CourseFilter.MAIN) == "Main Courses"
        assert section_title(CourseFilter.DESSERT) == "Desserts"


class TestLargePrices:
    """Test averages of very large but valid prices."""

    def test_round_price_beyond_default_precision(self):
        """Test that values with more than 28 digits still round."""
        assert round_price(1e30) == 1e30
        assert round_price(1e308) == 1e308

    def test_round_price_leaves_non_finite_values(self):
        """Test that infinities pass through unrounded."""
        assert round_price(float("inf")) == float("inf")

    def test_single_large_price(self, catalog):
        """Test averages of one dish priced at 1e30."""
        catalog.add("Caviar", "Very rare", "starter", "1e30")
        snapshot = catalog.snapshot()

        assert overall_average(snapshot) == 1e30
        assert average_by_course(snapshot)[Course.STARTER] == 1e30

    def test_sum_beyond_float_range(self, catalog):
        """Test that two prices whose sum overflows still average correctly."""
        catalog.add("Truffle", "White truffle", "main", "1e308")
        catalog.add("Saffron", "By the kilo", "main", "1e308")
        snapshot = catalog.snapshot()

        assert average_by_course(snapshot)[Course.MAIN] == 1e308
        assert overall_average(snapshot) == 1e308
        assert menu_summary(snapshot).overall_average == 1e308
