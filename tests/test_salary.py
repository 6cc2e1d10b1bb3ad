"""Unit tests for salary parsing."""

import pytest

from hnhiring.domain.models import SalaryRange
from hnhiring.extraction import parse_salary, parse_salary_value
from hnhiring.extraction.salary import find_salary_tokens


class TestParseSalaryValue:
    """Test single figure parsing."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("$140k", 140000),
            ("140K", 140000),
            ("120,000", 120000),
            ("85.5k", 85500),
            ("1.5m", 1500000),
            ("95", 95),
            ("€ 70 k", 70000),
        ],
    )
    def test_figures(self, value, expected):
        assert parse_salary_value(value) == expected

    @pytest.mark.parametrize("value", ["", "k", "abc", None])
    def test_no_number(self, value):
        assert parse_salary_value(value) is None

    def test_rounds_half_up(self):
        assert parse_salary_value("2.5") == 3
        assert parse_salary_value("0.5") == 1


class TestParseSalary:
    """Test salary range recovery from text."""

    def test_symbol_range(self):
        assert parse_salary("Compensation: $140k – $170k plus equity.") == SalaryRange(
            min=140000, max=170000, currency="USD", raw="$140k - $170k"
        )

    def test_currency_code_range(self):
        salary = parse_salary("EUR 80,000 - 95,000 depending on experience")

        assert salary.min == 80000
        assert salary.max == 95000
        assert salary.currency == "EUR"
        assert salary.raw == "EUR 80,000 - 95,000"

    def test_lowercase_currency_code(self):
        assert parse_salary("gbp 60k-75k").currency == "GBP"

    def test_single_figure_repeats_min(self):
        salary = parse_salary("Salary: £65k")

        assert salary.min == 65000
        assert salary.max == 65000
        assert salary.currency == "GBP"
        assert salary.raw == "£65k"

    def test_no_currency(self):
        salary = parse_salary("pay band 120k to 150k")

        assert (salary.min, salary.max) == (120000, 150000)
        assert salary.currency is None

    def test_order_is_preserved(self):
        salary = parse_salary("up to $120k, minimum $100k")

        assert (salary.min, salary.max) == (120000, 100000)
        assert salary.bounds() == (100000, 120000)

    def test_month_words_are_not_magnitudes(self):
        salary = parse_salary("12 month contract")

        assert salary.min == 12
        assert salary.max == 12

    def test_no_salary(self):
        assert parse_salary("Competitive pay, great team") is None
        assert parse_salary("") is None

    def test_raw_lists_every_token(self):
        assert len(find_salary_tokens("$100k, $120k or $140k")) == 3
        assert parse_salary("$100k, $120k or $140k").raw == "$100k - $120k - $140k"
