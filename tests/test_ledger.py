"""
Unit tests for the bookkeeping rules — coercion and derived report totals.
"""
import math
from datetime import date

import pytest

from accounts_api.database import ensure_sqlite_directory
from accounts_api.errors import ValidationError
from accounts_api.ledger import (
    compute_derived_totals,
    normalize_report_data,
    parse_report_date,
    sum_category_map,
    to_amount,
    trim_text,
)

PROCEEDINGS = {
    "Cash Sales": 500,
    "Credit Sales": 200,
    "Outbound Sales": 100,
    "Cash Payouts": 50,
}


# =====================================================================
# Coercion
# =====================================================================
class TestToAmount:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_is_zero(self, value):
        assert to_amount(value) == 0.0

    def test_numbers_and_numeric_strings(self):
        assert to_amount(10) == 10.0
        assert to_amount("10") == 10.0
        assert to_amount(" 12.5 ") == 12.5
        assert to_amount("-3") == -3.0

    @pytest.mark.parametrize(
        "value", ["abc", "NaN", "inf", "12,50", "1_000", "1,250.00", "1e3", "0x10", True, [1], {"a": 1}]
    )
    def test_non_numeric_rejected(self, value):
        with pytest.raises(ValidationError) as exc:
            to_amount(value, "debit")
        assert "debit" in str(exc.value)


class TestTextAndDates:
    def test_trim_text(self):
        assert trim_text("  Acme  ") == "Acme"
        assert trim_text(None) is None

    def test_date_prefix(self):
        assert parse_report_date("2024-01-01") == date(2024, 1, 1)
        assert parse_report_date("2024-01-01T00:00:00.000Z") == date(2024, 1, 1)
        assert parse_report_date(date(2024, 3, 4)) == date(2024, 3, 4)

    def test_missing_date(self):
        with pytest.raises(ValidationError, match="report_date"):
            parse_report_date(None)
        with pytest.raises(ValidationError, match="report_date"):
            parse_report_date("")

    def test_bad_date(self):
        with pytest.raises(ValidationError):
            parse_report_date("01/02/2024")

    def test_report_data_always_object(self):
        assert normalize_report_data({"a": 1}) == {"a": 1}
        assert normalize_report_data([1, 2]) == {}
        assert normalize_report_data("text") == {}
        assert normalize_report_data(None) == {}


# =====================================================================
# Derived totals
# =====================================================================
class TestDerivedTotals:
    def test_worked_example(self):
        totals = compute_derived_totals(
            cash_particulars={"a": 100, "b": 50},
            outbound_cash_sale={"c": 30},
            cash_bf=20,
            starting_cash=10,
            total_proceedings=PROCEEDINGS,
        )
        assert totals.total_cash_proceedings == 150
        assert totals.total_cash_payouts == 30
        assert totals.subtotal == 180
        assert totals.cash_surplus_deficit == -150
        assert totals.overall_sales == 500 + 200 + 100 - 50

    def test_string_amounts_and_blanks(self):
        totals = compute_derived_totals(
            cash_particulars={"a": "100", "b": "", "c": None},
            outbound_cash_sale={},
            cash_bf="",
            starting_cash="40",
            total_proceedings={k: str(v) for k, v in PROCEEDINGS.items()},
        )
        assert totals.total_cash_proceedings == 100
        assert totals.subtotal == 100
        assert totals.cash_surplus_deficit == -60
        assert totals.overall_sales == 750

    def test_missing_maps_count_as_zero(self):
        totals = compute_derived_totals(None, None, None, None, PROCEEDINGS)
        assert totals.subtotal == 0
        assert totals.cash_surplus_deficit == 0

    @pytest.mark.parametrize("missing", ["Cash Sales", "Credit Sales", "Outbound Sales", "Cash Payouts"])
    def test_missing_proceedings_key_named(self, missing):
        proceedings = {k: v for k, v in PROCEEDINGS.items() if k != missing}
        with pytest.raises(ValidationError) as exc:
            compute_derived_totals({}, {}, 0, 0, proceedings)
        assert missing in str(exc.value)

    def test_non_numeric_category_rejected(self):
        with pytest.raises(ValidationError) as exc:
            sum_category_map({"fuel": "lots"}, "cash_particulars")
        assert "cash_particulars" in str(exc.value)
        assert "fuel" in str(exc.value)

    def test_results_are_finite(self):
        totals = compute_derived_totals({"a": 0.1, "b": 0.2}, {"c": 0.3}, 1, 1, PROCEEDINGS)
        assert all(math.isfinite(v) for v in totals.model_dump().values())
        assert totals.subtotal == pytest.approx(0.6)


class TestSqliteDirectory:
    def test_creates_parent_of_database_file(self, tmp_path):
        target = tmp_path / "var" / "nested" / "accounts.db"
        ensure_sqlite_directory(f"sqlite:///{target}")
        assert target.parent.is_dir()

    def test_memory_and_other_backends_untouched(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        ensure_sqlite_directory("sqlite://")
        ensure_sqlite_directory("sqlite:///:memory:")
        ensure_sqlite_directory("postgresql+psycopg://user:pw@localhost/var/accounts")
        assert list(tmp_path.iterdir()) == []
