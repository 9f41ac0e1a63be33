"""
Tests for French amount and date formatting.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from app.core.formatting import (
    format_currency,
    format_date_compact,
    format_date_long,
    format_date_medium,
    format_date_short,
)


@pytest.mark.parametrize("amount,expected", [
    (450, "450\u00a0FCFA"),
    (1200, "1\u202f200\u00a0FCFA"),
    (1234567, "1\u202f234\u202f567\u00a0FCFA"),
    (Decimal("150.00"), "150\u00a0FCFA"),
    (Decimal("-150.00"), "-150\u00a0FCFA"),
    (Decimal("0.5"), "1\u00a0FCFA"),
    (Decimal("99.4"), "99\u00a0FCFA"),
    (0, "0\u00a0FCFA"),
])
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_date_long():
    assert format_date_long(date(2024, 3, 5)) == "05 mars 2024"
    assert format_date_long(datetime(2024, 8, 15, 10, 0)) == "15 août 2024"


def test_format_date_medium():
    assert format_date_medium(date(2024, 1, 12)) == "12 janv. 2024"
    assert format_date_medium(date(2024, 2, 1)) == "01 févr. 2024"


def test_format_date_short():
    assert format_date_short(date(2024, 3, 5)) == "05/03/2024"


def test_format_date_compact():
    assert format_date_compact(date(2024, 3, 5)) == "05/03/24"
