"""
French display formatting for amounts and dates.
"""

from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP

# fr-FR groups thousands with a narrow no-break space and separates
# the currency code with a regular no-break space.
GROUP_SEPARATOR = "\u202f"
CURRENCY_SEPARATOR = "\u00a0"
CURRENCY_LABEL = "FCFA"

MONTHS = [
    "janvier", "février", "mars", "avril", "mai", "juin",
    "juillet", "août", "septembre", "octobre", "novembre", "décembre",
]

SHORT_MONTHS = [
    "janv.", "févr.", "mars", "avr.", "mai", "juin",
    "juil.", "août", "sept.", "oct.", "nov.", "déc.",
]


def format_currency(amount) -> str:
    """
    Format an amount in West African CFA francs.

    XOF has no minor unit: the amount is rounded half away from zero.

        >>> format_currency(1200)
        '1 200 FCFA'
    """
    value = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,.0f}".replace(",", GROUP_SEPARATOR)
    return f"{sign}{digits}{CURRENCY_SEPARATOR}{CURRENCY_LABEL}"


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def format_date_long(value: date | datetime) -> str:
    """dd MMMM yyyy, e.g. '05 mars 2024'."""
    d = _as_date(value)
    return f"{d.day:02d} {MONTHS[d.month - 1]} {d.year}"


def format_date_medium(value: date | datetime) -> str:
    """dd MMM yyyy, e.g. '12 janv. 2024'."""
    d = _as_date(value)
    return f"{d.day:02d} {SHORT_MONTHS[d.month - 1]} {d.year}"


def format_date_short(value: date | datetime) -> str:
    """dd/MM/yyyy"""
    return _as_date(value).strftime("%d/%m/%Y")


def format_date_compact(value: date | datetime) -> str:
    """dd/MM/yy"""
    return _as_date(value).strftime("%d/%m/%y")
