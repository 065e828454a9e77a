import math

from babel.numbers import format_currency


# --------- Constants ---------
CURRENCY = "USD"
LOCALE = "en_US"


# --------- Utilities ---------
def to_number(text):
    """Convert prompt input to a number, 0 when it is not a finite number"""
    text = str(text).strip()
    # float() also takes digit separators like 1_000; those are not numbers here
    if "_" in text:
        return 0
    try:
        value = float(text)
    except ValueError:
        return 0
    if not math.isfinite(value):
        return 0
    if value.is_integer():
        return int(value)
    return value


def to_non_negative(text):
    """Same as to_number but negative values become 0 (capacity, salary)"""
    value = to_number(text)
    return value if value > 0 else 0


def format_money(value):
    """Format an amount as currency for console output"""
    return format_currency(value, CURRENCY, locale=LOCALE)
