from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import logging
import math

from rupee_words import config
from rupee_words.utils.number_words import to_words

logger = logging.getLogger(__name__)

PAISE = Decimal("0.01")


def format_indian_currency(amount: Decimal) -> str:
    """
    Render an amount with the rupee sign and Indian digit grouping.

    The last three digits stand alone and the rest go in pairs, so the
    commas fall on the thousand, lakh and crore boundaries that
    to_words names: 1234567.891 -> "₹ 12,34,567.89". Paise are rounded
    half up; None renders as zero.
    """
    amount = Decimal(0) if amount is None else Decimal(amount)
    if not amount.is_finite():
        raise ValueError(f"Cannot format non-finite amount {amount}")

    amount = amount.quantize(PAISE, rounding=ROUND_HALF_UP)
    # -0.00 compares equal to zero, so tiny negatives lose their sign here
    sign = "-" if amount < 0 else ""
    digits, paise = f"{abs(amount):.2f}".split(".")

    groups = [digits[-3:]]
    digits = digits[:-3]
    while digits:
        groups.insert(0, digits[-2:])
        digits = digits[:-2]

    return f"{sign}₹ {','.join(groups)}.{paise}"


def negative_currency_mode(mode: str = None) -> str:
    """Resolve a negative amount mode, defaulting to NEGATIVE_CURRENCY_MODE."""
    mode = (mode or config.NEGATIVE_CURRENCY_MODE).strip().lower()
    if mode not in config.NEGATIVE_CURRENCY_MODES:
        raise ValueError(f"Unknown negative currency mode '{mode}'")
    return mode


def _rupee_phrase(rupees: int) -> str:
    return f"{to_words(rupees)} rupee{'s' if rupees > 1 else ''}"


def decimal_to_currency_words(amount: Decimal, negative_mode: str = None) -> str:
    """
    Convert a decimal amount to rupees and paise in words.

    123.45 -> "one hundred and twenty three rupees and forty five paise".
    Paise beyond two places are truncated, and 0 gives an empty string.
    """
    if not amount.is_finite():
        raise ValueError(f"Cannot convert non-finite amount {amount} to words")

    mode = negative_currency_mode(negative_mode)

    if mode == "signed" and amount < 0:
        words = decimal_to_currency_words(-amount, negative_mode=mode)
        return "negative " + words if words else ""

    rupees = math.floor(amount)
    paise = int((amount - rupees) * 100)

    parts = []
    if rupees > 0:
        parts.append(_rupee_phrase(rupees))

    if paise > 0:
        if rupees > 0:
            parts.append("and")
        parts.append(f"{to_words(paise)} paise")

    return " ".join(parts).strip()


def float_to_currency_words(amount: float, negative_mode: str = None) -> str:
    # str() keeps the shortest repr, so 0.29 stays 0.29 instead of 0.2899...
    return decimal_to_currency_words(Decimal(str(amount)), negative_mode=negative_mode)


def int_to_currency_words(amount: int) -> str:
    """Whole rupees only: 10000000 -> "one crore rupees"."""
    return _rupee_phrase(amount)


def to_currency_words(amount, negative_mode: str = None) -> str:
    """
    Convert an amount to Indian currency words.

    Integers take the whole-rupee path, floats and decimals are split into
    rupees and paise. Strings are parsed as decimals.
    """
    if isinstance(amount, int):
        return int_to_currency_words(amount)
    if isinstance(amount, float):
        return float_to_currency_words(amount, negative_mode=negative_mode)
    if isinstance(amount, str):
        try:
            amount = Decimal(amount.strip())
        except InvalidOperation:
            raise ValueError(f"Invalid amount '{amount}'")
    if isinstance(amount, Decimal):
        return decimal_to_currency_words(amount, negative_mode=negative_mode)
    raise TypeError(f"Unsupported amount type {type(amount).__name__}")
