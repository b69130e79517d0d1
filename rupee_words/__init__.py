# Indian numbering system words for numbers and rupee amounts
from rupee_words.utils import (
    decimal_to_currency_words,
    float_to_currency_words,
    format_indian_currency,
    int_to_currency_words,
    negative_currency_mode,
    small_to_words,
    to_currency_words,
    to_words,
)

__version__ = "1.0.0"

__all__ = [
    'small_to_words',
    'to_words',
    'to_currency_words',
    'decimal_to_currency_words',
    'float_to_currency_words',
    'int_to_currency_words',
    'format_indian_currency',
    'negative_currency_mode',
]
