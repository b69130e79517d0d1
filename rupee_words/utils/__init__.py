from .number_words import small_to_words, to_words
from .formatting import (
    decimal_to_currency_words,
    float_to_currency_words,
    format_indian_currency,
    int_to_currency_words,
    negative_currency_mode,
    to_currency_words,
)

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
