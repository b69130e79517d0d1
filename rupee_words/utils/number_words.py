import logging

logger = logging.getLogger(__name__)

UNITS = ["", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten",
         "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen", "seventeen",
         "eighteen", "nineteen"]
TENS = ["", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"]

# Indian place values, largest first
PLACE_VALUES = (
    (100000000000, "kharab"),
    (1000000000, "arab"),
    (10000000, "crore"),
    (100000, "lakh"),
    (1000, "thousand"),
    (100, "hundred"),
)


def small_to_words(n: int) -> str:
    """
    Convert a number below 100 to words, e.g. 45 -> "forty five".

    0 gives an empty string. Values of 100 or more are returned as plain
    digits; this only happens for kharab counts at 10**13 and above.
    """
    if n < 20:
        return UNITS[n]
    elif n < 100:
        return TENS[n // 10] + (" " + UNITS[n % 10] if n % 10 else "")
    logger.debug(f"No word form for segment {n}, falling back to digits")
    return str(n)


def to_words(number: int) -> str:
    """
    Convert an integer to words using the Indian numbering system.

    Example:
        to_words(123456789)
        -> "twelve crore thirty four lakh fifty six thousand seven hundred and eighty nine"
    """
    if not isinstance(number, int):
        raise TypeError(f"to_words expects an int, got {type(number).__name__}")
    if number == 0:
        return "zero"
    if number < 0:
        return "negative " + to_words(-number)

    parts = []
    for divisor, label in PLACE_VALUES:
        count, number = divmod(number, divisor)
        if count > 0:
            parts.append(small_to_words(count))
            parts.append(label)

    if number > 0:
        if parts:
            parts.append("and")
        parts.append(small_to_words(number))

    return " ".join(parts).strip()
