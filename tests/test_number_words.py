import pytest

from rupee_words.utils.number_words import UNITS, small_to_words, to_words


def test_zero():
    assert to_words(0) == "zero"


@pytest.mark.parametrize("n", range(1, 20))
def test_below_twenty_matches_lookup(n):
    assert to_words(n) == UNITS[n]


def test_tens_and_units_are_space_separated():
    assert to_words(45) == "forty five"
    assert to_words(20) == "twenty"
    assert to_words(99) == "ninety nine"


def test_round_tiers():
    assert to_words(100) == "one hundred"
    assert to_words(1000) == "one thousand"
    assert to_words(100000) == "one lakh"
    assert to_words(10000000) == "one crore"
    assert to_words(1000000000) == "one arab"
    assert to_words(100000000000) == "one kharab"


def test_and_only_before_final_remainder():
    assert to_words(101) == "one hundred and one"
    assert to_words(1050) == "one thousand and fifty"
    assert to_words(2300) == "two thousand three hundred"


def test_crore_example():
    assert to_words(123456789) == (
        "twelve crore thirty four lakh fifty six thousand seven hundred and eighty nine"
    )


def test_largest_named_value():
    assert to_words(9999999999999) == (
        "ninety nine kharab ninety nine arab ninety nine crore ninety nine lakh "
        "ninety nine thousand nine hundred and ninety nine"
    )


def test_negative_numbers():
    assert to_words(-45) == "negative forty five"
    for n in (1, 100, 123456789):
        assert to_words(-n) == "negative " + to_words(n)


def test_beyond_kharab_falls_back_to_digits():
    assert to_words(10 ** 13) == "100 kharab"
    assert to_words(10 ** 13 + 5) == "100 kharab and five"
    assert to_words(25 * 10 ** 13) == "2500 kharab"


def test_64_bit_minimum_does_not_overflow():
    assert to_words(-9223372036854775808).startswith("negative 92233720 kharab")


def test_no_surrounding_whitespace():
    for n in (1, 20, 100, 100000, 123456789, 10 ** 13):
        words = to_words(n)
        assert words == words.strip()
        assert "  " not in words


def test_rejects_non_integers():
    with pytest.raises(TypeError):
        to_words(1.5)
    with pytest.raises(TypeError):
        to_words("12")


def test_small_to_words():
    assert small_to_words(0) == ""
    assert small_to_words(7) == "seven"
    assert small_to_words(40) == "forty"
    assert small_to_words(83) == "eighty three"


def test_small_to_words_fallback():
    assert small_to_words(100) == "100"
    assert small_to_words(250) == "250"
