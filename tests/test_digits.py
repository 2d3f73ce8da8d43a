import pytest

from algopuzzles.digits import (
    automorphic_numbers,
    binary_to_decimal,
    is_automorphic,
    is_narcissistic,
    is_palindrome_number,
    narcissistic_numbers,
    number_to_words,
    reverse_digits,
    triple_palindromes,
)


@pytest.mark.parametrize("n", [1, 7, 12, 123, 4567, 98761, -34])
def test_reverse_round_trip(n):
    assert reverse_digits(reverse_digits(n)) == n


@pytest.mark.parametrize("n", [121, 656, 2332])
def test_palindromes_from_examples(n):
    assert is_palindrome_number(n) is True


@pytest.mark.parametrize("n", [12, 100, 2331])
def test_not_palindromes(n):
    assert is_palindrome_number(n) is False


def test_narcissistic_numbers():
    assert narcissistic_numbers() == [153, 370, 371, 407]
    assert is_narcissistic(407) is True
    assert is_narcissistic(406) is False


@pytest.mark.parametrize(
    "n,words",
    [(1, "one"), (12, "twelve"), (135, "one hundred thirty five")],
)
def test_number_to_words_examples(n, words):
    assert number_to_words(n) == words


def test_number_to_words_zero():
    assert number_to_words(0) == "zero"


def test_number_to_words_thousands_prefix():
    assert number_to_words(135135).startswith(number_to_words(135) + " thousand ")
    assert number_to_words(12000) == number_to_words(12) + " thousand"


@pytest.mark.parametrize("n", [-1, 1_000_000])
def test_number_to_words_out_of_range(n):
    with pytest.raises(ValueError):
        number_to_words(n)


@pytest.mark.parametrize("n", range(0, 300, 7))
def test_binary_round_trip(n):
    assert binary_to_decimal(format(n, "b")) == n


def test_binary_empty_and_invalid():
    assert binary_to_decimal("") == 0
    with pytest.raises(ValueError):
        binary_to_decimal("1021")


def test_automorphic_numbers():
    assert automorphic_numbers(1000) == [1, 5, 6, 25, 76, 376, 625]
    assert is_automorphic(76) is True
    assert is_automorphic(77) is False


def test_automorphic_negative():
    with pytest.raises(ValueError):
        is_automorphic(-5)


def test_triple_palindromes():
    assert triple_palindromes() == [11, 101, 111]