import pytest

from algopuzzles.stacks import (
    add_big,
    binary_to_octal,
    brackets_match,
    halving_product,
    reverse_in_place,
)


@pytest.mark.parametrize("values", [[], [1], [1, 2], [5, 4, 9, 1, 7], list(range(10))])
def test_reverse_in_place(values):
    original = list(values)
    result = reverse_in_place(values)
    assert result is values
    assert values == original[::-1]


def test_reverse_twice_restores():
    values = [3, 1, 4, 1, 5, 9, 2, 6]
    assert reverse_in_place(reverse_in_place(list(values))) == values


@pytest.mark.parametrize("number", [1, 5, 8, 63, 64, 511, 1000, 123456])
def test_binary_to_octal_matches_format(number):
    assert binary_to_octal(format(number, "b")) == format(number, "o")


def test_binary_to_octal_ignores_other_characters():
    assert binary_to_octal("1 1x1\n1") == binary_to_octal("1111")


def test_binary_to_octal_keeps_leading_zero_group():
    assert binary_to_octal("000111") == "0" + format(7, "o")


def test_binary_to_octal_empty():
    assert binary_to_octal("") == ""


def test_brackets_source_examples():
    assert brackets_match("[[()][]()]") is True
    assert brackets_match("[(])") is False
    assert brackets_match("[()[()]]") is True


def test_brackets_unbalanced():
    assert brackets_match("(") is False
    assert brackets_match(")(") is False
    assert brackets_match("") is True


def test_halving_product_source_example():
    assert halving_product(5) == 10


@pytest.mark.parametrize("n", [1, 2, 9, 100, 1023])
def test_halving_product_recurrence(n):
    assert halving_product(n) == n * halving_product(n // 2)


def test_halving_product_zero_and_negative():
    assert halving_product(0) == 1
    with pytest.raises(ValueError):
        halving_product(-3)


def test_add_big_source_example():
    assert add_big("12345678987654321", "98765432123456789") == "111111111111111110"


@pytest.mark.parametrize(
    "x, y", [(0, 0), (9, 1), (999, 1), (1, 99999), (123456789012345678901234567890, 987654321)]
)
def test_add_big_matches_int(x, y):
    assert add_big(str(x), str(y)) == str(x + y)
    assert add_big(str(y), str(x)) == str(x + y)


def test_add_big_rejects_non_digits():
    with pytest.raises(ValueError):
        add_big("12a", "3")
    with pytest.raises(ValueError):
        add_big("5", "-1")