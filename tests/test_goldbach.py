import pytest

from codedrills.goldbach import goldbach_conjecture, is_prime


def test_conjecture():
    assert goldbach_conjecture() == "5777,5993"


def test_conjecture_results_are_odd_composites():
    numbers = [int(part) for part in goldbach_conjecture().split(",")]
    assert len(numbers) == 2
    assert numbers[0] < numbers[1]
    for number in numbers:
        assert number % 2 == 1
        assert not is_prime(number)


@pytest.mark.parametrize(
    "n, expected",
    [(0, False), (1, False), (2, True), (3, True), (4, False), (9, False), (97, True), (5777, False)],
)
def test_is_prime(n, expected):
    assert is_prime(n) is expected