"""CPF (Brazilian taxpayer number) validation."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import zip_longest

_SEPARATORS = ".-"
_DIGIT_COUNT = 11
_VERIFIER_START = 9
_VERIFIER_MULTIPLIER = 2


def calculate_verifier_digit(digits: Sequence[str], length: int) -> str:
    """Return the check digit computed from the first ``length`` digits."""
    total = sum(
        int(digit) * multiplier
        for multiplier, digit in enumerate(
            reversed(digits[:length]), start=_VERIFIER_MULTIPLIER
        )
    )
    remainder = total % 11
    if remainder < 2:
        return "0"
    return str(11 - remainder)


def validate_cpf(cpf: str, verbose: bool = False) -> bool:
    """Check length, allowed characters, repeated digits and check digits.

    Dots and dashes may separate digits but may not follow each other
    or end the number. With ``verbose`` the reason for a rejection is printed.
    """
    digits: list[str] = []
    all_same = True

    for char, following in zip_longest(cpf, cpf[1:]):
        if char in _SEPARATORS:
            if following is None or following in _SEPARATORS:
                if verbose:
                    print(f"Occurrence of sequential '.' or/and '-' in the CPF: {cpf}.")
                return False
            continue
        if not "0" <= char <= "9":
            if verbose:
                print(f"Occurrence of non dash, point or number in the CPF: {cpf}.")
            return False
        if digits and digits[-1] != char:
            all_same = False
        digits.append(char)

    if len(digits) != _DIGIT_COUNT or all_same:
        return False

    first = calculate_verifier_digit(digits, _VERIFIER_START)
    second = calculate_verifier_digit(digits, _VERIFIER_START + 1)
    if digits[_VERIFIER_START] != first or digits[_VERIFIER_START + 1] != second:
        if verbose:
            print(f"Occurrence of not valid verifier digit in CPF: {cpf}.")
        return False
    return True


class Cpf:
    """A CPF value; holds the empty string when the given text is invalid."""

    __slots__ = ("value",)

    def __init__(self, value: str) -> None:
        self.value = value if validate_cpf(value, True) else ""

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Cpf({self.value!r})"

    def __bool__(self) -> bool:
        return bool(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Cpf):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)