from __future__ import annotations

import enum
from dataclasses import dataclass

from ean_eic_checker.checker.alphabet import EIC_ALPHABET_SIZE, decode_value, encode_code

EAN_PREFIX = "85"
EIC_PREFIX = "27"

EAN_LENGTH = 18
EIC_LENGTH = 16


class CheckResultCode(str, enum.Enum):
    no_code_supplied = "NoCodeSupplied"
    code_prefix_invalid = "CodePrefixInvalid"

    ean_ok = "EanOk"
    ean_invalid_length = "EanInvalidLength"
    ean_invalid_character = "EanInvalidCharacter"
    ean_invalid_check_character = "EanInvalidCheckCharacter"

    eic_ok = "EicOk"
    eic_invalid_length = "EicInvalidLength"
    eic_invalid_character = "EicInvalidCharacter"
    eic_invalid_check_character = "EicInvalidCheckCharacter"

    @property
    def is_ok(self) -> bool:
        return self in (CheckResultCode.ean_ok, CheckResultCode.eic_ok)

    @property
    def family(self) -> str | None:
        """EAN or EIC for validator outcomes, None for dispatcher outcomes."""
        if self.value.startswith("Ean"):
            return "EAN"
        if self.value.startswith("Eic"):
            return "EIC"
        return None

    @property
    def is_semantic(self) -> bool:
        # Well-formed code whose check character does not match.
        return self in (
            CheckResultCode.ean_invalid_check_character,
            CheckResultCode.eic_invalid_check_character,
        )

    @property
    def is_structural(self) -> bool:
        return not (self.is_ok or self.is_semantic)

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    CheckResultCode.no_code_supplied: "Enter an EAN or EIC code.",
    CheckResultCode.code_prefix_invalid: "Code must start with 85 (EAN) or 27 (EIC).",
    CheckResultCode.ean_ok: "Valid EAN code.",
    CheckResultCode.ean_invalid_length: f"EAN code must be {EAN_LENGTH} characters long.",
    CheckResultCode.ean_invalid_character: "EAN code must contain digits only.",
    CheckResultCode.ean_invalid_check_character: "EAN check digit does not match.",
    CheckResultCode.eic_ok: "Valid EIC code.",
    CheckResultCode.eic_invalid_length: f"EIC code must be {EIC_LENGTH} characters long.",
    CheckResultCode.eic_invalid_character: "EIC code may only contain 0-9, A-Z and '-'.",
    CheckResultCode.eic_invalid_check_character: "EIC check character does not match.",
}


@dataclass(frozen=True)
class EanEicCode:
    code: str | None = None


def _raw(code: EanEicCode | str | None) -> str | None:
    if isinstance(code, EanEicCode):
        return code.code
    return code


def classify(code: EanEicCode | str | None) -> CheckResultCode:
    """Classify a candidate code as an EAN-18 or EIC-16 and verify its check character.

    The code is used exactly as supplied: no trimming and no case folding.
    """
    value = _raw(code)
    if not value:
        return CheckResultCode.no_code_supplied

    prefix = value[:2]
    if len(value) >= 2 and prefix == EAN_PREFIX:
        return validate_ean(value)
    if len(value) >= 2 and prefix == EIC_PREFIX:
        return validate_eic(value)

    return CheckResultCode.code_prefix_invalid


# ----------------------------
# EAN
# ----------------------------

def ean_check_digit(digits: str) -> int | None:
    """Weighted modulo-10 check digit over ``digits``.

    Characters at even (0-based) positions weigh 3, odd positions weigh 1.
    Returns None if any character is not an ASCII digit.
    """
    total = 0
    for i, ch in enumerate(digits):
        if not ("0" <= ch <= "9"):
            return None
        digit = ord(ch) - ord("0")
        total += digit * 3 if i % 2 == 0 else digit

    return (10 - total % 10) % 10


def validate_ean(code: str) -> CheckResultCode:
    if len(code) != EAN_LENGTH:
        return CheckResultCode.ean_invalid_length

    check_digit = ean_check_digit(code[:EAN_LENGTH - 1])
    if check_digit is None:
        return CheckResultCode.ean_invalid_character

    # The last character is not checked for being a digit; anything else just mismatches.
    last_digit = ord(code[-1]) - ord("0")
    if last_digit == check_digit:
        return CheckResultCode.ean_ok
    return CheckResultCode.ean_invalid_check_character


# ----------------------------
# EIC
# ----------------------------

def _eic_check_value(values: list[int]) -> int:
    # Weights run from 16 down to 2 over the 15 body positions.
    weighted_sum = sum(weight * value for weight, value in zip(range(16, 1, -1), values))
    return 36 - ((weighted_sum - 1) % EIC_ALPHABET_SIZE)


def eic_check_character(body: str) -> str | None:
    """Check character for a 15-character EIC body, or None if the body has invalid characters."""
    values = encode_code(body)
    if values is None:
        return None
    return decode_value(_eic_check_value(values))


def validate_eic(code: str) -> CheckResultCode:
    """Validate an EIC-16 code.

    See the ENTSO-E EIC data exchange implementation guide for the check character
    algorithm. Every character, the check character included, must belong to the
    EIC alphabet.
    """
    if len(code) != EIC_LENGTH:
        return CheckResultCode.eic_invalid_length

    values = encode_code(code)
    if values is None:
        return CheckResultCode.eic_invalid_character

    check_char = decode_value(_eic_check_value(values[:EIC_LENGTH - 1]))
    if check_char is None:
        return CheckResultCode.eic_invalid_character

    if check_char == code[-1]:
        return CheckResultCode.eic_ok
    return CheckResultCode.eic_invalid_check_character
