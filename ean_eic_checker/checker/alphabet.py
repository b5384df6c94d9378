from __future__ import annotations

# EIC alphabet: 0-9 -> 0..9, A-Z -> 10..35, '-' -> 36
EIC_SEPARATOR = "-"
EIC_ALPHABET_SIZE = 37


def encode_char(ch: str) -> int | None:
    """Map one EIC character to its numeric value, or None if it is not in the alphabet."""
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    if ch == EIC_SEPARATOR:
        return 36
    return None


def decode_value(value: int) -> str | None:
    """Map a numeric value back to its EIC character, or None if out of range."""
    if 0 <= value <= 9:
        return chr(value + ord("0"))
    if 10 <= value <= 35:
        return chr(value - 10 + ord("A"))
    if value == 36:
        return EIC_SEPARATOR
    return None


def encode_code(code: str) -> list[int] | None:
    values: list[int] = []
    for ch in code:
        value = encode_char(ch)
        if value is None:
            return None
        values.append(value)
    return values
