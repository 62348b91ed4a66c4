from __future__ import annotations

import math
from typing import Iterable


def split_csv(raw: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(",") if item.strip())


# -- strings ----------------------------------------------------------------


def to_upper(value: str) -> str:
    return value.upper()


def to_lower(value: str) -> str:
    return value.lower()


def split(value: str, delimiter: str) -> list[str]:
    """Split on a single-character delimiter.

    Empty parts between delimiters are kept, but a trailing delimiter does
    not produce a trailing empty part and an empty input yields no parts.
    """
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    if not value:
        return []
    parts = value.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def join(parts: Iterable[str], separator: str) -> str:
    return separator.join(parts)


def starts_with(value: str, prefix: str) -> bool:
    return value.startswith(prefix)


def ends_with(value: str, suffix: str) -> bool:
    return value.endswith(suffix)


# -- integer math -----------------------------------------------------------


def gcd(a: int, b: int) -> int:
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return (a // gcd(a, b)) * b


def is_prime(n: int) -> bool:
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def clamp(value: float, lower: float, upper: float) -> float:
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


def number_to_string(n: int) -> str:
    return to_upper(str(n))
