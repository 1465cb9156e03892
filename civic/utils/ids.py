"""Identifiers and millisecond clock."""

import secrets
import time

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def now_ms() -> int:
    """Current time in milliseconds since epoch."""
    return int(time.time() * 1000)


def to_base36(n: int) -> str:
    """Non-negative int in lowercase base 36."""
    if n < 0:
        raise ValueError("to_base36 expects a non-negative int")
    if n == 0:
        return "0"
    digits = []
    while n:
        n, rem = divmod(n, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def new_id(prefix: str = "id-") -> str:
    """Random part followed by the base36 clock, e.g. id-k3j9x0a1lq8m2b."""
    return f"{prefix}{secrets.token_hex(5)}{to_base36(now_ms())}"
