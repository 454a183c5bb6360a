"""Cryptographically strong random bytes."""

from __future__ import annotations

import os

from kvik.errors import ErrCode, KvikError


def get_random_bytes(length: int) -> bytes:
    """Return ``length`` random bytes from the operating system."""
    if length < 0:
        raise ValueError("length must not be negative")
    try:
        data = os.urandom(length)
    except OSError as exc:
        raise KvikError("Generation failed", ErrCode.GENERIC_FAILURE) from exc
    if len(data) != length:
        raise KvikError("Generation failed", ErrCode.GENERIC_FAILURE)
    return data