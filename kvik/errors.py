"""Error codes and the base exception of the package."""

from __future__ import annotations

from enum import IntEnum


class ErrCode(IntEnum):
    """Error code; anything other than ``SUCCESS`` is a failure."""

    SUCCESS = 0x0
    GENERIC_FAILURE = 0x1

    INVALID_ARG = 0x10
    INVALID_SIZE = 0x11
    NOT_FOUND = 0x12
    NOT_SUPPORTED = 0x13
    TIMEOUT = 0x14
    TOO_MANY_FAILED_ATTEMPTS = 0x15
    NO_GATEWAY = 0x16

    # Codes corresponding to local message fail reasons
    MSG_DUP_ID = 0x101
    MSG_INVALID_TS = 0x102
    MSG_PROCESSING_FAILED = 0x103
    MSG_UNKNOWN_SENDER = 0x104


class KvikError(Exception):
    """Base exception carrying an :class:`ErrCode`."""

    def __init__(self, message: str, code: ErrCode = ErrCode.GENERIC_FAILURE) -> None:
        super().__init__(message)
        self.message = message
        self.code = ErrCode(code)

    def __str__(self) -> str:
        return self.message