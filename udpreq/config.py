"""Connection settings for UDP requests."""

from __future__ import annotations

from dataclasses import dataclass

EMPTY_STR = ""
DEFAULT_WEB_PORT = 80
DEFAULT_BUFFER_SIZE = 512_000
# Milliseconds; the largest unsigned 64-bit value, meaning "wait as long as it takes".
DEFAULT_TIMEOUT = 2**64 - 1


@dataclass
class Config:
    """Target address, timeout in milliseconds and receive buffer size."""

    host: str = EMPTY_STR
    port: int = DEFAULT_WEB_PORT
    timeout: int = DEFAULT_TIMEOUT
    buffer_size: int = DEFAULT_BUFFER_SIZE