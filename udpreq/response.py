"""Responses received from a UDP peer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BinaryResponse:
    """A response held as raw bytes."""

    data: bytes = b""

    @classmethod
    def from_bytes(cls, data) -> "BinaryResponse":
        return cls(bytes(data))

    def text(self) -> str:
        """Decode as UTF-8, replacing invalid sequences."""
        return self.data.decode("utf-8", errors="replace")

    def binary(self) -> bytes:
        return self.data

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class TextResponse:
    """A response held as decoded text."""

    data: str = ""

    @classmethod
    def from_bytes(cls, data) -> "TextResponse":
        return cls(BinaryResponse.from_bytes(data).text())

    def text(self) -> str:
        return self.data

    def binary(self) -> bytes:
        return self.data.encode("utf-8")

    def __str__(self) -> str:
        return self.data