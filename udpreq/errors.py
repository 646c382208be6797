"""Errors raised while sending a UDP request."""

from __future__ import annotations


class RequestError(Exception):
    """Base class of every request failure."""

    message = "Request error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.message)


class InvalidUrlError(RequestError):
    message = "Invalid url"


class UdpSocketCreateError(RequestError):
    message = "Udp socket create error"


class UdpSocketConnectError(RequestError):
    message = "Udp socket connection error"


class ReadConnectionError(RequestError):
    message = "Connection read error"


class SetReadTimeoutError(RequestError):
    message = "Failed to set read timeout"


class SetWriteTimeoutError(RequestError):
    message = "Failed to set write timeout"


class ReadResponseError(RequestError):
    message = "Read response error"


class SendResponseError(RequestError):
    """Sending the datagram failed; carries the underlying reason."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Send response error: {detail}")