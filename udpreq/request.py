"""Sending a datagram and reading the reply."""

from __future__ import annotations

import socket
import threading
from dataclasses import replace

from .config import DEFAULT_BUFFER_SIZE, Config
from .errors import (
    SendResponseError,
    SetReadTimeoutError,
    UdpSocketConnectError,
    UdpSocketCreateError,
)
from .response import BinaryResponse


class UdpRequest:
    """A configured UDP request that can be sent repeatedly."""

    def __init__(self, config: Config | None = None) -> None:
        self.config = config if config is not None else Config()
        self.response = BinaryResponse()
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"UdpRequest(config={self.config!r})"

    def send(self, data) -> BinaryResponse:
        """Send ``data`` and return the single datagram received in reply.

        A reply that does not arrive in time yields an empty response.
        """
        with self._lock:
            config = replace(self.config)
            with self._connect(config) as sock:
                try:
                    sock.send(bytes(data))
                except OSError as exc:
                    raise SendResponseError(str(exc)) from exc
                self.response = self._read(sock, config.buffer_size)
            return self.response

    @staticmethod
    def _connect(config: Config) -> socket.socket:
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        except OSError as exc:
            raise UdpSocketCreateError() from exc
        try:
            try:
                sock.bind(("0.0.0.0", 0))
            except OSError as exc:
                raise UdpSocketCreateError() from exc
            if not config.host:
                raise UdpSocketConnectError()
            try:
                sock.connect((config.host, config.port))
            except (OSError, OverflowError, ValueError, TypeError) as exc:
                raise UdpSocketConnectError() from exc
            if config.timeout <= 0:
                raise SetReadTimeoutError()
            try:
                sock.settimeout(config.timeout / 1000)
            except OverflowError:
                sock.settimeout(None)
        except BaseException:
            sock.close()
            raise
        return sock

    @staticmethod
    def _read(sock: socket.socket, buffer_size: int) -> BinaryResponse:
        size = buffer_size if buffer_size >= 0 else DEFAULT_BUFFER_SIZE
        try:
            payload = sock.recv(size)
        except OSError:
            payload = b""
        return BinaryResponse.from_bytes(payload)


class RequestBuilder:
    """Collects settings and produces a :class:`UdpRequest`."""

    def __init__(self) -> None:
        self._config = Config()

    def host(self, host) -> "RequestBuilder":
        self._config.host = str(host)
        return self

    def port(self, port: int) -> "RequestBuilder":
        self._config.port = port
        return self

    def buffer(self, buffer_size: int) -> "RequestBuilder":
        self._config.buffer_size = buffer_size
        return self

    def timeout(self, timeout: int) -> "RequestBuilder":
        """Set the read and write timeout in milliseconds."""
        self._config.timeout = timeout
        return self

    def build(self) -> UdpRequest:
        """Return a request with the collected settings and reset the builder."""
        request = UdpRequest(replace(self._config))
        self._config = Config()
        return request