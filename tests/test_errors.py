import pytest

from udpreq.errors import (
    InvalidUrlError,
    ReadConnectionError,
    ReadResponseError,
    RequestError,
    SendResponseError,
    SetReadTimeoutError,
    SetWriteTimeoutError,
    UdpSocketConnectError,
    UdpSocketCreateError,
)


@pytest.mark.parametrize(
    "cls, text",
    [
        (RequestError, "Request error"),
        (InvalidUrlError, "Invalid url"),
        (UdpSocketCreateError, "Udp socket create error"),
        (UdpSocketConnectError, "Udp socket connection error"),
        (ReadConnectionError, "Connection read error"),
        (SetReadTimeoutError, "Failed to set read timeout"),
        (SetWriteTimeoutError, "Failed to set write timeout"),
        (ReadResponseError, "Read response error"),
    ],
)
def test_messages(cls, text):
    assert str(cls()) == text


def test_send_error_includes_detail():
    err = SendResponseError("boom")
    assert str(err) == "Send response error: boom"
    assert err.detail == "boom"


@pytest.mark.parametrize(
    "err, text",
    [
        (SendResponseError("x"), "Send response error: x"),
        (UdpSocketConnectError(), "Udp socket connection error"),
        (InvalidUrlError(), "Invalid url"),
        (ReadResponseError(), "Read response error"),
    ],
)
def test_all_errors_caught_as_request_error(err, text):
    with pytest.raises(RequestError) as excinfo:
        raise err
    assert excinfo.value is err
    assert str(excinfo.value) == text