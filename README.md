# udpreq

A small library for UDP requests. It sends one datagram to a host and port
and reads back a single reply. You can read the reply as raw bytes or as text.

## Installing

```
pip install udpreq
```

## Usage

Use `udpreq.request.RequestBuilder` to set up a request. Each setter returns
the builder, so you can chain the calls. `build()` returns a `UdpRequest` with
the settings you collected, then resets the builder to its defaults.

```python
from udpreq.request import RequestBuilder
from udpreq.errors import RequestError

request = RequestBuilder().host("127.0.0.1").port(60000).timeout(1000).build()

try:
    response = request.send(b"udp send")
except RequestError as exc:
    print(f"Error => {exc}")
else:
    print("Text =>", response.text())
    print("Binary =>", response.binary())
```

Each call to `send()` on a `UdpRequest` opens a new socket and closes it when
the call ends. You can call `send()` as often as you like. Calls from several
threads on the same request are handled one at a time. The last reply is also
kept in the request's `response` attribute.

### Options

| Setter              | Meaning                                          | Default        |
|---------------------|--------------------------------------------------|----------------|
| `host(host)`        | Address to send to (must be set)                 | empty string   |
| `port(port)`        | Port to send to                                  | `80`           |
| `timeout(timeout)`  | Socket timeout in milliseconds                   | no time limit  |
| `buffer(size)`      | Largest reply, in bytes, that will be read       | `512000`       |

The settings are held in a `udpreq.config.Config` dataclass with the fields
`host`, `port`, `timeout` and `buffer_size`. A negative buffer size falls back
to the default of 512000.

### Responses

`send()` returns a `udpreq.response.BinaryResponse`:

- `binary()` (or `bytes(response)`) returns the reply bytes.
- `text()` decodes the bytes as UTF-8. Invalid sequences become U+FFFD.
- `len(response)` is the number of bytes received.

`udpreq.response.TextResponse` stores the decoded text instead. `text()` and
`str()` return that text, and `binary()` returns its UTF-8 encoding. To build
either class from raw bytes, call its `from_bytes(data)` class method.

If no reply arrives before the timeout, or the read fails in some other way,
`send()` returns an empty response and does not raise an error.

### Errors

All errors are defined in `udpreq.errors` and derive from `RequestError`.
`send()` raises the following:

- `UdpSocketCreateError`: the socket could not be created or bound.
- `UdpSocketConnectError`: no host was set, or the host and port could not be
  used as an address.
- `SetReadTimeoutError`: the timeout is zero or negative.
- `SendResponseError`: sending the datagram failed. The message from the
  operating system is kept in its `detail` attribute.

The module also defines `InvalidUrlError`, `ReadConnectionError`,
`SetWriteTimeoutError` and `ReadResponseError`. They are there so that you can
catch them in your own code, but `send()` never raises them.

## What it does not do

- It uses IPv4 sockets only.
- It reads exactly one datagram for each request. It does not reassemble
  replies that span several datagrams.
- It is a client only. It includes no server and no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```