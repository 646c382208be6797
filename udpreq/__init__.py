"""Send a UDP datagram and read back the reply as bytes or text."""

__version__ = "0.2.6"
__all__ = ["config", "errors", "request", "response"]