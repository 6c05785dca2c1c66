"""Single-symbol limit order book with a TCP order feed and a console ladder."""

__version__ = "0.1.0"
__all__ = ["enums", "protocol", "order", "price_level", "orderbook", "server", "client"]