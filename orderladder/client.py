"""Client that reads orders from a text file and sends them to the server."""

from __future__ import annotations

import argparse
import socket
import sys
import time
from typing import Iterator, Optional, Sequence

from .enums import OrderType, Side
from .protocol import OrderPacket

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 55555
DEFAULT_FILE = "order.txt"
_FIELDS = ("symbol", "side", "type", "price", "stop price", "quantity")


def parse_order_line(line: str, order_count: int) -> OrderPacket:
    """Parse 'symbol,side,type,price,stopPrice,quantity' into a packet."""
    tokens = line.split(",")
    if len(tokens) < len(_FIELDS):
        missing = ", ".join(_FIELDS[len(tokens):])
        raise ValueError(f"order line is missing: {missing}")
    symbol, side, order_type, price, stop_price, quantity = tokens[: len(_FIELDS)]
    return OrderPacket.create(
        order_count,
        symbol,
        Side.parse(side),
        OrderType.parse(order_type),
        float(price),
        float(stop_price),
        float(quantity),
    )


def read_orders(path: str) -> Iterator[OrderPacket]:
    """Yield a packet for every non-blank line, counting orders from 1."""
    with open(path, encoding="utf-8") as handle:
        count = 0
        for raw in handle:
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            count += 1
            yield parse_order_line(line, count)


def send_orders(
    path: str,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    delay: float = 1.0,
) -> int:
    """Connect, send every order in ``path`` with ``delay`` seconds between, return the count."""
    sent = 0
    with socket.create_connection((host, port)) as sock:
        print("connection successful, client can start send and receive data...")
        for packet in read_orders(path):
            print(f"symbol: {packet.symbol}")
            print(f"side: {packet.side}")
            print(f"type: {packet.order_type}")
            print(f"price: {packet.price:g}")
            print(f"stop price: {packet.stop_price:g}")
            print(f"quantity: {packet.quantity:g}")
            print(f"timestamp: {packet.timestamp}")
            sock.sendall(packet.pack())
            sent += 1
            if delay:
                time.sleep(delay)
    return sent


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Send orders from a file.")
    parser.add_argument("file", nargs="?", default=DEFAULT_FILE)
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--delay", type=float, default=1.0)
    args = parser.parse_args(argv)
    try:
        send_orders(args.file, args.host, args.port, args.delay)
    except FileNotFoundError:
        print("error, file not opened")
    except OSError as exc:
        print(f"connection failed: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())