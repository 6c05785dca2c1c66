"""TCP server that feeds received order packets into an order book."""

from __future__ import annotations

import argparse
import socket
import sys
import time
from typing import Iterator, Optional, Sequence

from .order import Order
from .orderbook import OrderBook
from .protocol import PACKET_SIZE, OrderPacket

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 55555
DEFAULT_SYMBOL = "AAPL"
_SETTLE_SECONDS = 2.0
_CLEAR_SCREEN = "\033[2J\033[H"
_SHOW_CURSOR = "\033[?25h"


def receive_packets(sock: socket.socket) -> Iterator[OrderPacket]:
    """Yield whole packets from a stream socket until the peer closes it."""
    buffer = bytearray()
    while True:
        chunk = sock.recv(4096)
        if not chunk:
            return
        buffer += chunk
        while len(buffer) >= PACKET_SIZE:
            yield OrderPacket.unpack(bytes(buffer[:PACKET_SIZE]))
            del buffer[:PACKET_SIZE]


def serve(
    host: str = DEFAULT_HOST, port: int = DEFAULT_PORT, symbol: str = DEFAULT_SYMBOL
) -> OrderBook:
    """Accept one client and book its orders until it disconnects."""
    out = sys.stdout
    out.write(_CLEAR_SCREEN)
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server_socket:
        print("Socket successfully created")
        try:
            server_socket.bind((host, port))
        except OSError as exc:
            print(f"Bind failed: {exc}")
            raise
        print("Successful bind")
        server_socket.listen(1)
        print("listening...")
        conn, _ = server_socket.accept()
        print("connection accepted")

    time.sleep(_SETTLE_SECONDS)
    out.write(_CLEAR_SCREEN)

    book = OrderBook(symbol, out=out)
    try:
        with book, conn:
            for packet in receive_packets(conn):
                book.add_order(Order.from_packet(packet))
    finally:
        out.write(_SHOW_CURSOR)
        out.flush()
    return book


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the order book server.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--symbol", default=DEFAULT_SYMBOL)
    args = parser.parse_args(argv)
    try:
        serve(args.host, args.port, args.symbol)
    except OSError:
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())