import socket
import threading
import time

from orderladder.enums import OrderType, Side
from orderladder.protocol import OrderPacket
from orderladder.server import main, receive_packets, serve


def make_packet(count, side, price):
    return OrderPacket.create(
        count, "AAPL", side, OrderType.LIMIT, price, 0.0, 5.0, timestamp=1000 + count
    )


def test_receive_packets_reassembles_split_stream():
    packets = [make_packet(1, Side.BUY, 100.0), make_packet(2, Side.SELL, 101.0)]
    data = b"".join(p.pack() for p in packets)
    left, right = socket.socketpair()
    with left, right:
        left.sendall(data[:7])
        left.sendall(data[7:50])
        left.sendall(data[50:])
        left.close()
        received = list(receive_packets(right))
    assert received == packets


def test_receive_packets_drops_trailing_fragment():
    packet = make_packet(1, Side.BUY, 100.0)
    left, right = socket.socketpair()
    with left, right:
        left.sendall(packet.pack() + b"\x01\x02\x03")
        left.close()
        received = list(receive_packets(right))
    assert received == [packet]


def test_main_reports_bind_failure():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as taken:
        taken.bind(("127.0.0.1", 0))
        taken.listen(1)
        port = taken.getsockname()[1]
        assert main(["--port", str(port)]) == 1


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def _send_two_orders(port):
    deadline = time.monotonic() + 5
    while True:
        try:
            client = socket.create_connection(("127.0.0.1", port))
            break
        except ConnectionRefusedError:
            if time.monotonic() >= deadline:
                return
            time.sleep(0.05)
    with client:
        client.sendall(make_packet(1, Side.BUY, 100.0).pack())
        client.sendall(make_packet(2, Side.SELL, 102.0).pack())


def test_serve_books_received_orders():
    port = _free_port()
    sender = threading.Thread(target=_send_two_orders, args=(port,), daemon=True)
    sender.start()

    book = serve("127.0.0.1", port, "AAPL")
    sender.join(timeout=15)

    assert book.best_bid().price == 100.0
    assert book.best_ask().price == 102.0
    assert not book.running