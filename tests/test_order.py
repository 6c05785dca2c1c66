import pytest

from orderladder.enums import OrderType, Side
from orderladder.order import Order, OrderQueue
from orderladder.protocol import OrderPacket


def make_order(order_id=1, price=100.0, quantity=10.0, order_type=OrderType.LIMIT):
    return Order(
        order_id=order_id,
        symbol="AAPL",
        side=Side.BUY,
        order_type=order_type,
        price=price,
        stop_price=0.0,
        quantity=quantity,
        timestamp=0,
    )


def test_from_packet_copies_fields():
    packet = OrderPacket.create(
        2, "AAPL", Side.SELL, OrderType.MARKET, 150.0, 149.0, 7.0, timestamp=42
    )
    order = Order.from_packet(packet)
    assert order.order_id == packet.order_id
    assert order.symbol == "AAPL"
    assert order.side is Side.SELL
    assert order.order_type is OrderType.MARKET
    assert order.price == 150.0
    assert order.stop_price == 149.0
    assert order.quantity == 7.0
    assert order.timestamp == 42
    assert order.filled_quantity == 0.0


@pytest.mark.parametrize(
    "order_type, limit, market, stop",
    [
        (OrderType.LIMIT, True, False, False),
        (OrderType.MARKET, False, True, False),
        (OrderType.STOP_LIMIT, True, False, True),
        (OrderType.STOP_MARKET, False, True, True),
    ],
)
def test_type_checks(order_type, limit, market, stop):
    order = make_order(order_type=order_type)
    assert order.is_limit() is limit
    assert order.is_market() is market
    assert order.is_stop() is stop


def test_add_fill_accumulates():
    order = make_order(quantity=10.0)
    order.add_fill(4)
    order.add_fill(6)
    assert order.filled_quantity == 10.0


def test_add_fill_rejects_overfill():
    order = make_order(quantity=10.0)
    order.add_fill(8)
    with pytest.raises(ValueError):
        order.add_fill(3)
    assert order.filled_quantity == 8.0


def test_orders_compare_by_identity():
    a = make_order()
    b = make_order()
    assert a != b
    assert a == a


def test_queue_is_fifo():
    queue = OrderQueue()
    orders = [make_order(order_id=i) for i in range(4)]
    for order in orders:
        queue.insert(order)
    assert len(queue) == 4
    assert queue.front() is orders[0]
    assert list(queue) == orders


def test_empty_queue():
    queue = OrderQueue()
    assert len(queue) == 0
    assert queue.front() is None
    assert list(queue) == []


def test_remove_middle_head_and_tail():
    queue = OrderQueue()
    orders = [make_order(order_id=i) for i in range(4)]
    for order in orders:
        queue.insert(order)
    queue.remove(orders[1])
    assert list(queue) == [orders[0], orders[2], orders[3]]
    queue.remove(orders[0])
    assert queue.front() is orders[2]
    queue.remove(orders[3])
    assert list(queue) == [orders[2]]
    assert orders[1] not in queue
    assert orders[2] in queue


def test_insert_twice_raises():
    queue = OrderQueue()
    order = make_order()
    queue.insert(order)
    with pytest.raises(ValueError):
        queue.insert(order)
    assert len(queue) == 1


def test_insert_into_second_queue_raises():
    first, second = OrderQueue(), OrderQueue()
    order = make_order()
    first.insert(order)
    with pytest.raises(ValueError):
        second.insert(order)
    assert order not in second


def test_remove_absent_raises():
    queue = OrderQueue()
    with pytest.raises(ValueError):
        queue.remove(make_order())


def test_removed_order_can_be_reinserted_at_back():
    queue = OrderQueue()
    a, b = make_order(order_id=1), make_order(order_id=2)
    queue.insert(a)
    queue.insert(b)
    queue.remove(a)
    queue.insert(a)
    assert list(queue) == [b, a]


def test_contains_rejects_non_orders():
    queue = OrderQueue()
    assert ("not an order" in queue) is False