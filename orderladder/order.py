"""Individual orders and the FIFO queue that holds them at one price."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from .enums import OrderType, Side
from .protocol import OrderPacket


@dataclass(eq=False)
class Order:
    """A resting trading order; compared by identity."""

    order_id: int
    symbol: str
    side: Side
    order_type: OrderType
    price: float
    stop_price: float
    quantity: float
    timestamp: int
    filled_quantity: float = 0.0
    _queue: Optional["OrderQueue"] = field(
        default=None, init=False, repr=False, compare=False
    )

    @classmethod
    def from_packet(cls, packet: OrderPacket) -> "Order":
        """Build an unfilled order from a received packet."""
        return cls(
            order_id=packet.order_id,
            symbol=packet.symbol,
            side=packet.side,
            order_type=packet.order_type,
            price=packet.price,
            stop_price=packet.stop_price,
            quantity=packet.quantity,
            timestamp=packet.timestamp,
        )

    def is_limit(self) -> bool:
        return self.order_type in (OrderType.LIMIT, OrderType.STOP_LIMIT)

    def is_market(self) -> bool:
        return self.order_type in (OrderType.MARKET, OrderType.STOP_MARKET)

    def is_stop(self) -> bool:
        return self.order_type in (OrderType.STOP_MARKET, OrderType.STOP_LIMIT)

    def add_fill(self, filled_quantity: float) -> None:
        """Record a fill; raise ValueError if it exceeds what remains."""
        if filled_quantity > self.quantity - self.filled_quantity:
            raise ValueError("filled quantity exceeds remaining quantity")
        self.filled_quantity += filled_quantity


class OrderQueue:
    """First-in first-out queue of orders; an order lives in one queue at a time."""

    def __init__(self) -> None:
        self._orders: Dict[int, Order] = {}

    def insert(self, order: Order) -> None:
        """Append an order at the back."""
        if order._queue is not None:
            raise ValueError("order is already inside a queue")
        self._orders[id(order)] = order
        order._queue = self

    def remove(self, order: Order) -> None:
        """Take an order out, wherever it sits."""
        if order._queue is not self:
            raise ValueError("order is not inside this queue")
        del self._orders[id(order)]
        order._queue = None

    def front(self) -> Optional[Order]:
        """The oldest order, or None when empty."""
        return next(iter(self._orders.values()), None)

    def __len__(self) -> int:
        return len(self._orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(list(self._orders.values()))

    def __contains__(self, order: object) -> bool:
        return isinstance(order, Order) and order._queue is self