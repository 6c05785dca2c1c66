"""All orders resting at a single price."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .order import Order, OrderQueue


@dataclass
class PriceLevel:
    """FIFO queue of orders at one price with running totals."""

    price: float
    quantity: float = 0.0
    count: int = 0
    _orders: OrderQueue = field(default_factory=OrderQueue, repr=False, compare=False)

    def add_order(self, order: Order) -> None:
        """Queue an order; its price must equal the level's."""
        if order.price != self.price:
            raise ValueError("order price does not match price level")
        self._orders.insert(order)
        self.quantity += order.quantity
        self.count += 1

    def remove_order(self, order: Order) -> Order:
        """Dequeue an order, subtracting its unfilled quantity from the total."""
        self._orders.remove(order)
        self.quantity -= order.quantity - order.filled_quantity
        self.count -= 1
        return order

    def front(self) -> Optional[Order]:
        return self._orders.front()

    def empty(self) -> bool:
        return len(self._orders) == 0

    def __len__(self) -> int:
        return len(self._orders)