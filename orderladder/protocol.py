"""Fixed-size binary order packet exchanged between client and server."""

from __future__ import annotations

import struct
import time
from dataclasses import dataclass
from typing import ClassVar, Optional

from .enums import OrderType, Side

_STRUCT = struct.Struct("<QQ16siidddQ")
SYMBOL_SIZE = 16
PACKET_SIZE = _STRUCT.size

_U64_MASK = (1 << 64) - 1


def now_millis() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def generate_order_id(timestamp: int, order_id: int) -> int:
    """Combine a millisecond timestamp with the low 24 bits of an id."""
    return ((timestamp << 24) | (order_id & 0xFFFFFF)) & _U64_MASK


def _clip_symbol(symbol: str) -> bytes:
    return symbol.encode("utf-8")[: SYMBOL_SIZE - 1]


@dataclass(frozen=True)
class OrderPacket:
    """One order as it travels over the wire."""

    order_count: int
    order_id: int
    symbol: str
    side: Side
    order_type: OrderType
    price: float
    stop_price: float
    quantity: float
    timestamp: int

    SIZE: ClassVar[int] = PACKET_SIZE

    @classmethod
    def create(
        cls,
        order_count: int,
        symbol: str,
        side: Side,
        order_type: OrderType,
        price: float,
        stop_price: float,
        quantity: float,
        timestamp: Optional[int] = None,
    ) -> "OrderPacket":
        """Build a packet stamped now (unless given) with a generated order id."""
        if timestamp is None:
            timestamp = now_millis()
        clipped = _clip_symbol(symbol).decode("utf-8", errors="ignore")
        return cls(
            order_count=order_count,
            order_id=generate_order_id(timestamp, order_count),
            symbol=clipped,
            side=side,
            order_type=order_type,
            price=float(price),
            stop_price=float(stop_price),
            quantity=float(quantity),
            timestamp=timestamp,
        )

    def pack(self) -> bytes:
        """Serialise to the packed little-endian wire layout."""
        return _STRUCT.pack(
            self.order_count & _U64_MASK,
            self.order_id & _U64_MASK,
            _clip_symbol(self.symbol),
            self.side.value,
            self.order_type.value,
            self.price,
            self.stop_price,
            self.quantity,
            self.timestamp & _U64_MASK,
        )

    @classmethod
    def unpack(cls, data: bytes) -> "OrderPacket":
        """Parse exactly one packet; raise ValueError on bad length or enum."""
        if len(data) != PACKET_SIZE:
            raise ValueError(
                f"order packet must be {PACKET_SIZE} bytes, got {len(data)}"
            )
        (
            order_count,
            order_id,
            raw_symbol,
            side,
            order_type,
            price,
            stop_price,
            quantity,
            timestamp,
        ) = _STRUCT.unpack(data)
        symbol = raw_symbol.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        return cls(
            order_count=order_count,
            order_id=order_id,
            symbol=symbol,
            side=Side(side),
            order_type=OrderType(order_type),
            price=price,
            stop_price=stop_price,
            quantity=quantity,
            timestamp=timestamp,
        )