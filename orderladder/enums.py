"""Order sides and order types."""

from __future__ import annotations

from enum import Enum


class Side(Enum):
    """Which side of the book an order rests on."""

    BUY = 0
    SELL = 1

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, text: str) -> "Side":
        """Read a side written in upper or lower case."""
        try:
            return _SIDE_NAMES[text]
        except KeyError:
            raise ValueError(f"unknown side: {text!r}") from None


class OrderType(Enum):
    """How an order is to be executed."""

    LIMIT = 0
    MARKET = 1
    STOP_LIMIT = 2
    STOP_MARKET = 3

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, text: str) -> "OrderType":
        """Read an order type written in upper or lower case, with '_' or ' '."""
        try:
            return _TYPE_NAMES[text]
        except KeyError:
            raise ValueError(f"unknown order type: {text!r}") from None


_SIDE_NAMES = {
    "BUY": Side.BUY,
    "buy": Side.BUY,
    "SELL": Side.SELL,
    "sell": Side.SELL,
}

_TYPE_NAMES = {
    "LIMIT": OrderType.LIMIT,
    "limit": OrderType.LIMIT,
    "MARKET": OrderType.MARKET,
    "market": OrderType.MARKET,
    "STOP_LIMIT": OrderType.STOP_LIMIT,
    "stop_limit": OrderType.STOP_LIMIT,
    "stop limit": OrderType.STOP_LIMIT,
    "STOP LIMIT": OrderType.STOP_LIMIT,
    "STOP_MARKET": OrderType.STOP_MARKET,
    "stop_market": OrderType.STOP_MARKET,
    "stop market": OrderType.STOP_MARKET,
    "STOP MARKET": OrderType.STOP_MARKET,
}