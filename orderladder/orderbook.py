"""Two-sided limit order book with a background matching thread."""

from __future__ import annotations

import sys
import threading
import time
from itertools import islice
from typing import List, Optional, TextIO, Tuple

from sortedcontainers import SortedDict

from .enums import Side
from .order import Order
from .price_level import PriceLevel

LADDER_LEVELS = 10
DEFAULT_FPS = 40

_HIDE_CURSOR = "\033[?25l"
_HOME = "\033[H"
_RED = "\033[31m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"


def _fmt(value: float) -> str:
    return f"{value:g}"


class OrderBook:
    """Bids sorted high to low, asks low to high, matched price-time priority."""

    def __init__(
        self,
        symbol: str,
        out: Optional[TextIO] = None,
        match_delay: float = 0.5,
    ) -> None:
        self.symbol = symbol
        self._asks: SortedDict = SortedDict()
        self._bids: SortedDict = SortedDict(lambda price: -price)
        self._out = out
        self._match_delay = match_delay
        self._lock = threading.RLock()
        self._new_order = threading.Condition(self._lock)
        self._print_lock = threading.Lock()
        self._running = False
        self._threads: List[threading.Thread] = []

    # -- lifecycle -------------------------------------------------------

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Start the matching thread and, with an output stream, the printer."""
        with self._lock:
            if self._running:
                return
            self._running = True
        self._threads = [
            threading.Thread(target=self._match_loop, name="matching", daemon=True)
        ]
        if self._out is not None:
            self._threads.append(
                threading.Thread(
                    target=self.print_loop,
                    args=(DEFAULT_FPS,),
                    name="printing",
                    daemon=True,
                )
            )
        for thread in self._threads:
            thread.start()

    def stop(self) -> None:
        """Stop matching and printing and wait for both threads."""
        with self._new_order:
            if not self._running:
                return
            self._running = False
            self._new_order.notify_all()
        for thread in self._threads:
            thread.join()
        self._threads = []

    def __enter__(self) -> "OrderBook":
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.stop()

    # -- book maintenance ------------------------------------------------

    def _levels(self, side: Side) -> SortedDict:
        return self._bids if side is Side.BUY else self._asks

    def add_order(self, order: Order) -> None:
        """Queue an order at its price level; raise ValueError on a foreign symbol."""
        with self._new_order:
            if order.symbol != self.symbol:
                raise ValueError("order is for a different financial asset")
            levels = self._levels(order.side)
            level = levels.get(order.price)
            if level is None:
                level = levels[order.price] = PriceLevel(order.price)
            level.add_order(order)
            self._new_order.notify_all()
        if self._out is not None and self._print_lock.acquire(blocking=False):
            try:
                self._write(self.render())
            finally:
                self._print_lock.release()

    def remove_order(self, order: Order, side: Side) -> None:
        """Take an order off the book; raise KeyError if its price has no level."""
        with self._lock:
            levels = self._levels(side)
            level = levels[order.price]
            level.remove_order(order)
            if level.empty():
                del levels[order.price]

    def best_bid(self) -> Optional[Order]:
        with self._lock:
            if not self._bids:
                return None
            return self._bids.peekitem(0)[1].front()

    def best_ask(self) -> Optional[Order]:
        with self._lock:
            if not self._asks:
                return None
            return self._asks.peekitem(0)[1].front()

    # -- matching --------------------------------------------------------

    def match_once(self) -> float:
        """Cross the best bid and ask once; return the traded quantity (0 if none)."""
        with self._lock:
            bid = self.best_bid()
            ask = self.best_ask()
            if bid is None or ask is None or bid.price < ask.price:
                return 0.0
            bid_level = self._bids[bid.price]
            ask_level = self._asks[ask.price]
            traded = min(bid.quantity, ask.quantity)

            bid.quantity -= traded
            ask.quantity -= traded
            ask_level.quantity -= traded
            bid_level.quantity -= traded

            if ask.quantity == 0:
                self.remove_order(ask, Side.SELL)
            if bid.quantity == 0:
                self.remove_order(bid, Side.BUY)
            return traded

    def _match_loop(self) -> None:
        while True:
            with self._new_order:
                self._new_order.wait_for(
                    lambda: not self._running or (self._bids and self._asks)
                )
                if not self._running:
                    return
            time.sleep(self._match_delay)
            self.match_once()

    # -- display ---------------------------------------------------------

    def ask_ladder(self, levels: int = LADDER_LEVELS) -> List[Tuple[float, float]]:
        """Up to ``levels`` (price, quantity) pairs from the lowest ask upward."""
        with self._lock:
            return [(p, lvl.quantity) for p, lvl in islice(self._asks.items(), levels)]

    def bid_ladder(self, levels: int = LADDER_LEVELS) -> List[Tuple[float, float]]:
        """Up to ``levels`` (price, quantity) pairs from the highest bid downward."""
        with self._lock:
            return [(p, lvl.quantity) for p, lvl in islice(self._bids.items(), levels)]

    def render(self) -> str:
        """The ask and bid ladders as coloured terminal text."""
        asks = self.ask_ladder(LADDER_LEVELS)
        bids = self.bid_ladder(LADDER_LEVELS)
        asks += [(0.0, 0.0)] * (LADDER_LEVELS - len(asks))
        bids += [(0.0, 0.0)] * (LADDER_LEVELS - len(bids))
        crossed = asks[0] <= bids[0]

        parts = [f"{_HIDE_CURSOR}ORDER BOOK {self.symbol}\n"]
        parts.append("ASK LADDER".ljust(62) + "\n")
        parts.append(_RED)
        for i in reversed(range(LADDER_LEVELS)):
            price, quantity = asks[i]
            row = f"{_fmt(price)} liquidity: {_fmt(quantity)}" + " " * 25 + "\n"
            parts.append(f"{_YELLOW}{row}{_RED}" if i == 0 and crossed else row)
        parts.append(_RESET)

        parts.append("BUY LADDER".ljust(65) + "\n")
        parts.append(_GREEN)
        for i, (price, quantity) in enumerate(bids):
            row = f"{_fmt(price)} liquidity: {_fmt(quantity)}" + " " * 35 + "\n"
            parts.append(f"{_YELLOW}{row}{_GREEN}" if i == 0 and crossed else row)
        parts.append(_RESET)
        return "".join(parts)

    def _write(self, text: str) -> None:
        out = self._out if self._out is not None else sys.stdout
        out.write(text + _HOME)
        out.flush()

    def print_loop(self, fps: int) -> None:
        """Redraw the book in place ``fps`` times a second while running."""
        interval = 1.0 / fps
        while self._running:
            with self._print_lock:
                self._write(self.render())
            time.sleep(interval)