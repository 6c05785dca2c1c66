# orderladder

A compact limit order book for a single symbol. Orders arrive over TCP as
fixed-size binary packets and rest in price levels, each queued first in, first
out. A background thread matches the best bid against the best ask, and a
second thread redraws a coloured ladder of the top ten ask and bid levels in
the terminal.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running it

Start the server:

```
orderladder-server
```

It listens on `127.0.0.1:55555`, accepts a single client and keeps a book for
`AAPL`. Options: `--host`, `--port` and `--symbol`. After the connection is
accepted it waits two seconds, clears the screen and starts drawing the ladder.
Every packet received is booked as an order; an order for a symbol other than
the book's raises an error. When the client disconnects, the matching and
printing threads are stopped and the server exits.

In a second terminal, send orders from a file:

```
orderladder-client
```

By default the client reads `order.txt` in the current directory and sends one
order per second, printing each order's fields as it goes. Options: a file path
as the positional argument, `--host`, `--port` and `--delay` (seconds between
orders). Each non-blank line holds six comma-separated fields, with no spaces
around the commas:

```
symbol,side,type,price,stop_price,quantity
```

for example

```
AAPL,BUY,LIMIT,150.25,0,10
AAPL,sell,limit,150.00,0,4
AAPL,BUY,STOP LIMIT,151,150.5,2
```

Side is `BUY` or `SELL`. Type is `LIMIT`, `MARKET`, `STOP_LIMIT` or
`STOP_MARKET`. Each is accepted in all upper or all lower case, and the stop
types may also be written with a space in place of the underscore. An unknown
side or type, or a line with fewer than six fields, raises `ValueError`.

## Using the library

```python
from orderladder.enums import Side, OrderType
from orderladder.protocol import OrderPacket
from orderladder.order import Order
from orderladder.orderbook import OrderBook

book = OrderBook("AAPL")

buy = OrderPacket.create(1, "AAPL", Side.BUY, OrderType.LIMIT, 101.0, 0.0, 5.0, None)
sell = OrderPacket.create(2, "AAPL", Side.SELL, OrderType.LIMIT, 100.0, 0.0, 3.0, None)

book.add_order(Order.from_packet(buy))
book.add_order(Order.from_packet(sell))

book.match_once()              # returns 3.0, the quantity traded
print(book.bid_ladder(10))     # [(101.0, 2.0)]
print(book.ask_ladder(10))     # []
```

The modules:

- `orderladder.enums`: `Side` and `OrderType`, each with a `parse` class method.
- `orderladder.protocol`: `OrderPacket` with `create`, `pack` and `unpack`, plus
  `generate_order_id` and `now_millis`. `pack()` and `unpack()` convert a packet
  to and from its packed little-endian wire form, the fixed-size layout the
  server reads from the socket.
- `orderladder.order`: `Order` (with `from_packet`, `is_limit`, `is_market`,
  `is_stop`, `add_fill`) and `OrderQueue`, a FIFO queue in which an order can
  sit in only one queue at a time.
- `orderladder.price_level`: `PriceLevel`, the orders at one price with a
  running total quantity and count.
- `orderladder.orderbook`: `OrderBook`, with `add_order`, `remove_order`,
  `best_bid`, `best_ask`, `match_once`, `ask_ladder`, `bid_ladder`, `render`,
  `print_loop`, `start` and `stop`.
- `orderladder.server` and `orderladder.client`: the two commands, with
  `serve`, `receive_packets`, `parse_order_line`, `read_orders` and
  `send_orders`.

`OrderBook` is also a context manager: entering a `with` block starts its
matching thread, and leaving it stops the thread. A printing thread is started
too, but only when the book was given an output stream (`out=`); the server
passes standard output. The matching thread waits until both sides have orders,
pauses `match_delay` seconds (0.5 by default) and then calls `match_once`.

## What it does not do

- Matching is by price alone: market and stop orders are carried and reported
  by `is_market` and `is_stop`, but they rest at their given price like limit
  orders, and stop prices never trigger anything.
- The server sends nothing back to the client: no acknowledgements, fills or
  trade reports. There is no way to cancel or amend an order over the wire.
- The server takes one client and one symbol per run, and keeps nothing on
  disk; the book is gone when it exits.
- The ladder is drawn with ANSI escape codes and needs a terminal that
  understands them.