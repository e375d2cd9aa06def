"""Command that walks a queue through filling and draining."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from dslists.queue import Queue


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Fill a queue with 10..90 and drain it, printing it after each step."""
    parser = argparse.ArgumentParser(
        prog="dslists",
        description="Fill a queue and drain it, printing the queue after every step.",
    )
    parser.parse_args(argv)

    queue = Queue(0)
    queue.display()
    for value in range(10, 100, 10):
        queue.enqueue(value)
        queue.display()
    while len(queue):
        queue.dequeue()
        queue.display()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())