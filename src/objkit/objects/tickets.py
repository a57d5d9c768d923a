"""Box-office change-making simulation."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from objkit.config import ObjkitConfig

__all__ = ["sell_tickets"]

log = logging.getLogger(__name__)


def _give_change(till: dict[int, int], amount: int) -> bool:
    """Pay *amount* out of *till*, largest bills first.

    The till is only updated when the full amount can be paid.
    """
    taken: dict[int, int] = {}
    remaining = amount
    for bill in sorted(till, reverse=True):
        if remaining <= 0:
            break
        count = min(till[bill], remaining // bill)
        if count:
            taken[bill] = count
            remaining -= count * bill
    if remaining:
        return False
    for bill, count in taken.items():
        till[bill] -= count
    return True


def sell_tickets(queue: Iterable[int], config: ObjkitConfig | None = None) -> bool:
    """Sell one ticket per customer, strictly in queue order.

    The seller starts with an empty till and keeps every bill received.
    Returns False as soon as a customer cannot be given exact change.

    >>> sell_tickets([25, 25, 50])
    True
    >>> sell_tickets([25, 100])
    False
    """
    config = config or ObjkitConfig()
    till: dict[int, int] = {bill: 0 for bill in config.denominations}

    for position, bill in enumerate(queue):
        if bill not in till:
            log.warning("Skipping unsupported bill %s at position %d", bill, position)
            continue
        change = bill - config.ticket_price
        if change < 0 or not _give_change(till, change):
            log.debug("No change for bill %s at position %d", bill, position)
            return False
        till[bill] += 1
    return True
