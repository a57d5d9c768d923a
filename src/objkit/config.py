from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjkitConfig:
    ticket_price: int = 25
    denominations: tuple[int, ...] = (25, 50, 100)  # bills the box office accepts
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if any(bill <= 0 for bill in self.denominations):
            raise ValueError(
                f"Denominations must be positive, got {self.denominations!r}"
            )
