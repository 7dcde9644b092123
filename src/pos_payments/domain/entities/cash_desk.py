from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CashDesk:
    """Point-of-sale terminal, identified by its number."""

    number: int
