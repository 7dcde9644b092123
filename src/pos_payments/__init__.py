"""Point-of-sale payments: cash desks, payments, payment items."""

__version__ = "0.1.0"
