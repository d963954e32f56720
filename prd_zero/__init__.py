"""prd-zero - MVP planning wizard for solo developers."""

__version__ = "0.1.0"
