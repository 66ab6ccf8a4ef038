"""Stock tracker backend: transactions in, holdings out."""

__version__ = "0.1.0"
