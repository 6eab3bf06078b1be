"""TRON addresses, ABI encoding, wallet input parsing, configuration and a small command line."""

__version__ = "0.1.0"