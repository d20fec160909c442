"""Time-flow control for tick-driven game clocks."""

__version__ = "0.1.0"
