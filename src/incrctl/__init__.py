"""incrctl: open dispatch over self-describing operands."""

__version__ = "0.1.0"
