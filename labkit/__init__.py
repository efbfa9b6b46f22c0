"""Complex and rational numbers, a bit set, stacks and queues, and a command-file calculator."""

__version__ = "0.1.0"