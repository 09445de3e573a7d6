"""CPU scheduling simulator with round robin, priority, aging and EDF policies."""

__version__ = "0.1.0"