"""Microprogrammed elevator controller with a condition selector and simulator."""

__version__ = "0.1.0"
__all__ = ["posdet", "condsel", "seqnet", "simulation"]