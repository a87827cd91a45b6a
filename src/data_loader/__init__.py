"""Data loading package for transaction edge lists."""

from .edge_loader import EdgeListLoader

__all__ = ['EdgeListLoader']
