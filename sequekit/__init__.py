"""Growable sequences with ordering, search and sorted-set helpers, canonical forms under permutation groups, and a typed registry of sequences."""

__version__ = "0.1.0"
__all__ = ["combine", "ordering", "registry", "search", "sequence", "symmetries"]