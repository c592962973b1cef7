"""Utility functions for Snapshot Manager."""

from snapshot_manager.utils.formatting import fit_width, truncate, wrap_text

__all__ = [
    "fit_width",
    "truncate",
    "wrap_text",
]
