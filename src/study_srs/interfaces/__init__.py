"""Interface contracts for study_srs.

This module exports all Protocol-based interfaces for dependency injection.
"""

from study_srs.interfaces.storage import ReviewStorageInterface

__all__ = [
    "ReviewStorageInterface",
]
