"""TAMI exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class TamiError(Exception):
    """Base exception for all TAMI failures."""


class TamiConfigError(TamiError):
    """Raised for invalid runtime configuration."""


class TamiIngestError(TamiError):
    """Raised for transaction source parsing failures."""


class TamiValidationError(TamiError):
    """Raised when a transaction is rejected before ordering."""


class TamiComputationError(TamiError):
    """Raised when the index chain hits an undefined division."""
