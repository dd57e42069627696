"""
Interfaces for the vista_dates data model.
"""

from .i_clock import IClock

__all__ = ["IClock"]
