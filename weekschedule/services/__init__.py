"""
Service layer helpers that orchestrate configuration and domain logic.
"""

from .availability import AvailabilityService

__all__ = ["AvailabilityService"]
