"""
Domain services for ship assignment.

assignment_rules holds the stateless capacity checks; lock_manager provides
the serialization point that check-then-commit callers hold.
"""

from . import assignment_rules
from .lock_manager import AssignmentLockManager

__all__ = ["AssignmentLockManager", "assignment_rules"]
