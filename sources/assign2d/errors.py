"""
Exceptions raised by the assignment solver.
"""

from __future__ import annotations

__all__ = ["AssignmentError", "InvalidCostMatrixError", "InfeasibleAssignmentError"]


class AssignmentError(Exception):
    """
    Base class for all errors raised while solving an assignment problem.
    """


class InvalidCostMatrixError(AssignmentError, ValueError):
    """
    The cost matrix cannot be solved as given, e.g. it contains NaNs, has an
    empty dimension or a finite range that overflows.
    """


class InfeasibleAssignmentError(AssignmentError, RuntimeError):
    """
    No assignment of any positive size can be formed, because every pair in
    the cost matrix is forbidden.
    """
