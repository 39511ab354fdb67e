r"""
assign2d
========

This module implements a solver for the two-dimensional, rectangular linear
assignment problem.

.. math::

    \min_{x} \sum_{i, j} C_{ij} x_{ij}

Every column of an M x N cost matrix (with M >= N) is assigned to a distinct
row, such that the total cost is minimal (or maximal). The solver also returns
the dual variables that certify optimality.

Terminology
-----------

- **Reduced cost**: The cost of a pair minus the dual variables of its row and
  column. It is non-negative for all pairs and zero for assigned pairs.

- **Augmenting path**: An alternating sequence of unassigned and assigned pairs
  that starts at a new row and ends at a free column.

- **Forbidden pair**: A pair with an infinite cost, which is never assigned.
"""

from __future__ import annotations

__version__ = "1.0.0"

from . import consts, debug, errors, solver
from .consts import UNASSIGNED
from .errors import *
from .solver import *
