r"""
Mutable state of a single solve: the dual variables that certify optimality
and the partial matching between rows and columns.
"""

from __future__ import annotations

import dataclasses

import torch
from torch import Tensor

from ..consts import UNASSIGNED

__all__ = ["DualVariables", "AssignmentState"]


@dataclasses.dataclass
class DualVariables:
    """
    Shadow prices of the columns (``u``) and rows (``v``).

    Throughout a solve, the reduced cost :math:`c(i, j) - u_j - v_i` is
    non-negative for every processed row and zero on every assigned pair. Free
    columns and unassigned rows keep a price of zero.
    """

    u: Tensor
    v: Tensor

    @classmethod
    def zeros(cls, num_row: int, num_col: int) -> DualVariables:
        return cls(
            u=torch.zeros(num_col, dtype=torch.float64),
            v=torch.zeros(num_row, dtype=torch.float64),
        )

    def reduced_cost(self, cost_matrix: Tensor) -> Tensor:
        """
        Reduced costs of the full matrix, i.e. costs adjusted by the duals.
        """
        return cost_matrix - self.u.unsqueeze(0) - self.v.unsqueeze(1)


@dataclasses.dataclass
class AssignmentState:
    """
    Partial bijection between rows and columns. Entries that are not part of
    the matching hold :data:`UNASSIGNED`.
    """

    col4row: Tensor
    row4col: Tensor

    @classmethod
    def empty(cls, num_row: int, num_col: int) -> AssignmentState:
        return cls(
            col4row=torch.full((num_row,), UNASSIGNED, dtype=torch.long),
            row4col=torch.full((num_col,), UNASSIGNED, dtype=torch.long),
        )

    @property
    def num_assigned(self) -> int:
        return int((self.col4row != UNASSIGNED).sum().item())

    def owner(self, col: int) -> int:
        return int(self.row4col[col].item())

    def assign(self, row: int, col: int) -> None:
        self.col4row[row] = col
        self.row4col[col] = row

    def release(self, row: int) -> None:
        """
        Remove a row from the matching. Its column is expected to be taken over
        by another row in the same step.
        """
        self.col4row[row] = UNASSIGNED
