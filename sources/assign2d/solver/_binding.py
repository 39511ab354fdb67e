r"""
Entry points that accept cost matrices of any orientation.

The solver itself requires at least as many rows as columns. Wider matrices are
transposed before solving, after which the roles of rows and columns (and of
their dual variables) are swapped back.
"""

from __future__ import annotations

from typing import Optional, Tuple

import torch
import torch.fx
import typing_extensions as TX
from torch import Tensor

from ..errors import InfeasibleAssignmentError
from ._base import Assignment
from ._result import AssignmentResult
from ._scratch import ScratchSpace
from ._solve import shortest_path_assignment
from ._transform import CostLike, as_cost_tensor, check_cost_matrix
from ._utils import unmatched_indices

__all__ = ["ShortestPath", "assign2d"]


class ShortestPath(Assignment):
    r"""
    Solves the linear assignment over a cost matrix using the shortest
    augmenting path algorithm. See :func:`.assign2d` for details.

    The search buffers are kept on the module and reused by every call.
    """

    def __init__(
        self, threshold: Optional[float] = None, maximize: bool = False
    ) -> None:
        super().__init__(threshold=threshold, maximize=maximize)

        self.scratch = ScratchSpace()

    @TX.override
    def _assign(self, cost_matrix: Tensor) -> Tuple[Tensor, Tensor, Tensor]:
        device = cost_matrix.device

        try:
            result = assign2d(cost_matrix, self.maximize, self.scratch)
        except InfeasibleAssignmentError:
            return self._no_match(cost_matrix)

        return (
            result.matches().to(device),
            unmatched_indices(result.col4row).to(device),
            unmatched_indices(result.row4col).to(device),
        )


def assign2d(
    cost_matrix: CostLike,
    maximize: bool = False,
    scratch: ScratchSpace | None = None,
) -> AssignmentResult:
    r"""
    Solve the two-dimensional assignment problem with a rectangular cost
    matrix.

    Parameters
    ----------
    cost_matrix
        Cost matrix (MxN) without NaNs. Forbidden pairs are :math:`+\infty`
        when minimizing and :math:`-\infty` when maximizing.
    maximize
        Whether to maximize instead of minimize the total.
    scratch, optional
        Search buffers to reuse across calls.

    Returns
    -------
        Assigned column of every row and row of every column (``UNASSIGNED``
        where there is none), the total of the assigned costs and the duals of
        the columns (``u``) and rows (``v``).

    Raises
    ------
    InvalidCostMatrixError
        If the cost matrix cannot be solved as given.
    InfeasibleAssignmentError
        If every pair is forbidden.
    """
    cost = as_cost_tensor(cost_matrix)
    check_cost_matrix(cost, maximize)

    num_row, num_col = cost.shape
    if num_row >= num_col:
        return shortest_path_assignment(cost, maximize, scratch)

    return shortest_path_assignment(cost.T, maximize, scratch).transposed()


torch.fx.wrap("assign2d")
