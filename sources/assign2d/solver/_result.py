r"""
Assembles the outcome of a solve into an immutable result.
"""

from __future__ import annotations

from typing import NamedTuple

from torch import Tensor

from ..consts import UNASSIGNED
from ..errors import InfeasibleAssignmentError
from ._state import AssignmentState, DualVariables
from ._utils import col4row_to_matches

__all__ = ["AssignmentResult", "assemble_result"]


class AssignmentResult(NamedTuple):
    """
    Solution of a linear assignment problem.

    Attributes
    ----------
    col4row: Tensor[M]
        Column assigned to each row, or ``UNASSIGNED``.
    row4col: Tensor[N]
        Row assigned to each column, or ``UNASSIGNED``.
    gain
        Sum of the costs of all assigned pairs.
    u: Tensor[N]
        Dual variables of the columns.
    v: Tensor[M]
        Dual variables of the rows.
    """

    col4row: Tensor
    row4col: Tensor
    gain: float
    u: Tensor
    v: Tensor

    @property
    def num_assigned(self) -> int:
        return int((self.col4row != UNASSIGNED).sum().item())

    def matches(self) -> Tensor:
        """
        Assigned row-column pairs (Kx2), sorted by row.
        """
        return col4row_to_matches(self.col4row)

    def transposed(self) -> AssignmentResult:
        """
        The same solution, read as the solution of the transposed cost matrix.
        """
        return AssignmentResult(
            col4row=self.row4col,
            row4col=self.col4row,
            gain=self.gain,
            u=self.v,
            v=self.u,
        )


def assemble_result(
    cost_matrix: Tensor,
    state: AssignmentState,
    duals: DualVariables,
    maximize: bool = False,
) -> AssignmentResult:
    """
    Package the final matching and duals.

    Parameters
    ----------
    cost_matrix
        The cost matrix as given by the caller, i.e. not negated when
        maximizing.
    state
        Final matching.
    duals
        Final dual variables of the minimization problem. These are negated
        when maximizing, such that they certify the caller's objective.
    maximize
        Whether the solve maximized the total.

    Raises
    ------
    InfeasibleAssignmentError
        If no row could be assigned.
    """
    rows = (state.col4row != UNASSIGNED).nonzero().flatten()
    if rows.numel() == 0:
        msg = "No assignment can be formed, all pairs in the cost matrix are forbidden!"
        raise InfeasibleAssignmentError(msg)

    gain = cost_matrix[rows, state.col4row[rows]].sum().item()
    if maximize:
        u, v = duals.u.neg(), duals.v.neg()
    else:
        u, v = duals.u.clone(), duals.v.clone()

    return AssignmentResult(
        col4row=state.col4row.clone(),
        row4col=state.row4col.clone(),
        gain=gain,
        u=u,
        v=v,
    )
