r"""
Shortest augmenting path solver for the rectangular linear assignment problem.

The cost matrix must have at least as many rows as columns. Rows are added to
the matching one at a time (see :func:`.augment_row`), such that every column
is assigned whenever a full assignment of the columns exists. Rows that are
left over remain unassigned.
"""

from __future__ import annotations

import collections

import torch
import torch.fx

from ..debug import check_debug_enabled
from ..errors import InfeasibleAssignmentError, InvalidCostMatrixError
from ._result import AssignmentResult, assemble_result
from ._scratch import ScratchSpace
from ._shortest_path import RowOutcome, augment_row
from ._state import AssignmentState, DualVariables
from ._transform import CostLike, as_cost_tensor, effective_cost

__all__ = ["shortest_path_assignment"]


@torch.no_grad()
def shortest_path_assignment(
    cost_matrix: CostLike,
    maximize: bool = False,
    scratch: ScratchSpace | None = None,
) -> AssignmentResult:
    r"""
    Solve the linear assignment problem of a cost matrix with at least as many
    rows as columns.

    The cost matrix is expected to have passed :func:`.check_cost_matrix`; the
    matrix is never transposed here.

    Parameters
    ----------
    cost_matrix
        Cost matrix (MxN) with :math:`M \geq N`. Forbidden pairs are
        :math:`+\infty` (or :math:`-\infty` when maximizing).
    maximize
        Whether to maximize instead of minimize the total.
    scratch, optional
        Search buffers to reuse across calls.

    Returns
    -------
        The optimal assignment, its total and the dual variables.

    Raises
    ------
    InvalidCostMatrixError
        If the matrix is not 2D or has fewer rows than columns.
    InfeasibleAssignmentError
        If there are no columns, or no row can be assigned at all.
    """
    cost = as_cost_tensor(cost_matrix)
    if cost.ndim != 2:
        msg = f"Expected a 2D cost matrix, got {cost.ndim} dimensions!"
        raise InvalidCostMatrixError(msg)

    num_row, num_col = cost.shape
    if num_row < num_col:
        msg = (
            f"Cost matrix must have at least as many rows as columns, got "
            f"{num_row} x {num_col}. Transpose the matrix first."
        )
        raise InvalidCostMatrixError(msg)
    if num_col == 0:
        msg = "Cost matrix has no columns, no assignment can be formed!"
        raise InfeasibleAssignmentError(msg)

    if scratch is None:
        scratch = ScratchSpace(num_col)
    else:
        scratch.ensure(num_col)

    minimize_cost = effective_cost(cost, maximize)
    duals = DualVariables.zeros(num_row, num_col)
    state = AssignmentState.empty(num_row, num_col)

    debug = check_debug_enabled()
    if debug:
        goal = "maximizing" if maximize else "minimizing"
        print(f"Shortest path assignment of {num_row} x {num_col} ({goal})")

    outcomes: collections.Counter[RowOutcome] = collections.Counter()
    for row in range(num_row):
        outcome = augment_row(minimize_cost, row, duals, state, scratch)
        outcomes[outcome] += 1

        if debug and outcome is not RowOutcome.ASSIGNED:
            print(f"- row {row}: {outcome.value}")

    if debug:
        summary = ", ".join(f"{o.value}: {n}" for o, n in outcomes.items())
        print(
            f"Assignment completed with {state.num_assigned}/{num_col} columns "
            f"assigned ({summary})"
        )

    return assemble_result(cost, state, duals, maximize)


torch.fx.wrap("shortest_path_assignment")
