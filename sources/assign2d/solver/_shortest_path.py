r"""
Shortest augmenting path step of the assignment algorithm.

Every row is added to the matching with a single label-setting search over the
reduced costs :math:`c(i, j) - u_j - v_i`, which are non-negative for every row
processed so far. The search starts at the new row and settles columns in
order of increasing distance. Reaching a free column yields an augmenting
path, which grows the matching by one. When no free column is reachable, the
row may instead take over the column of an already assigned row, if that
lowers the total cost; the row that loses its column becomes unassigned. This
is the rectangular case, where there are more rows than columns.

After the search, the dual variables are shifted by the settled distances such
that the reduced costs stay non-negative and are zero on every assigned pair.
"""

from __future__ import annotations

import enum
import math

import torch
from torch import Tensor

from ..consts import UNASSIGNED
from ._scratch import NO_PREDECESSOR, ScratchSpace
from ._state import AssignmentState, DualVariables

__all__ = ["RowOutcome", "augment_row"]


class RowOutcome(enum.Enum):
    """
    Result of adding a single row to the matching.
    """

    ASSIGNED = "assigned"
    EXCHANGED = "exchanged"
    UNASSIGNED = "unassigned"
    UNASSIGNABLE = "unassignable"


@torch.no_grad()
def augment_row(
    cost_matrix: Tensor,
    row: int,
    duals: DualVariables,
    state: AssignmentState,
    scratch: ScratchSpace,
) -> RowOutcome:
    r"""
    Add a row to the matching.

    Parameters
    ----------
    cost_matrix
        Minimization cost matrix (MxN), forbidden pairs are :math:`+\infty`.
    row
        Index of the row that is added. The row must not be assigned yet.
    duals
        Dual variables, updated in-place.
    state
        Current matching, updated in-place.
    scratch
        Search buffers, reset before use.

    Returns
    -------
        How the row ended up in (or out of) the matching.
    """
    scratch.reset()
    scratch.shortest_dist.copy_(cost_matrix[row] - duals.u - duals.v[row])

    terminus = _search(cost_matrix, duals, state, scratch)
    if terminus is not None:
        limit = scratch.shortest_dist[terminus].item()
        _update_duals(limit, row, duals, state, scratch)
        _flip(terminus, row, state, scratch)
        return RowOutcome.ASSIGNED

    if not scratch.settled.any():
        return RowOutcome.UNASSIGNABLE

    col, change = _best_exchange(row, duals, state, scratch)
    if change < 0.0:
        loser = state.owner(col)
        limit = scratch.shortest_dist[col].item() - min(duals.v[loser].item(), 0.0)
        _update_duals(limit, row, duals, state, scratch)
        state.release(loser)
        _flip(col, row, state, scratch)
        duals.v[loser] = 0.0
        return RowOutcome.EXCHANGED

    # The row stays out, its own dual returns to zero
    _update_duals(-duals.v[row].item(), row, duals, state, scratch)
    return RowOutcome.UNASSIGNED


def _search(
    cost_matrix: Tensor,
    duals: DualVariables,
    state: AssignmentState,
    scratch: ScratchSpace,
) -> int | None:
    """
    Settle columns until a free column is found, which is returned. Returns
    ``None`` when every reachable column has been settled without finding a
    free one.
    """
    dist = scratch.shortest_dist
    settled = scratch.settled

    while True:
        candidates = dist.masked_fill(settled, math.inf)
        col = int(torch.argmin(candidates).item())
        if not math.isfinite(candidates[col].item()):
            return None

        settled[col] = True
        owner = state.owner(col)
        if owner == UNASSIGNED:
            return col

        # Relax the unsettled columns through the row that owns this column
        through = dist[col] + cost_matrix[owner] - duals.u - duals.v[owner]
        shorter = (through < dist) & ~settled
        dist[shorter] = through[shorter]
        scratch.predecessor[shorter] = col


def _best_exchange(
    row: int,
    duals: DualVariables,
    state: AssignmentState,
    scratch: ScratchSpace,
) -> tuple[int, float]:
    """
    Find the settled column whose owner is cheapest to displace. Returns the
    column and the change of the total cost if the row takes it over.
    """
    cols = torch.nonzero(scratch.settled).flatten()
    owners = state.row4col[cols]
    change = scratch.shortest_dist[cols] + duals.v[row] - duals.v[owners]
    best = int(torch.argmin(change).item())

    return int(cols[best].item()), change[best].item()


def _update_duals(
    limit: float,
    row: int,
    duals: DualVariables,
    state: AssignmentState,
    scratch: ScratchSpace,
) -> None:
    """
    Shift the duals of every column settled within ``limit`` and of the rows
    that own them, before the matching is flipped.
    """
    dist = scratch.shortest_dist
    cols = torch.nonzero(scratch.settled & (dist <= limit)).flatten()
    if cols.numel() > 0:
        delta = dist[cols] - limit
        duals.u.index_add_(0, cols, delta)

        owners = state.row4col[cols]
        owned = owners != UNASSIGNED
        duals.v.index_add_(0, owners[owned], -delta[owned])

    duals.v[row] += limit


def _flip(
    terminus: int,
    row: int,
    state: AssignmentState,
    scratch: ScratchSpace,
) -> None:
    """
    Walk the alternating path back from ``terminus``. Every column on the path
    is handed to the row that owned its predecessor, and the first column is
    given to ``row``.
    """
    col = terminus
    while True:
        prev = int(scratch.predecessor[col].item())
        if prev == NO_PREDECESSOR:
            state.assign(row, col)
            return
        state.assign(state.owner(prev), col)
        col = prev
