r"""
Various utilities for working with assignment problems.
"""

from __future__ import annotations

import torch
from torch import Tensor

from ..consts import UNASSIGNED

__all__ = ["gather_total_cost", "col4row_to_matches", "unmatched_indices"]


def gather_total_cost(cost_matrix: Tensor, matches: Tensor) -> Tensor:
    """
    Gather the total cost of an assignment, which amounts to summing all the assigned
    items from the cost matrix.

    Parameters
    ----------
    cost_matrix: Tensor[M, N]
        The cost matrix.
    matches: Tensor[K, 2]
        The assignment tensor of row-column pairs.

    Returns
    -------
    Tensor[*]
        The total cost of the assignment.
    """

    return cost_matrix[matches[:, 0], matches[:, 1]].sum()


def col4row_to_matches(col4row: Tensor) -> Tensor:
    """
    Convert a per-row assignment into a tensor of row-column pairs.

    Parameters
    ----------
    col4row: Tensor[M]
        Column assigned to each row, or ``UNASSIGNED``.

    Returns
    -------
    Tensor[K, 2]
        Assigned pairs, sorted by row.
    """
    rows = torch.nonzero(col4row != UNASSIGNED).flatten()
    return torch.stack((rows, col4row[rows]), dim=1).long()


def unmatched_indices(assignment: Tensor) -> Tensor:
    """
    Indices of the entries in a ``col4row`` or ``row4col`` tensor that are not
    assigned.
    """
    return torch.nonzero(assignment == UNASSIGNED).flatten()
