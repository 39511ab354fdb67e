r"""
Tests for ``assign2d.solver._utils``.
"""

from __future__ import annotations

import torch

from assign2d import UNASSIGNED, solver


def test_col4row_to_matches():
    col4row = torch.tensor([2, UNASSIGNED, 0, 1])
    matches = solver.col4row_to_matches(col4row)

    assert matches.tolist() == [[0, 2], [2, 0], [3, 1]]
    assert matches.dtype == torch.long


def test_col4row_to_matches_empty():
    matches = solver.col4row_to_matches(torch.full((3,), UNASSIGNED))

    assert matches.shape == (0, 2)


def test_unmatched_indices():
    row4col = torch.tensor([UNASSIGNED, 3, UNASSIGNED])

    assert solver.unmatched_indices(row4col).tolist() == [0, 2]


def test_gather_total_cost():
    cost_matrix = torch.arange(9, dtype=torch.float).reshape(3, 3)
    matches = torch.tensor([[0, 2], [2, 0]])

    assert solver.gather_total_cost(cost_matrix, matches).item() == 2.0 + 6.0
