r"""
Tests for ``assign2d.solver._transform``.
"""

from __future__ import annotations

import math

import numpy as np
import pytest
import torch

from assign2d import InvalidCostMatrixError, solver


def test_effective_cost_minimize():
    cost = torch.tensor([[1.0, math.inf], [-2.0, 3.0]], dtype=torch.float64)

    assert torch.equal(solver.effective_cost(cost), cost)


def test_effective_cost_maximize():
    cost = torch.tensor([[1.0, -math.inf], [-2.0, 3.0]], dtype=torch.float64)
    effective = solver.effective_cost(cost, maximize=True)

    assert effective[0, 1].item() == math.inf
    expected = torch.tensor([-1.0, 2.0, -3.0], dtype=torch.float64)
    assert torch.equal(effective[torch.isfinite(effective)], expected)


@pytest.mark.parametrize(
    "cost_matrix",
    [
        torch.tensor([[1, 2], [3, 4]], dtype=torch.int32),
        np.arange(6, dtype=np.float32).reshape(3, 2),
        [[1.0, 2.0], [3.0, 4.0]],
    ],
    ids=("tensor:int", "numpy", "list"),
)
def test_as_cost_tensor(cost_matrix):
    cost = solver.as_cost_tensor(cost_matrix)

    assert cost.dtype == torch.float64
    assert cost.device.type == "cpu"
    assert cost.is_contiguous()


def test_as_cost_tensor_copies():
    source = torch.zeros(2, 2, dtype=torch.float64)
    cost = solver.as_cost_tensor(source.T)
    cost[0, 0] = 1.0

    assert source[0, 0].item() == 0.0


@pytest.mark.parametrize(
    ["cost_matrix", "maximize"],
    [
        (torch.zeros(3), False),
        (torch.zeros((0, 2)), False),
        (torch.tensor([[1.0, math.nan]]), False),
        (torch.tensor([[1.0, -math.inf]]), False),
        (torch.tensor([[1.0, math.inf]]), True),
        (torch.tensor([[-1e308, 1e308]], dtype=torch.float64), False),
    ],
    ids=("1d", "empty", "nan", "neginf:minimize", "posinf:maximize", "overflow"),
)
def test_check_cost_matrix_rejects(cost_matrix, maximize):
    with pytest.raises(InvalidCostMatrixError):
        solver.check_cost_matrix(cost_matrix, maximize)


@pytest.mark.parametrize(
    ["cost_matrix", "maximize"],
    [
        (torch.tensor([[1.0, math.inf]]), False),
        (torch.tensor([[1.0, -math.inf]]), True),
        (torch.full((2, 2), math.inf), False),
    ],
    ids=("forbidden:minimize", "forbidden:maximize", "all-forbidden"),
)
def test_check_cost_matrix_accepts(cost_matrix, maximize):
    solver.check_cost_matrix(cost_matrix, maximize)


def test_invalid_cost_is_value_error():
    with pytest.raises(ValueError):
        solver.check_cost_matrix(torch.tensor([[math.nan]]))
