r"""
Transforms a cost matrix into the minimization problem that is solved by the
shortest path augmenter.

Maximization is folded into minimization by negating the costs, such that a
forbidden pair (:math:`-\infty` when maximizing) becomes :math:`+\infty`.
"""

from __future__ import annotations

import math
from typing import Sequence, Union

import numpy as np
import torch
from torch import Tensor

from ..errors import InvalidCostMatrixError

__all__ = ["as_cost_tensor", "check_cost_matrix", "effective_cost"]

CostLike = Union[Tensor, np.ndarray, Sequence[Sequence[float]]]


def as_cost_tensor(cost_matrix: CostLike) -> Tensor:
    """
    Read a cost matrix into a detached ``float64`` tensor on the CPU. The
    result never shares memory with the input.
    """
    if isinstance(cost_matrix, Tensor):
        cost_matrix = cost_matrix.detach().cpu()
    cost = torch.as_tensor(cost_matrix, dtype=torch.float64)
    return cost.clone(memory_format=torch.contiguous_format)


def check_cost_matrix(cost_matrix: Tensor, maximize: bool = False) -> None:
    r"""
    Reject cost matrices that cannot be solved.

    Parameters
    ----------
    cost_matrix
        Cost matrix (MxN).
    maximize
        Whether the assignment maximizes the total. Forbidden pairs are then
        marked with :math:`-\infty` instead of :math:`+\infty`.

    Raises
    ------
    InvalidCostMatrixError
        If the matrix is not 2D, has an empty dimension, contains NaNs or
        infinities of the wrong sign, or its finite range overflows.
    """
    if cost_matrix.ndim != 2:
        msg = f"Expected a 2D cost matrix, got {cost_matrix.ndim} dimensions!"
        raise InvalidCostMatrixError(msg)
    if min(cost_matrix.shape) == 0:
        msg = f"Cost matrix has an empty dimension: {tuple(cost_matrix.shape)}"
        raise InvalidCostMatrixError(msg)
    if torch.isnan(cost_matrix).any():
        msg = "Cost matrix contains NaN values!"
        raise InvalidCostMatrixError(msg)

    wrong_inf = torch.isposinf(cost_matrix) if maximize else torch.isneginf(cost_matrix)
    if wrong_inf.any():
        sign = "+" if maximize else "-"
        goal = "maximization" if maximize else "minimization"
        msg = f"Cost matrix contains {sign}inf, which is not a forbidden pair under {goal}!"
        raise InvalidCostMatrixError(msg)

    finite = cost_matrix[torch.isfinite(cost_matrix)]
    if finite.numel() == 0:
        return
    spread = finite.max().item() - finite.min().item()
    if not math.isfinite(spread):
        msg = "The range of finite values in the cost matrix overflows!"
        raise InvalidCostMatrixError(msg)


def effective_cost(cost_matrix: Tensor, maximize: bool = False) -> Tensor:
    """
    Returns the costs as a minimization problem.
    """
    if maximize:
        return -cost_matrix
    return cost_matrix
