r"""
Common set-up for all tests.

Defines fixtures for cost matrices.
"""

from __future__ import annotations

import pytest
import torch


@pytest.fixture(
    params=[
        (8, 8),
        (10, 8),
        (10, 1),
        (1, 1),
    ],
    ids=(
        "cost:square",
        "cost:tall",
        "cost:column",
        "cost:single",
    ),
)
def tall_cost_matrix(request) -> torch.Tensor:
    shape = request.param
    generator = torch.Generator().manual_seed(sum(shape))
    return torch.rand(shape, dtype=torch.float64, generator=generator) * 10 - 5
