from __future__ import annotations

from abc import abstractmethod
from typing import Optional, Tuple

import torch

__all__ = ["Assignment"]


class Assignment(torch.nn.Module):
    """
    Solves a linear assignment problem (LAP).
    """

    threshold: Optional[float]
    maximize: bool

    def __init__(self, threshold: Optional[float] = None, maximize: bool = False):
        """
        Parameters
        ----------
        threshold, optional
            Pairs with a cost that is not below the threshold (or not above it,
            when maximizing) are never assigned.
        maximize, optional
            Whether to maximize the total instead of minimizing it.
        """
        super().__init__()

        self.threshold = threshold
        self.maximize = maximize

    def extra_repr(self) -> str:
        return f"threshold={self.threshold}, maximize={self.maximize}"

    def forward(
        self, cost_matrix: torch.Tensor
    ) -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
        """
        Solve the cost matrix

        Parameters
        ----------
        cost_matrix
            Cost matrix (MxN) to solve

        Returns
        -------
            Tuple of matches (K x 2), unmatched rows and unmatched columns
        """

        if min(cost_matrix.shape) == 0:
            return self._no_match(cost_matrix)

        return self._assign(self._gate(cost_matrix))

    def _gate(self, cost_matrix: torch.Tensor) -> torch.Tensor:
        if self.threshold is None:
            return cost_matrix
        if self.maximize:
            return torch.where(cost_matrix > self.threshold, cost_matrix, -torch.inf)
        return torch.where(cost_matrix < self.threshold, cost_matrix, torch.inf)

    @staticmethod
    def _no_match(
        cost_matrix: torch.Tensor,
    ) -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
        device = cost_matrix.device
        cs_num, ds_num = cost_matrix.shape
        return (
            torch.empty((0, 2), dtype=torch.long, device=device),
            torch.arange(cs_num, dtype=torch.long, device=device),
            torch.arange(ds_num, dtype=torch.long, device=device),
        )

    @abstractmethod
    def _assign(
        self, cost_matrix: torch.Tensor
    ) -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
        raise NotImplementedError
