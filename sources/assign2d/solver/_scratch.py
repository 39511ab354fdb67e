from __future__ import annotations

import math

import torch

__all__ = ["ScratchSpace"]

NO_PREDECESSOR = -1


class ScratchSpace:
    """
    Buffers used by the shortest path search of a single row. The buffers are
    allocated once per column count and reset before every search, such that
    repeated solves (e.g. when enumerating many related problems) do not
    reallocate.
    """

    def __init__(self, num_col: int = 0):
        self.shortest_dist = torch.empty(0, dtype=torch.float64)
        self.predecessor = torch.empty(0, dtype=torch.long)
        self.settled = torch.empty(0, dtype=torch.bool)

        self.ensure(num_col)

    @property
    def num_col(self) -> int:
        return self.settled.numel()

    def ensure(self, num_col: int) -> None:
        """
        Make sure the buffers fit a problem with ``num_col`` columns.
        """
        if num_col == self.num_col:
            return
        self.shortest_dist = torch.empty(num_col, dtype=torch.float64)
        self.predecessor = torch.empty(num_col, dtype=torch.long)
        self.settled = torch.empty(num_col, dtype=torch.bool)
        self.reset()

    def reset(self) -> None:
        self.shortest_dist.fill_(math.inf)
        self.predecessor.fill_(NO_PREDECESSOR)
        self.settled.fill_(False)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(num_col={self.num_col})"
