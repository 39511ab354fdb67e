"""
This package implements the shortest augmenting path algorithm that solves a
rectangular Linear Assignment Problem (LAP), where the minimum (or maximum) total
cost must be computed over a cost-matrix.
"""

from __future__ import annotations

from ._base import *
from ._binding import *
from ._result import *
from ._scratch import *
from ._shortest_path import *
from ._solve import *
from ._state import *
from ._transform import *
from ._utils import *
