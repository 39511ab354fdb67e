from __future__ import annotations

from typing import Final

UNASSIGNED: Final = -1
ENV_DEBUG: Final = "ASSIGN2D_DEBUG"
