"""
Row-reduction solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.result import Result

if TYPE_CHECKING:
    from pylinalg.elimination.design import MatrixDesign


@dataclass(frozen=True)
class RREFParams:
    """
    Parameter payload for row reduction.

    Attributes
    ----------
    rref : ndarray
        Reduced row-echelon form, same shape as the input.
    rank : int
        Number of rows holding a leading 1.
    pivot_columns : tuple of int
        0-based column of each leading 1, top to bottom.
    """
    rref: NDArray[np.floating[Any]]
    rank: int
    pivot_columns: tuple[int, ...]


@dataclass
class RREFSolution:
    """
    User-facing row-reduction results.

    Wraps Result[RREFParams] and provides convenient accessors.
    """
    _result: Result[RREFParams]
    _design: 'MatrixDesign'

    @property
    def rref(self) -> NDArray[np.floating[Any]]:
        """Reduced row-echelon form (m x n)."""
        return self._result.params.rref

    @property
    def rank(self) -> int:
        """Rank of the input matrix."""
        return self._result.params.rank

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        """0-based pivot column indices."""
        return self._result.params.pivot_columns

    @property
    def free_columns(self) -> tuple[int, ...]:
        """0-based indices of columns without a pivot."""
        pivots = set(self.pivot_columns)
        return tuple(j for j in range(self._design.width) if j not in pivots)

    @property
    def full_rank(self) -> bool:
        """True if rank == min(height, width)."""
        return self.rank == min(self._design.shape)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text rendering of the reduced matrix."""
        R = self.rref
        cells = [[f"{x:.6g}" for x in row] for row in R]
        width = max(len(c) for row in cells for c in row)
        lines = [f"RREF ({R.shape[0]} x {R.shape[1]}), rank {self.rank}:"]
        for row in cells:
            lines.append("  [ " + "  ".join(c.rjust(width) for c in row) + " ]")
        if self.free_columns:
            free = ", ".join(str(j + 1) for j in self.free_columns)
            lines.append(f"Free columns: {free}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        m, n = self._design.shape
        return f"RREFSolution(height={m}, width={n}, rank={self.rank})"
