"""
MatrixDesign: data wrapper for row reduction.

Wraps a matrix and provides validation and metadata for the elimination
pipeline. Follows the pylinalg Design pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.validation import check_matrix


@dataclass(frozen=True)
class MatrixDesign:
    """
    Design for row reduction.

    Wraps a non-empty, finite (m x n) matrix. The wrapped array is a
    private copy; the caller's input is never modified.

    Construction:
        MatrixDesign.from_array(A)
        MatrixDesign.from_columns([v1, v2, v3])
    """
    _matrix: NDArray[np.floating[Any]]

    @classmethod
    def from_array(cls, matrix: ArrayLike, name: str = 'A') -> MatrixDesign:
        """
        Build MatrixDesign from a 2D array-like.

        Parameters
        ----------
        matrix : array-like
            Nested sequence or numpy array of shape (m, n), m, n >= 1.
        name : str
            Parameter name used in error messages.
        """
        return cls(_matrix=check_matrix(matrix, name))

    @classmethod
    def from_columns(cls, columns, name: str = 'columns') -> MatrixDesign:
        """
        Build MatrixDesign whose columns are the given (validated) vectors.

        Parameters
        ----------
        columns : sequence of 1D arrays
            Vectors of equal dimension.
        """
        return cls.from_array(np.column_stack(columns), name=name)

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        """The wrapped (m x n) matrix."""
        return self._matrix

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._matrix.shape[0]

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._matrix.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.height, self.width)

    def __repr__(self) -> str:
        return f"MatrixDesign(height={self.height}, width={self.width})"
