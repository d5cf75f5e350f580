"""
EigenDesign: data wrapper for the closed-form eigen solvers.

Only 2 x 2 and 3 x 3 matrices have a closed-form path here; any other
square size is rejected as unsupported rather than as malformed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import UnsupportedError
from pylinalg.core.validation import check_matrix, check_square

SUPPORTED_SIZES = (2, 3)


@dataclass(frozen=True)
class EigenDesign:
    """
    Design for eigenvalue / eigenvector / diagonalization solvers.

    Wraps a finite square matrix of size 2 or 3.

    Construction:
        EigenDesign.from_array(A)
    """
    _matrix: NDArray[np.floating[Any]]

    @classmethod
    def from_array(cls, matrix: ArrayLike, name: str = 'A') -> EigenDesign:
        """
        Build EigenDesign from a 2D array-like.

        Raises
        ------
        DimensionError
            If the matrix is not 2D or not square.
        UnsupportedError
            If the matrix is square but not 2 x 2 or 3 x 3.
        """
        arr = check_matrix(matrix, name)
        check_square(arr, name)
        n = arr.shape[0]
        if n not in SUPPORTED_SIZES:
            raise UnsupportedError(
                f"{name}: closed-form eigen solvers support 2 x 2 and 3 x 3 "
                f"matrices, got {n} x {n}"
            )
        return cls(_matrix=arr)

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        return self._matrix

    @property
    def n(self) -> int:
        """Matrix size."""
        return self._matrix.shape[0]

    def __repr__(self) -> str:
        return f"EigenDesign(n={self.n})"
