"""
VectorSetDesign: data wrapper for a finite list of vectors.

The vector-space queries all work on the matrix whose columns are the
vectors; this design validates the list once and builds that matrix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.validation import check_vector_list


@dataclass(frozen=True)
class VectorSetDesign:
    """
    Design for vector-space queries.

    Wraps n >= 1 vectors of a common dimension >= 1. Immutable after
    construction.

    Construction:
        VectorSetDesign.from_vectors([v1, v2, v3])
    """
    _vectors: tuple[NDArray[np.floating[Any]], ...]
    _name: str

    @classmethod
    def from_vectors(
        cls,
        vectors: Sequence[ArrayLike] | VectorSetDesign,
        name: str = 'vectors',
    ) -> VectorSetDesign:
        """
        Build VectorSetDesign from a sequence of 1D array-likes.

        Raises
        ------
        ValidationError
            If the list is empty or holds non-numeric / non-finite data.
        DimensionError
            If the vectors are not 1D or have different dimensions.
        """
        if isinstance(vectors, VectorSetDesign):
            return vectors
        return cls(_vectors=tuple(check_vector_list(vectors, name)), _name=name)

    @property
    def vectors(self) -> tuple[NDArray[np.floating[Any]], ...]:
        return self._vectors

    @property
    def name(self) -> str:
        return self._name

    @property
    def n(self) -> int:
        """Number of vectors."""
        return len(self._vectors)

    @property
    def dim(self) -> int:
        """Common dimension of the vectors."""
        return self._vectors[0].shape[0]

    def as_matrix(self) -> NDArray[np.floating[Any]]:
        """New (dim x n) matrix with the vectors as columns."""
        return np.column_stack(self._vectors)

    def __repr__(self) -> str:
        return f"VectorSetDesign(n={self.n}, dim={self.dim})"
