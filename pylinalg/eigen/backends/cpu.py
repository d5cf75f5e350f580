"""
CPU closed-form backend for eigenvectors.

Eigenvalues come from the quadratic formula (2 x 2) or the real-cubic
solver (3 x 3); eigenvectors from the RREF of A - lambda I.
"""

from __future__ import annotations

import numpy as np

from pylinalg.core.result import Result
from pylinalg.core.exceptions import NonRealEigenvaluesError
from pylinalg.core.compute.precision import PRECISION
from pylinalg.core.compute.timing import Timer
from pylinalg.eigen.design import EigenDesign
from pylinalg.eigen.solution import EigenParams
from pylinalg.eigen._eigenvectors import (
    EigenvectorSet, eigenvectors_2x2, eigenvectors_3x3,
)


_KERNELS = {
    2: eigenvectors_2x2,
    3: eigenvectors_3x3,
}


class ClosedFormEigenBackend:
    """CPU backend for 2 x 2 and 3 x 3 eigenvectors."""

    @property
    def name(self) -> str:
        return 'cpu_closed_form'

    def solve(self, design: EigenDesign) -> Result[EigenParams]:
        """
        Compute eigenvalues and eigenvectors.

        Non-real eigenvalues are not an error here: the result carries no
        eigenvalues, zero eigenvectors and a warning. Defective matrices
        give fewer than n eigenvectors, also with a warning.
        """
        timer = Timer()
        timer.start()

        n = design.n
        warnings_list: list[str] = []
        cases: tuple[str, ...] = ()

        try:
            with timer.section('eigenvectors'):
                found: EigenvectorSet = _KERNELS[n](design.matrix)
        except NonRealEigenvaluesError as e:
            msg = f"No eigenvectors computed: {e}"
            warnings_list.append(msg)
            params = EigenParams(
                eigenvalues=np.zeros(0),
                eigenvectors=np.zeros((n, 0)),
                eigenvector_eigenvalues=np.zeros(0),
            )
        else:
            cases = found.cases
            if found.count < n:
                warnings_list.append(
                    f"Matrix is defective: {found.count} independent "
                    f"eigenvectors for dimension {n}"
                )
            vectors = (
                np.column_stack([p.vector for p in found.pairs])
                if found.pairs else np.zeros((n, 0))
            )
            params = EigenParams(
                eigenvalues=np.array(found.eigenvalues, dtype=np.float64),
                eigenvectors=vectors,
                eigenvector_eigenvalues=np.array(
                    [p.eigenvalue for p in found.pairs], dtype=np.float64
                ),
            )

        timer.stop()

        return Result(
            params=params,
            info={
                'method': 'closed_form',
                'dimension': n,
                'cases': cases,
                'precision': PRECISION,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
