"""
Eigen solution types.

Contains the parameter payloads and user-facing solution wrappers for
eigenvectors() and diagonalize().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.result import Result

if TYPE_CHECKING:
    from pylinalg.eigen.design import EigenDesign


def _format_vector(v: NDArray[np.floating[Any]]) -> str:
    return "(" + ", ".join(f"{x:.6g}" for x in v) + ")"


def _format_matrix(name: str, M: NDArray[np.floating[Any]]) -> list[str]:
    cells = [[f"{x:.6g}" for x in row] for row in M]
    width = max(len(c) for row in cells for c in row)
    lines = [f"{name} ="]
    for row in cells:
        lines.append("  [ " + "  ".join(c.rjust(width) for c in row) + " ]")
    return lines


@dataclass(frozen=True)
class EigenParams:
    """
    Parameter payload for eigenvectors().

    Attributes
    ----------
    eigenvalues : ndarray, shape (n,)
        All eigenvalues with algebraic multiplicity, in solver order.
        Empty when the eigenvalues are non-real.
    eigenvectors : ndarray, shape (n, k)
        One eigenvector per column. k is the number found (0..n).
    eigenvector_eigenvalues : ndarray, shape (k,)
        Eigenvalue belonging to each column of eigenvectors.
    """
    eigenvalues: NDArray[np.floating[Any]]
    eigenvectors: NDArray[np.floating[Any]]
    eigenvector_eigenvalues: NDArray[np.floating[Any]]


@dataclass
class EigenSolution:
    """
    User-facing eigenvector results.

    Wraps Result[EigenParams] and provides convenient accessors.
    """
    _result: Result[EigenParams]
    _design: 'EigenDesign'

    @property
    def eigenvalues(self) -> NDArray[np.floating[Any]]:
        return self._result.params.eigenvalues

    @property
    def eigenvectors(self) -> NDArray[np.floating[Any]]:
        """Eigenvectors as columns, shape (n, count)."""
        return self._result.params.eigenvectors

    @property
    def eigenvector_eigenvalues(self) -> NDArray[np.floating[Any]]:
        return self._result.params.eigenvector_eigenvalues

    @property
    def count(self) -> int:
        """Number of independent eigenvectors found."""
        return self._result.params.eigenvectors.shape[1]

    @property
    def diagonalizable(self) -> bool:
        return self.count == self._design.n

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
        """Eigenvalues and eigenvectors as text."""
        n = self._design.n
        lines = [f"Eigenvectors of {n} x {n} matrix: {self.count} found"]
        if self.eigenvalues.size:
            values = ", ".join(f"{x:.6g}" for x in self.eigenvalues)
            lines.append(f"Eigenvalues: {values}")
        for j in range(self.count):
            lam = self.eigenvector_eigenvalues[j]
            lines.append(f"  lambda = {lam:.6g}: {_format_vector(self.eigenvectors[:, j])}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"EigenSolution(n={self._design.n}, count={self.count})"


@dataclass(frozen=True)
class DiagonalizationParams:
    """
    Parameter payload for diagonalize().

    A = P @ D @ P_inv, with the eigenvectors as the columns of P and the
    matching eigenvalues on the diagonal of D.
    """
    P: NDArray[np.floating[Any]]
    D: NDArray[np.floating[Any]]
    P_inv: NDArray[np.floating[Any]]


@dataclass
class DiagonalizationSolution:
    """
    User-facing diagonalization results.

    Wraps Result[DiagonalizationParams] and provides convenient accessors.
    """
    _result: Result[DiagonalizationParams]
    _design: 'EigenDesign'

    @property
    def P(self) -> NDArray[np.floating[Any]]:
        """Eigenvector matrix."""
        return self._result.params.P

    @property
    def D(self) -> NDArray[np.floating[Any]]:
        """Diagonal eigenvalue matrix."""
        return self._result.params.D

    @property
    def P_inv(self) -> NDArray[np.floating[Any]]:
        return self._result.params.P_inv

    @property
    def eigenvalues(self) -> NDArray[np.floating[Any]]:
        """Diagonal of D."""
        return np.diag(self.D).copy()

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

    def reconstruct(self) -> NDArray[np.floating[Any]]:
        """P @ D @ P_inv; equals the input matrix up to rounding."""
        return self.P @ self.D @ self.P_inv

    def summary(self) -> str:
        lines: list[str] = []
        for name, M in (('P', self.P), ('D', self.D), ('P^-1', self.P_inv)):
            lines.extend(_format_matrix(name, M))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DiagonalizationSolution(n={self._design.n})"
