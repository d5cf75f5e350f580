"""
Exception hierarchy for PyLinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Every failing operation raises one of these;
none of them returns a sentinel value in the data channel.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, e.g. a vector
    list that is empty or a basis that is not linearly independent.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a matrix is empty, not square where a square matrix is
    required, or when vectors/matrices have mismatched dimensions.
    """
    pass


class UnsupportedError(PyLinalgError):
    """
    The request is outside what the closed-form routines support.

    Raised for eigen/diagonalization requests on matrices other than
    2 x 2 or 3 x 3.
    """
    pass


class NonRealEigenvaluesError(UnsupportedError):
    """
    The characteristic polynomial has non-real roots.

    Attributes:
        dimension: Size n of the n x n matrix
        discriminant: Discriminant of the characteristic polynomial, if known
    """

    def __init__(
        self,
        message: str,
        dimension: int | None = None,
        discriminant: float | None = None,
    ):
        super().__init__(message)
        self.dimension = dimension
        self.discriminant = discriminant


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when an operation requires invertibility but the determinant
    is within PRECISION of zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: Determinant that failed the check, if computed
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically n)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.rank = rank
        self.expected_rank = expected_rank


class NotDiagonalizableError(NumericalError):
    """
    Matrix has fewer independent eigenvectors than its dimension.

    Attributes:
        eigenvalues: Eigenvalues with algebraic multiplicity
        n_eigenvectors: Sum of geometric multiplicities found
        dimension: Size n of the n x n matrix
    """

    def __init__(
        self,
        message: str,
        eigenvalues: tuple[float, ...] | None = None,
        n_eigenvectors: int | None = None,
        dimension: int | None = None,
    ):
        super().__init__(message)
        self.eigenvalues = eigenvalues
        self.n_eigenvectors = n_eigenvectors
        self.dimension = dimension
