# pcn/matrix.py
import numpy as np

from pcn.config import BIAS_INPUT
from pcn.errors import AllocationFailure, DimensionMismatch


def as_matrix(values, name='matrix'):
    """
    View `values` as a 2-D float64 array without copying when possible.
    Anything that is not two-dimensional is a contract violation.
    """
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 2:
        raise DimensionMismatch("%s must be 2-D, got shape %s" % (name, arr.shape))
    return arr


def allocate_matrix(rows, cols):
    """Zero-filled rows x cols matrix of doubles (row-major)."""
    rows, cols = int(rows), int(cols)
    if rows <= 0 or cols <= 0:
        raise AllocationFailure("cannot allocate a %dx%d matrix" % (rows, cols))
    try:
        return np.zeros((rows, cols), dtype=float)
    except MemoryError as e:
        raise AllocationFailure("out of memory allocating a %dx%d matrix" % (rows, cols)) from e


class MatrixScope:
    """
    Owns the transient matrices of one computation.

        with MatrixScope() as scope:
            acts = scope.allocate(n, m)
            ...

    Buffers are dropped together when the block exits, so every allocation
    has exactly one release. Anything that must outlive the block has to be
    copied out of it.
    """
    def __init__(self):
        self._owned = []

    def allocate(self, rows, cols):
        m = allocate_matrix(rows, cols)
        self._owned.append(m)
        return m

    def adopt(self, matrix):
        self._owned.append(matrix)
        return matrix

    def __len__(self):
        return len(self._owned)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self._owned.clear()
        return False


def matrix_multiply(a, b, out=None):
    """
    C = A * B, i.e. C[i][j] = sum_k A[i][k] * B[k][j].
    If `out` is given it must already be A.rows x B.cols and is filled in place.
    """
    a = as_matrix(a, 'A')
    b = as_matrix(b, 'B')
    if a.shape[1] != b.shape[0]:
        raise DimensionMismatch("A is %dx%d but B is %dx%d" % (a.shape + b.shape))
    if out is None:
        out = allocate_matrix(a.shape[0], b.shape[1])
    elif out.shape != (a.shape[0], b.shape[1]):
        raise DimensionMismatch("C must be %dx%d, got %s" % (a.shape[0], b.shape[1], out.shape))
    np.matmul(a, b, out=out)
    return out


def add_bias_column(inputs, scope=None):
    """
    Copy of `inputs` (n x m) with an extra last column of BIAS_INPUT (-1),
    giving the n x (m+1) matrix the weight matrix multiplies.
    """
    inputs = as_matrix(inputs, 'inputs')
    n, m = inputs.shape
    biased = scope.allocate(n, m + 1) if scope is not None else allocate_matrix(n, m + 1)
    biased[:, :m] = inputs
    biased[:, m] = BIAS_INPUT
    return biased
