# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import List

import numpy as np

from .errors import DimensionMismatchError
from .utils import SNAP_TOL


def as_square_matrix(A, name: str = "A") -> np.ndarray:
    """
    Return a float64 copy of A, checking that it is a finite n-by-n matrix.
    """
    A = np.array(A, dtype=float, copy=True)
    if A.ndim != 2:
        raise DimensionMismatchError(f"{name} must be 2-D, got shape {A.shape}")
    m, n = A.shape
    if m != n:
        raise DimensionMismatchError(f"{name} must be square, got {m}x{n}")
    if n == 0:
        raise DimensionMismatchError(f"{name} must not be empty")
    if not np.all(np.isfinite(A)):
        raise ValueError(f"{name} contains NaN or infinite entries")
    return A


def columns_of(A: np.ndarray) -> List[np.ndarray]:
    """
    Split a square matrix into its column vectors.

    Each column is an independent copy, writing to it never touches A.
    """
    A = np.asarray(A, dtype=float)
    m, n = A.shape
    if m != n:
        raise DimensionMismatchError(f"A must be square, got {m}x{n}")
    return [A[:, j].copy() for j in range(n)]


def snap_small(A: np.ndarray, tol: float = SNAP_TOL) -> np.ndarray:
    """Zero every entry with |a_ij| < tol, in place."""
    A[np.abs(A) < tol] = 0.0
    return A
