# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import NamedTuple, Tuple

import numpy as np

from .errors import DegenerateInputError
from .matrix_functions import as_square_matrix, columns_of, snap_small
from .projections import dot, norm, project_onto
from .utils import EPS

logger = logging.getLogger(__name__)


class QRPair(NamedTuple):
    """
    One QR step of A.

    recombined : Q.T @ A with noise snapped to zero (the R factor)
    orthogonal : Q, orthonormal columns
    """

    recombined: np.ndarray
    orthogonal: np.ndarray


def _classical_gs(A: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    n = A.shape[0]
    columns = columns_of(A)
    Q = np.zeros_like(A)
    R = np.zeros((n, n))
    basis = []

    for i, a in enumerate(columns):
        # classical: project the original column, not the running residual
        u = a.copy()
        for e in basis:
            u -= project_onto(a, e)
        length = norm(u)
        # cutoff is relative to the column norm, not the matrix scale
        tol = EPS * norm(a)
        if length == 0.0 or length <= tol:
            logger.debug("column %d has residual norm %.3e <= %.3e", i, length, tol)
            raise DegenerateInputError(
                f"Column {i} is linearly dependent on the previous columns"
            )
        e = u / length
        basis.append(e)
        Q[:, i] = e

    for i, a in enumerate(columns):
        for j in range(i + 1):
            R[j, i] = dot(basis[j], a)
    return Q, R


def gram_schmidt_qr(A, reorth: bool = False) -> Tuple[np.ndarray, np.ndarray]:
    """
    Classical Gram-Schmidt orthogonalization (QR decomposition)
    Parameters:
    A : ndarray
        Full column rank square input matrix.
    reorth : bool
        Run a second Gram-Schmidt pass over Q to recover orthogonality
    Returns:
    Q : ndarray
        Orthogonal matrix, column i is the i-th basis vector e_i
    R : ndarray
        Upper-triangular matrix with R[j, i] = e_j . a_i, exact zeros
        below the diagonal
    Raises:
    DegenerateInputError
        If a column has (numerically) zero residual norm.
    """
    A = as_square_matrix(A)
    Q, R = _classical_gs(A)
    if reorth:
        Q, R2 = _classical_gs(Q)
        # A = Q1 R1 = Q2 R2 R1
        R = R2 @ R
    return Q, R


def qr_step(A) -> QRPair:
    """
    Factor A for one step of the QR algorithm.

    The triangular factor is re-derived as Q.T @ A rather than taken
    from Gram-Schmidt, so that orthogonal @ recombined reproduces A
    with the same Q used for the next similarity transform.

    Returns
    -------
    QRPair(recombined, orthogonal), in that order
    """
    A = as_square_matrix(A)
    Q, _R = gram_schmidt_qr(A)
    recombined = snap_small(Q.T @ A)
    return QRPair(recombined, Q)


def random_spectrum_matrix(eigenvalues, seed=None) -> np.ndarray:
    """
    Symmetric matrix with a prescribed spectrum, S = Q diag(lambda) Q^T

    Q comes from the Gram-Schmidt QR of a random normal matrix.

    Returns
    -------
    Matrix with float64 dtype
    """
    lam = np.asarray(eigenvalues, dtype=float).ravel()
    n = lam.size
    rng = np.random.default_rng(seed)
    Q, _R = gram_schmidt_qr(rng.standard_normal((n, n)), reorth=True)
    S = (Q * lam) @ Q.T  # broadcast lambda into columns
    return np.asarray((S + S.T) / 2.0)
