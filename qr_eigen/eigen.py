# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import NamedTuple, Optional

import numpy as np

from .errors import NoResultError
from .matrix_functions import as_square_matrix
from .qr import qr_step
from .utils import DEFAULT_ACCURACY, DEFAULT_MAX_ITERATIONS

logger = logging.getLogger(__name__)


class EigenResult(NamedTuple):
    orthogonal: np.ndarray
    matrix: np.ndarray
    iterations: int
    converged: bool
    history: Optional[np.ndarray] = None


def qr_algorithm(
    A: np.ndarray,
    accuracy: float = DEFAULT_ACCURACY,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    return_history: bool = False,
) -> EigenResult:
    """
    Drive the unshifted QR algorithm on a real square matrix.

    Each step factors A_k = Q_k R_k, forms A_{k+1} = R_k Q_k (a similarity
    transform, so the spectrum is unchanged) and accumulates
    Q_acc <- Q_k Q_acc. Iteration stops once no entry of |Q_acc| moves
    by more than `accuracy`, or when `max_iterations` is reached.

    Parameters
    ----------
    A : (n,n) array_like
        Real square matrix. Only real spectra converge.
    accuracy : float
        Largest allowed entrywise change in |Q_acc| between two steps.
    max_iterations : int
        Maximum number of QR steps.
    return_history : bool
        If True, `history` holds the largest entrywise change measured at
        each convergence check.

    Returns
    -------
    EigenResult
        `matrix` tends to upper-triangular, its diagonal approximates
        the eigenvalues. `converged` is False when the cap was hit first;
        that is a weaker result, not an error.

    Raises
    ------
    NoResultError
        If max_iterations <= 0, no step ran and there is no matrix.
    """
    A = as_square_matrix(A)
    if not accuracy > 0:
        raise ValueError(f"accuracy must be positive, got {accuracy}")
    if max_iterations <= 0:
        raise NoResultError(
            f"max_iterations={max_iterations}: no QR step was performed"
        )

    # fixed buffers for the whole run: working matrix, accumulator, scratch
    n = A.shape[0]
    work = A
    acc = np.empty((n, n))
    scratch = np.empty((n, n))

    hist = []
    converged = False
    for iters in range(1, max_iterations + 1):
        R, Q = qr_step(work)
        np.matmul(R, Q, out=work)

        if iters == 1:
            # nothing to compare against yet
            acc[...] = Q
            continue

        np.matmul(Q, acc, out=scratch)
        delta = np.abs(np.abs(scratch) - np.abs(acc))
        hist.append(float(delta.max()))
        acc, scratch = scratch, acc

        # NaN compares False, so it never counts as converged
        if np.all(delta <= accuracy):
            converged = True
            break

    if converged:
        logger.debug("qr_algorithm(): converged after %d iterations", iters)
    else:
        logger.warning(
            "qr_algorithm(): no convergence after %d iterations (accuracy=%g)",
            iters,
            accuracy,
        )

    return EigenResult(
        orthogonal=acc.copy(),
        matrix=work.copy(),
        iterations=iters,
        converged=converged,
        history=np.array(hist) if return_history else None,
    )


def eigenvalues(
    A: np.ndarray,
    accuracy: float = DEFAULT_ACCURACY,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> np.ndarray:
    """Diagonal of the final QR-algorithm matrix (unsorted)."""
    result = qr_algorithm(A, accuracy=accuracy, max_iterations=max_iterations)
    return np.diag(result.matrix).copy()
