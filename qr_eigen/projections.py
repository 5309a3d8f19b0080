#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Vector operations used by Gram-Schmidt: dot product, projection, norm
"""

import logging

import numpy as np

from .errors import DegenerateInputError, DimensionMismatchError

logger = logging.getLogger(__name__)


def _as_vector(v) -> np.ndarray:
    v = np.asarray(v, dtype=float)
    if v.ndim != 1:
        raise DimensionMismatchError(f"Expected a 1-D vector, got shape {v.shape}")
    return v


def dot(u, v, *, strict: bool = True) -> float:
    """
    Implements the scalar (dot) product between two vectors.

    Parameters
    ----------
    u, v : (n,) array_like
    strict : bool
        If False, vectors of different length give 0.0 instead of
        raising. Only meant for reproducing legacy output.
    """
    u = _as_vector(u)
    v = _as_vector(v)
    if u.shape != v.shape:
        if strict:
            raise DimensionMismatchError(
                f"Cannot take dot product of lengths {u.size} and {v.size}"
            )
        logger.warning(
            "dot(): length mismatch %d != %d, returning 0.0", u.size, v.size
        )
        return 0.0
    return float(u @ v)


def project_onto(u, v) -> np.ndarray:
    """
    Find p = (u.v / v.v) v, the orthogonal projection of u onto
    the line spanned by v.
    Returns
    -------
    p : ndarray, shape (n,)
    """
    u = _as_vector(u)
    v = _as_vector(v)
    vv = dot(v, v)
    if vv == 0.0:
        raise DegenerateInputError("Cannot project onto the zero vector")
    return (dot(u, v) / vv) * v


def norm(v) -> float:
    """Euclidean length of v."""
    v = _as_vector(v)
    return float(np.linalg.norm(v))
