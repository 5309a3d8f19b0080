# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
qr_eigen
========

Eigenvalues of a real square matrix by the unshifted QR algorithm,
built on classical Gram-Schmidt.

Public API
~~~~~~~~~~
- Vector operations
    - `dot`, `project_onto`, `norm`
- Matrix utilities
    - `columns_of`
- Decompositions
    - `gram_schmidt_qr`, `qr_step`
- Iterative methods
    - `qr_algorithm`, `eigenvalues`
- Errors
    - `DimensionMismatchError`, `DegenerateInputError`, `NoResultError`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import numpy as np, qr_eigen as qe
>>> A = np.array([[2.0, 1.0], [1.0, 3.0]])
>>> res = qe.qr_algorithm(A, accuracy=1e-12)
>>> np.allclose(np.sort(np.diag(res.matrix)), np.linalg.eigvalsh(A))
True
"""

from importlib.metadata import version as _pkg_version

from .eigen import EigenResult, eigenvalues, qr_algorithm
from .errors import (
    DegenerateInputError,
    DimensionMismatchError,
    NoResultError,
    QREigenError,
)
from .matrix_functions import columns_of
from .projections import dot, norm, project_onto

# ---------------------------------------------------------------------
# Re-export the high-level functions users are expected to call.
# Each of these names is implemented in one of the internal sub-modules.
# ---------------------------------------------------------------------
from .qr import QRPair, gram_schmidt_qr, qr_step

__all__ = [
    "dot",
    "project_onto",
    "norm",
    "columns_of",
    "gram_schmidt_qr",
    "qr_step",
    "QRPair",
    "qr_algorithm",
    "eigenvalues",
    "EigenResult",
    "QREigenError",
    "DimensionMismatchError",
    "DegenerateInputError",
    "NoResultError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show qr-eigen”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version("qr-eigen")
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see warnings
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
