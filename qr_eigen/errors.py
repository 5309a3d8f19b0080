# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by the numerical kernel.

Every error also derives from the matching builtin so callers that only
catch ``ValueError`` / ``ArithmeticError`` / ``RuntimeError`` keep working.
"""


class QREigenError(Exception):
    """Base class for all qr_eigen errors."""


class DimensionMismatchError(QREigenError, ValueError):
    """Operands have different sizes, or a matrix is not square."""


class DegenerateInputError(QREigenError, ArithmeticError):
    """A zero-norm vector had to be normalised or projected onto."""


class NoResultError(QREigenError, RuntimeError):
    """The iteration cap allowed no QR step, so there is nothing to return."""
