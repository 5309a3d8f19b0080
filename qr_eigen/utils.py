# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

EPS: float = 1e-12

# Entries of Q.T @ A below this magnitude are floating-point noise.
SNAP_TOL: float = 1e-14

DEFAULT_ACCURACY: float = 1e-10
DEFAULT_MAX_ITERATIONS: int = 1000

