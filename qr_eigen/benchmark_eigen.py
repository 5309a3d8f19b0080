#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import platform
import time

import numpy as np
import pandas as pd

from qr_eigen.eigen import qr_algorithm
from qr_eigen.qr import gram_schmidt_qr, random_spectrum_matrix

REPEATS = 5  # best of 5 runs leads to stable numbers
sizes = [5, 10, 20, 40]


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def main():
    rng = np.random.default_rng(0)
    records = []
    for n in sizes:
        # well separated magnitudes, alternating signs
        lam = np.linspace(1.0, 2.0 * n, n) * np.where(np.arange(n) % 2, -1.0, 1.0)
        A = random_spectrum_matrix(lam, seed=rng.integers(1 << 31))

        # reference
        t_np = min(wall(np.linalg.eigvalsh, A) for _ in range(REPEATS))
        ref = np.linalg.eigvalsh(A)

        t_gs = min(wall(gram_schmidt_qr, A) for _ in range(REPEATS))
        Q, _R = gram_schmidt_qr(A)
        ortho = np.linalg.norm(Q.T @ Q - np.eye(n), np.inf)

        t_qr = min(wall(qr_algorithm, A) for _ in range(REPEATS))
        res = qr_algorithm(A)
        err = np.max(np.abs(np.sort(np.diag(res.matrix)) - ref))
        records.append(
            (f"{n}x{n}", res.iterations, res.converged, t_qr, t_qr / t_np, t_gs, err, ortho)
        )

    df = pd.DataFrame(
        records,
        columns=[
            "size",
            "iters",
            "converged",
            "sec",
            "sec/NumPy",
            "gs_sec",
            "max_eig_err",
            "orth_err",
        ],
    )
    print(platform.platform())
    print(df.to_string(index=False))
    df.to_csv("bench_results.csv", index=False)


if __name__ == "__main__":
    main()
