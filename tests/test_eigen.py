# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np
import pytest

from qr_eigen.eigen import EigenResult, eigenvalues, qr_algorithm
from qr_eigen.errors import DegenerateInputError, DimensionMismatchError, NoResultError
from qr_eigen.qr import qr_step, random_spectrum_matrix

SAMPLE = np.array(
    [
        [1, 2, 2],
        [2, 2, 2],
        [2, 2, 3],
    ],
    dtype=float,
)
# roots of lambda^3 - 6 lambda^2 - lambda + 2
SAMPLE_EIGS = np.array([-0.62981327, 0.51972120, 6.11009207])


def test_sample_matrix_coarse_accuracy():
    res = qr_algorithm(SAMPLE, accuracy=0.1, max_iterations=1000)
    assert isinstance(res, EigenResult)
    assert res.converged
    assert res.iterations < 1000

    eigs = np.sort(np.diag(res.matrix))
    np.testing.assert_allclose(eigs, SAMPLE_EIGS, atol=1e-2)
    assert round(eigs.max(), 4) == 6.1101


def test_sample_matrix_tight_accuracy():
    res = qr_algorithm(SAMPLE, accuracy=1e-10, max_iterations=1000)
    assert res.converged
    eigs = np.sort(np.diag(res.matrix))
    np.testing.assert_allclose(eigs, np.linalg.eigvalsh(SAMPLE), atol=1e-8)
    assert round(eigs.min(), 4) == -0.6298
    assert round(eigs.max(), 4) == 6.1101


def test_result_is_similarity_transform():
    res = qr_algorithm(SAMPLE, accuracy=1e-10)
    # trace and orthogonality are preserved along the way
    assert np.isclose(np.trace(res.matrix), np.trace(SAMPLE))
    Q = res.orthogonal
    assert np.allclose(Q.T @ Q, np.eye(3), atol=1e-10)


def test_identity_converges_immediately():
    n = 4
    res = qr_algorithm(np.eye(n), accuracy=1e-12)
    assert res.converged
    # the first step only seeds the accumulator, the first check passes
    assert res.iterations == 2
    np.testing.assert_array_equal(np.diag(res.matrix), np.ones(n))
    np.testing.assert_array_equal(res.orthogonal, np.eye(n))


def test_diagonal_keeps_order_and_sign():
    A = np.diag([3.0, -2.0, 1.0])
    np.testing.assert_array_equal(eigenvalues(A), [3.0, -2.0, 1.0])


def test_one_by_one():
    np.testing.assert_array_equal(eigenvalues([[5.0]]), [5.0])
    np.testing.assert_array_equal(eigenvalues([[-3.0]]), [-3.0])


def test_random_spectrum():
    lam = np.array([9.0, -6.0, 4.0, -2.5, 1.0])
    for seed in range(5):
        A = random_spectrum_matrix(lam, seed=seed)
        res = qr_algorithm(A, accuracy=1e-10, max_iterations=2000)
        assert res.converged
        np.testing.assert_allclose(
            np.sort(np.diag(res.matrix)), np.sort(lam), atol=1e-8
        )


@pytest.mark.parametrize("accuracy", [0.1, 1e-6])
def test_converged_result_is_stable(accuracy):
    res = qr_algorithm(SAMPLE, accuracy=accuracy)
    assert res.converged
    recombined, Q = qr_step(res.matrix)
    again = recombined @ Q
    assert np.max(np.abs(np.diag(again) - np.diag(res.matrix))) <= accuracy


def test_small_scale_matrix():
    A = np.array([[2.0, 1.0], [1.0, 3.0]])
    res = qr_algorithm(1e-13 * A)
    assert res.converged
    eigs = np.sort(np.diag(res.matrix)) / 1e-13
    # entries under the 1e-14 snap are zeroed, so only loose agreement
    np.testing.assert_allclose(eigs, np.linalg.eigvalsh(A), rtol=1e-2)


def test_tiny_eigenvalue():
    np.testing.assert_array_equal(eigenvalues(np.diag([1.0, 5e-13])), [1.0, 5e-13])


def test_zero_iterations_raises():
    with pytest.raises(NoResultError):
        qr_algorithm(SAMPLE, accuracy=0.1, max_iterations=0)
    with pytest.raises(RuntimeError):
        qr_algorithm(SAMPLE, accuracy=0.1, max_iterations=-3)


@pytest.mark.parametrize("accuracy", [0.0, -1.0, float("nan")])
def test_bad_accuracy_raises(accuracy):
    with pytest.raises(ValueError):
        qr_algorithm(SAMPLE, accuracy=accuracy)


def test_non_square_raises():
    with pytest.raises(DimensionMismatchError):
        qr_algorithm(np.ones((2, 3)))


def test_zero_column_raises():
    A = np.array([[1.0, 0.0], [2.0, 0.0]])
    with pytest.raises(DegenerateInputError):
        qr_algorithm(A)


def test_complex_spectrum_exhausts(caplog):
    # 90 degree rotation, eigenvalues +-i
    A = np.array([[0.0, -1.0], [1.0, 0.0]])
    with caplog.at_level(logging.WARNING, logger="qr_eigen.eigen"):
        res = qr_algorithm(A, accuracy=0.1, max_iterations=50)
    assert not res.converged
    assert res.iterations == 50
    assert "no convergence" in caplog.text


def test_single_iteration_is_not_converged():
    res = qr_algorithm(SAMPLE, accuracy=0.1, max_iterations=1)
    assert not res.converged
    assert res.iterations == 1
    Q = res.orthogonal
    assert np.allclose(Q.T @ Q, np.eye(3), atol=1e-10)


def test_history():
    res = qr_algorithm(SAMPLE, accuracy=1e-6, return_history=True)
    assert res.history.shape == (res.iterations - 1,)
    assert res.history[-1] <= 1e-6
    assert np.all(res.history[:-1] > 1e-6)

    assert qr_algorithm(SAMPLE, accuracy=1e-6).history is None


def test_input_not_mutated():
    A = SAMPLE.copy()
    qr_algorithm(A, accuracy=1e-8)
    np.testing.assert_array_equal(A, SAMPLE)
