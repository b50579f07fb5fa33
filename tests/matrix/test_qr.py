"""
Tests for qr().

Tests the complete pipeline: design construction, backend selection,
and solution properties.
"""

import warnings

import numpy as np
import pytest

from pymatrix.core.exceptions import InvalidOperationError, SingularMatrixError
from pymatrix.core.compute.tolerances import select_tolerance
from pymatrix.core.protocols import Backend
from pymatrix.matrix import MatrixDesign, QRSolution, qr
from pymatrix.matrix.backends import HouseholderQRBackend, LapackQRBackend


class TestQRBasic:

    def test_returns_solution(self, tall_matrix):
        result = qr(tall_matrix)
        assert isinstance(result, QRSolution)
        assert result.r.shape == (3, 2)
        assert result.qt.shape == (3, 3)
        assert result.q.shape == (3, 3)

    def test_three_by_two_scenario(self, tall_matrix):
        result = qr(tall_matrix)
        R = result.r
        assert R[1, 0] == 0.0
        assert R[2, 0] == 0.0
        assert R[2, 1] == 0.0
        np.testing.assert_allclose(result.q @ R, tall_matrix, atol=1e-10)
        np.testing.assert_allclose(result.reconstruct(), tall_matrix, atol=1e-10)

    def test_orthogonality(self, random_tall):
        result = qr(random_tall)
        np.testing.assert_allclose(result.qt @ result.q, np.eye(7), atol=1e-10)

    def test_accepts_design(self, tall_matrix):
        result = qr(MatrixDesign.from_array(tall_matrix))
        assert result.shape == (3, 2)

    def test_wide_matrix_rejected(self):
        with pytest.raises(InvalidOperationError) as exc_info:
            qr([[1, 2, 3], [4, 5, 6]])
        assert exc_info.value.shape == (2, 3)

    def test_tiny_entries_stay_finite(self, tall_matrix):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = qr(tall_matrix * 1e-170)
        assert result.rank == 2
        np.testing.assert_allclose(result.qt @ result.q, np.eye(3), atol=1e-10)


class TestQRSolve:

    def test_solve_matches_lstsq(self, random_tall, rng):
        b = rng.standard_normal(7)
        result = qr(random_tall)
        x = result.solve(b)
        expected, *_ = np.linalg.lstsq(random_tall, b, rcond=None)
        tol = select_tolerance(result.backend_name)
        np.testing.assert_allclose(x, expected, rtol=tol.rtol, atol=tol.atol)

    @pytest.mark.parametrize("backend", ["cpu_householder", "cpu_lapack"])
    def test_ill_conditioned_solve(self, backend):
        X = np.vander(np.linspace(0.0, 1.0, 25), 7, increasing=True)
        b = X @ np.ones(7)
        result = qr(X, backend=backend)
        tol = select_tolerance(result.backend_name,
                               is_ill_conditioned=np.linalg.cond(X) > 1e4)
        np.testing.assert_allclose(result.solve(b), np.ones(7), rtol=tol.rtol, atol=tol.atol)

    def test_recovers_exact_coefficients(self, rng):
        X = np.column_stack([np.ones(30), rng.standard_normal((30, 2))])
        beta = np.array([1.0, -2.0, 0.5])
        np.testing.assert_allclose(qr(X).solve(X @ beta), beta, rtol=1e-10)

    def test_rank_deficient_solve_raises(self, collinear_matrix):
        with pytest.warns(RuntimeWarning, match="rank-deficient"):
            result = qr(collinear_matrix)
        with pytest.raises(SingularMatrixError):
            result.solve(np.ones(collinear_matrix.shape[0]))


class TestQRMetadata:

    def test_backend_and_timing(self, tall_matrix):
        result = qr(tall_matrix)
        assert result.backend_name == "cpu_householder"
        assert result.info["method"] == "householder"
        assert result.info["rank"] == 2
        assert "householder" in result.timing
        assert result.timing["total_seconds"] >= 0.0

    def test_full_rank_has_no_warnings(self, random_tall):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = qr(random_tall)
        assert result.warnings == ()
        assert result.rank == 4

    def test_rank_deficient_recorded(self, collinear_matrix):
        with pytest.warns(RuntimeWarning):
            result = qr(collinear_matrix)
        assert result.rank == 2
        assert any("rank-deficient" in w for w in result.warnings)

    def test_summary_and_repr(self, tall_matrix):
        result = qr(tall_matrix)
        text = result.summary()
        assert "QR Decomposition" in text
        assert "Rank: 2" in text
        assert "cpu_householder" in text
        assert repr(result) == "QRSolution(rows=3, cols=2, rank=2)"


class TestBackendSelection:

    @pytest.mark.parametrize("choice", ["auto", "cpu", "cpu_householder"])
    def test_householder_choices(self, tall_matrix, choice):
        assert qr(tall_matrix, backend=choice).backend_name == "cpu_householder"

    def test_lapack(self, random_tall):
        result = qr(random_tall, backend="cpu_lapack")
        assert result.backend_name == "cpu_lapack"
        np.testing.assert_allclose(result.reconstruct(), random_tall, atol=1e-10)

    def test_backends_agree_on_solve(self, random_tall, rng):
        b = rng.standard_normal(7)
        householder = qr(random_tall, backend="cpu_householder")
        lapack = qr(random_tall, backend="cpu_lapack")
        tol = select_tolerance(lapack.backend_name)
        np.testing.assert_allclose(householder.solve(b), lapack.solve(b),
                                   rtol=tol.rtol, atol=tol.atol)

    def test_unknown_backend(self, tall_matrix):
        with pytest.raises(ValueError, match="Unknown backend"):
            qr(tall_matrix, backend="gpu")

    def test_backends_satisfy_protocol(self):
        assert isinstance(HouseholderQRBackend(), Backend)
        assert isinstance(LapackQRBackend(), Backend)
