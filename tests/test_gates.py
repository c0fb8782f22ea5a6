import numpy as np

from blochsim.gates import I, X, Y, Z, PAULIS, scale, dagger


def test_paulis_square_to_identity():
    for P in (X, Y, Z):
        assert np.allclose(P @ P, I)


def test_paulis_are_hermitian_and_traceless():
    for P in PAULIS.values():
        assert np.allclose(P, dagger(P))
        assert np.isclose(np.trace(P), 0.0)


def test_xy_equals_i_z():
    assert np.allclose(X @ Y, 1j * Z)


def test_constants_are_read_only():
    try:
        X[0, 0] = 5.0
        assert False, "Expected constant matrices to be read-only"
    except ValueError:
        pass
    assert np.allclose(X, [[0, 1], [1, 0]])


def test_scale_returns_new_matrix():
    M = np.array([[1, 2], [3, 4]], dtype=complex)
    out = scale(M, 2j)

    assert np.allclose(out, [[2j, 4j], [6j, 8j]])
    assert np.allclose(M, [[1, 2], [3, 4]])
    assert out is not M
