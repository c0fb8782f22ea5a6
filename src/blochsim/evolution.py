from __future__ import annotations

import numpy as np 
from scipy.linalg import expm

from .gates import I, dagger, require_2x2, scale

HERMITIAN_ATOL = 1e-12
UNITARY_ATOL = 1e-9


def is_hermitian(H: np.ndarray, *, atol: float = HERMITIAN_ATOL) -> bool: 
    """
    Hermiticity check relative to the largest entry of H, so operators 
    carrying a factor of hbar are judged by their shape, not their size. 
    """
    H = require_2x2(H, "H") 
    size = float(np.max(np.abs(H)))
    return float(np.max(np.abs(H - dagger(H)))) <= atol * size


def time_evolution_operator(H: np.ndarray, t: float, *, atol: float = HERMITIAN_ATOL) -> np.ndarray:

 ##  Build U = exp(-i H t); t may be negative (backward evolution)

    H = require_2x2(H, "H")
    t = float(t)

    if is_hermitian(H, atol=atol):
        w, V = np.linalg.eigh(H)
        phases = np.exp(-1j * w * t)
        return V @ np.diag(phases) @ V.conj().T

    ## non-Hermitian generator: no eigh shortcut
    return expm(scale(H, -1j * t))


def is_unitary(U: np.ndarray, *, atol: float = UNITARY_ATOL) -> bool: 
    U = require_2x2(U, "U") 
    return bool(np.allclose(U @ dagger(U), I, atol=atol))
