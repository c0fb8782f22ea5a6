import numpy as np

from .gates import X, Y, Z, scale

## reduced Planck constant (J s)
HBAR = 1.0545718e-34


class Hamiltonian: 
    """
    Spin-1/2 Hamiltonian along a unit direction:

        H = (hbar/2) (wx X + wy Y + wz Z)

    with wx = cos(theta) sin(phi), wy = sin(theta) sin(phi), wz = cos(phi).
    Only the resulting operator is kept; the angles are not stored.
    """
    __slots__ = ("_operator",)

    def __init__(self, theta: float, phi: float):
        theta = float(theta)
        phi = float(phi)

        omega_x = np.cos(theta) * np.sin(phi)
        omega_y = np.sin(theta) * np.sin(phi)
        omega_z = np.cos(phi)

        H = scale(X, omega_x) + scale(Y, omega_y) + scale(Z, omega_z)
        H = scale(H, 0.5 * HBAR)
        H.setflags(write=False)
        self._operator = H

    @property
    def operator(self) -> np.ndarray:
        return self._operator

    def __repr__(self):
        return f"Hamiltonian(operator={self._operator.tolist()!r})"
