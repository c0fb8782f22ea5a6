from __future__ import annotations

import logging

import numpy as np 

from .errors      import InvalidMeasurementOperatorError
from .evolution   import time_evolution_operator
from .gates       import PAULIS, dagger, require_2x2
from .hamiltonian import Hamiltonian
from .state       import BlochVector, bloch_vector_from_density

logger = logging.getLogger(__name__)

## relative tolerance on Im Tr(rho A) before an observable is rejected
MEASUREMENT_ATOL = 1e-10


class Qubit: 
    """
    Single qubit held as a 2x2 density matrix. 

    The initial Bloch vector is kept for reference only; all evolution 
    acts on `density_matrix`, which this object owns. Not safe for 
    concurrent mutation of the same instance. 
    """
    def __init__(self, initial_state: BlochVector):
        self.initial_state = initial_state
        self.density_matrix = initial_state.density_matrix()

        logger.debug("Qubit created from %r", initial_state)

    def __repr__(self):
        x, y, z = self.expectation_xyz()
        return f"Qubit(bloch=({x:.6g}, {y:.6g}, {z:.6g}), purity={self.purity():.6g})"


    def evolve(self, hamiltonian: Hamiltonian, t: float) -> np.ndarray:
        """
        Unitary time evolution for time t: rho <- U rho U†, U = exp(-i H t).
        """
        U = time_evolution_operator(hamiltonian.operator, t)
        self.density_matrix = U @ self.density_matrix @ dagger(U)

        logger.debug("evolved by t=%g", t)

        return self.density_matrix


    def evolve_step(self, hamiltonian: Hamiltonian, dt: float, steps: int) -> np.ndarray:
        """
        Stepped evolution: apply U_dt = exp(-i H dt) `steps` times.
        """
        if int(steps) != steps or steps <= 0:
            raise ValueError(f"steps must be a positive integer, got {steps}")
        steps = int(steps)

        U = time_evolution_operator(hamiltonian.operator, dt)
        Udag = dagger(U)
        for _ in range(steps):
            self.density_matrix = U @ self.density_matrix @ Udag

        logger.debug("evolved %d steps of dt=%g", steps, dt)

        return self.density_matrix


    def measure(self, observable: np.ndarray, *, atol: float = MEASUREMENT_ATOL) -> float:
        """
        Expectation value Tr(rho A). 

        Raises InvalidMeasurementOperatorError when the trace has an 
        imaginary part above `atol` relative to the largest entry of A, 
        i.e. A is not a valid observable. Observables carrying a factor 
        of hbar are judged on the same footing as the Pauli matrices. 
        """
        A = require_2x2(observable, "observable")

        value = np.trace(self.density_matrix @ A)
        size = float(np.max(np.abs(A)))
        if abs(value.imag) > atol * size:
            raise InvalidMeasurementOperatorError(complex(value))

        return float(value.real)


    def expectation_pauli(self, pauli: str) -> float:
        p = pauli.upper().strip()
        if p not in PAULIS:
            raise ValueError("pauli must be one of: 'X', 'Y', 'Z'")
        return self.measure(PAULIS[p])

    def expectation_xyz(self) -> tuple[float, float, float]:
        x, y, z = bloch_vector_from_density(self.density_matrix)
        return float(x), float(y), float(z)

    def purity(self) -> float: 
        rho = self.density_matrix
        return float(np.real(np.trace(rho @ rho))) 

    def trace(self) -> float:
        return float(np.real(np.trace(self.density_matrix)))
