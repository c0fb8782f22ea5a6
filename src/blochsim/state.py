from __future__ import annotations

from dataclasses import dataclass 

import numpy as np

from .errors import InvalidStateError
from .gates  import I, X, Y, Z, require_2x2


@dataclass(frozen=True) 
class BlochVector: 
    """
    Point on or inside the Bloch sphere. 

    Conventions: 
    - phi is the polar angle (measured from +z). 
    - theta is the azimuthal angle (measured from +x in the xy-plane). 
    - r = 1 is a pure state, r < 1 a mixed state, r = 0 fully mixed. 
    """
    theta: float 
    phi: float 
    r: float 

    def __post_init__(self): 
        if not (0.0 <= self.r <= 1.0): 
            raise InvalidStateError(self.r) 

    def coordinates(self) -> tuple[float, float, float]: 
        x = self.r * np.sin(self.phi) * np.cos(self.theta)
        y = self.r * np.sin(self.phi) * np.sin(self.theta)
        z = self.r * np.cos(self.phi)
        return float(x), float(y), float(z)

    def density_matrix(self) -> np.ndarray: 
        ## rho = 1/2 (I + x X + y Y + z Z)
        x, y, z = self.coordinates()
        return 0.5 * (I + x * X + y * Y + z * Z)


def bloch_vector_from_density(rho: np.ndarray) -> np.ndarray: 

    rho = require_2x2(rho, "rho") 

    x = np.real(np.trace(rho @ X))
    y = np.real(np.trace(rho @ Y))
    z = np.real(np.trace(rho @ Z))

    return np.array([x, y, z], dtype=float)
