import numpy as np 


## single qubit operators 

I = np.array([
    [1, 0],
    [0, 1],
], dtype=complex)

X = np.array([
    [0, 1],
    [1, 0],
], dtype=complex)

Y = np.array([
    [0, -1j],
    [1j, 0],
], dtype=complex)

Z = np.array([
    [1, 0],
    [0, -1],
], dtype=complex)

for _op in (I, X, Y, Z): 
    _op.setflags(write=False) 

PAULIS = {"X": X, "Y": Y, "Z": Z}


def scale(matrix: np.ndarray, scalar: complex) -> np.ndarray: 
    """
    Multiply every entry of a matrix by a complex scalar. 
    Returns a new array; the input is left untouched. 
    """
    return complex(scalar) * np.asarray(matrix, dtype=complex)


def dagger(matrix: np.ndarray) -> np.ndarray: 
    return np.asarray(matrix, dtype=complex).conj().T


def require_2x2(matrix, name: str) -> np.ndarray: 
    M = np.asarray(matrix, dtype=complex) 
    if M.shape != (2, 2): 
        raise ValueError(f"{name} must have shape (2, 2), got {M.shape}") 
    return M
