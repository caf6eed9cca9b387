"""
Dense inversion routines selectable by name from cache_solve().

Each inverter takes a square 2-D array-like and returns an inexact ndarray:
float and complex input keep their dtype, integer and bool input become float64.
"""
import numpy as np


def as_matrix(A):
    A = np.asarray(A)
    if not np.issubdtype(A.dtype, np.inexact):
        A = A.astype(np.float64)
    return A


def _check_square(A):
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError("Matrix must be square")


# Pure Python Gauss-Jordan inversion

def identity(n):
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def gauss_jordan_inverse(A):
    A = as_matrix(A)
    _check_square(A)
    n = A.shape[0]
    I = identity(n)
    M = [row + I[i] for i, row in enumerate(A.tolist())]

    for i in range(n):
        # Pivot selection
        max_row = max(range(i, n), key=lambda r: abs(M[r][i]))
        if M[max_row][i] == 0:
            raise ValueError("Singular matrix")
        M[i], M[max_row] = M[max_row], M[i]

        # Normalize row
        pivot = M[i][i]
        for j in range(2*n):
            M[i][j] /= pivot

        # Eliminate column
        for k in range(n):
            if k != i:
                factor = M[k][i]
                for j in range(2*n):
                    M[k][j] -= factor * M[i][j]

    # Extract inverse
    return np.array([row[n:] for row in M], dtype=A.dtype).reshape(n, n)


def lu_decomposition(A):
    """Partial-pivoting LU factorisation, returns P, L, U with PA = LU."""
    U = as_matrix(A).copy()
    _check_square(U)
    n = U.shape[0]
    L = np.eye(n, dtype=U.dtype)
    perm = np.arange(n)

    for k in range(n):
        p = k + np.argmax(np.abs(U[k:, k]))
        if U[p, k] == 0:
            raise ValueError("Singular matrix")
        if p != k:
            U[[k, p]] = U[[p, k]]
            perm[[k, p]] = perm[[p, k]]
            L[[k, p], :k] = L[[p, k], :k]

        # Rank-1 update of the trailing block
        L[k+1:, k] = U[k+1:, k] / U[k, k]
        U[k+1:, k:] -= np.outer(L[k+1:, k], U[k, k:])
        U[k+1:, k] = 0

    P = np.eye(n, dtype=U.dtype)[perm]
    return P, L, U


def lu_inverse(A):
    P, L, U = lu_decomposition(A)

    # PA = LU  →  A⁻¹ = U⁻¹ L⁻¹ P
    Y = np.linalg.solve(L, P)
    return np.linalg.solve(U, Y)


def numpy_inverse(A):
    return np.linalg.inv(as_matrix(A))


def torch_inverse(A, device: str = 'cuda') -> np.ndarray:
    """
    Invert with torch.linalg.inv on `device`, falling back to CPU.

    torch is imported here so the other inverters work without it installed.
    """
    import torch

    if device == 'cuda' and not torch.cuda.is_available():
        print("WARNING: CUDA not available, falling back to CPU")
        device = 'cpu'
    # torch wants a writable buffer; cached matrices are read-only
    T = torch.as_tensor(np.array(as_matrix(A)), device=device)
    return torch.linalg.inv(T).cpu().numpy()


INVERTERS = {
    "numpy": numpy_inverse,
    "lu": lu_inverse,
    "gauss_jordan": gauss_jordan_inverse,
    "torch": torch_inverse,
}


def get_inverter(name):
    try:
        return INVERTERS[name]
    except KeyError:
        raise KeyError(f"Unknown inverter {name!r}, expected one of {sorted(INVERTERS)}") from None
