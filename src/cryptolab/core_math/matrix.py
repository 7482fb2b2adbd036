"""
Integer matrix arithmetic modulo m, used by the Hill cipher.

Matrices are tuples of row tuples. Any square size works; the classroom
examples are 2x2.
"""

from typing import List, Sequence, Tuple

from .number_theory import mod_inverse

Matrix = Tuple[Tuple[int, ...], ...]


def is_square(matrix: Sequence[Sequence[int]]) -> bool:
    """True if matrix is non-empty and has as many columns as rows in every row."""
    size = len(matrix)
    return size > 0 and all(len(row) == size for row in matrix)


def _minor(matrix: Sequence[Sequence[int]], row: int, col: int) -> List[List[int]]:
    return [
        [value for c, value in enumerate(r) if c != col]
        for i, r in enumerate(matrix) if i != row
    ]


def determinant(matrix: Sequence[Sequence[int]]) -> int:
    """
    Integer determinant by cofactor expansion along the first row.

    Args:
        matrix: Square integer matrix

    Returns:
        The exact (unreduced) determinant
    """
    size = len(matrix)
    if size == 1:
        return matrix[0][0]
    if size == 2:
        return matrix[0][0] * matrix[1][1] - matrix[0][1] * matrix[1][0]

    total = 0
    for col in range(size):
        sign = -1 if col % 2 else 1
        total += sign * matrix[0][col] * determinant(_minor(matrix, 0, col))
    return total


def adjugate(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Transpose of the cofactor matrix. For [[a, b], [c, d]] this is [[d, -b], [-c, a]]."""
    size = len(matrix)
    if size == 1:
        return ((1,),)

    cofactors = [
        [(-1) ** (i + j) * determinant(_minor(matrix, i, j)) for j in range(size)]
        for i in range(size)
    ]
    return tuple(tuple(cofactors[j][i] for j in range(size)) for i in range(size))


def reduce_mod(matrix: Sequence[Sequence[int]], m: int) -> Matrix:
    """Reduce every entry into [0, m)."""
    return tuple(tuple(value % m for value in row) for row in matrix)


def inverse_mod(matrix: Sequence[Sequence[int]], m: int) -> Matrix:
    """
    Inverse of a square matrix modulo m: det^-1 * adj(K) mod m.

    Raises:
        NoInverseError: If det(K) mod m has no inverse mod m
    """
    det_inv = mod_inverse(determinant(matrix) % m, m)
    adj = adjugate(matrix)
    return tuple(tuple((det_inv * value) % m for value in row) for row in adj)


def multiply_vector_mod(matrix: Sequence[Sequence[int]], vector: Sequence[int], m: int) -> Tuple[int, ...]:
    """Compute K * v mod m for a column vector v."""
    return tuple(
        sum(k * v for k, v in zip(row, vector)) % m
        for row in matrix
    )
