from typing import List
from homalg_ph.core.boundary_matrix import BoundaryMatrix, columns_from_pairs
from homalg_ph.core.representation import xor_sorted


def dualize(matrix: BoundaryMatrix) -> BoundaryMatrix:
    """
    Anti-transpose of a boundary matrix.
    Entry `r` of column `c` becomes entry `N-1-c` of column `N-1-r`, which
    turns the boundary relation into the coboundary relation of the reversed
    filtration. The input is left untouched.
    - `dualize(dualize(M)) == M`, flag included
    - the result is triangular whenever the input is
    """
    n = matrix.num_columns
    entries = []
    for c, column in enumerate(matrix.columns()):
        for r in column:
            entries.append((n - 1 - c, n - 1 - r))
    dual = BoundaryMatrix.from_columns(columns_from_pairs(n, entries))
    dual.dualized = not matrix.dualized
    return dual


def original_dimensions(matrix: BoundaryMatrix) -> List[int]:
    """
    Simplex dimension behind every column, as implied by face counts.
    For a dualized matrix, column `c` stands for simplex `N-1-c` of the
    original filtration, whose face count is the number of dual columns
    containing row `c`.
    """
    n = matrix.num_columns
    if not matrix.dualized:
        return [matrix.get_dimension(j) for j in range(n)]
    occupancy = [0] * n
    for column in matrix.columns():
        for r in column:
            occupancy[r] += 1
    # occupancy[c] counts the faces of original simplex N-1-c
    return [max(occupancy[c] - 1, 0) for c in range(n)]


def is_chain_complex(matrix: BoundaryMatrix) -> bool:
    """
    Check `d o d = 0` over GF(2).
    The boundary of every column's boundary must cancel out; this holds for
    boundary matrices of simplicial complexes and for their anti-transposes.
    """
    columns = list(matrix.columns())
    for column in columns:
        total: List[int] = []
        for face in column:
            total = xor_sorted(total, columns[face])
        if total:
            return False
    return True
