from typing import List, Union
import os
from homalg_ph.core.boundary_matrix import BoundaryMatrix
from homalg_ph.errors import FormatError

PathLike = Union[str, os.PathLike]


def dumps(matrix: BoundaryMatrix) -> str:
    """
    Text form of a matrix: one line per column, ascending indices separated
    by spaces, or `-` for an empty column.
    """
    return str(matrix)


def loads(text: str) -> BoundaryMatrix:
    """
    Parse the text form written by `dumps`.
    Blank lines and lines starting with `#` are skipped. Everything is
    validated before the matrix is built.
    """
    columns: List[List[int]] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        j = len(columns)
        if line == '-':
            columns.append([])
            continue
        try:
            column = [int(token) for token in line.split()]
        except ValueError:
            raise FormatError(f"expected integers or '-', got {line!r}", line_number) from None
        for k, index in enumerate(column):
            if index < 0 or index >= j:
                raise FormatError(f"column {j} references index {index}", line_number)
            if k > 0 and column[k - 1] >= index:
                raise FormatError(f"indices of column {j} must be strictly ascending", line_number)
        columns.append(column)
    return BoundaryMatrix.from_columns(columns)


def save_matrix(matrix: BoundaryMatrix, path: PathLike):
    with open(path, 'w', encoding='utf-8') as f:
        f.write(dumps(matrix))


def load_matrix(path: PathLike) -> BoundaryMatrix:
    with open(path, 'r', encoding='utf-8') as f:
        return loads(f.read())
