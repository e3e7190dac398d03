"""Matrix problems: zeroing rows and columns, rotation and spiral traversal."""


def set_matrix_zeros(matrix):
    """Copy of ``matrix`` with every row and column that holds a 0 set to 0."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    return [
        [
            0 if i in zero_rows or j in zero_cols else value
            for j, value in enumerate(row)
        ]
        for i, row in enumerate(matrix)
    ]


def rotate_matrix(matrix):
    """Copy of ``matrix`` turned 90 degrees clockwise."""
    return [list(column) for column in zip(*reversed(matrix))]


def spiral_order(matrix):
    """Items of ``matrix`` in clockwise spiral order from the top-left corner."""
    rows = [list(row) for row in matrix]
    result = []
    while rows:
        result.extend(rows.pop(0))
        rows = [list(column) for column in zip(*rows)][::-1]
    return result