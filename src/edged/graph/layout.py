"""
Linear storage layouts for adjacency matrices.

An adjacency matrix is stored as a single flat list. Two layouts are used:

- Directed graphs use a full square matrix, one slot per ordered pair,
  addressed as ``row * width + column``.
- Undirected graphs use a packed lower-triangular matrix, one slot per
  unordered pair. The pair is canonicalized to ``(long, short)`` with
  ``long >= short`` and addressed as ``long * (long + 1) // 2 + short``.
  This needs ``n * (n + 1) // 2`` slots for ``n`` vertices.

Growing a square matrix changes the row stride, so every row has to move.
Growing a triangular matrix does not change the address of any existing
pair, so the list only has to get longer.
"""


def ensure_len(values, size, fill=None):
    """
    Pad a list with ``fill`` until it holds at least ``size`` items.

    Lists that are already long enough are left alone.
    """
    missing = size - len(values)
    if missing > 0:
        values.extend([fill] * missing)


def square_position(row, column, width):
    """Slot of (row, column) in a flat square matrix of the given width."""
    return row * width + column


def triangular_position(row, column):
    """Slot of the unordered pair {row, column} in a packed lower triangle."""
    if row > column:
        long, short = row, column
    else:
        long, short = column, row
    return long * (long + 1) // 2 + short


def linear_position(row, column, width, directed):
    """Slot of (row, column) in a matrix using the layout for ``directed``."""
    if directed:
        return square_position(row, column, width)
    else:
        return triangular_position(row, column)


def matrix_size(capacity, directed):
    """Number of slots needed to hold ``capacity`` vertices."""
    if directed:
        return capacity * capacity
    else:
        return capacity * (capacity + 1) // 2


def extend_matrix(adjacencies, old_capacity, new_capacity, directed):
    """
    Grow a linearized matrix in place from old_capacity to new_capacity vertices.

    New slots are filled with None. Every previously stored value keeps its
    (row, column) coordinates.
    """
    if directed:
        extend_square_matrix(adjacencies, old_capacity, new_capacity)
    else:
        extend_triangular_matrix(adjacencies, new_capacity)


def extend_square_matrix(adjacencies, old_capacity, new_capacity):
    """
    Grow a flat square matrix and move each row to its new stride.

    Rows are relocated from the highest index down to 1 (row 0 never moves).
    Going top-down guarantees the destination of a row never holds a row that
    has not been relocated yet: every lower row lives entirely below
    ``c * old_capacity``, which is at most the destination ``c * new_capacity``.

    When the source and destination ranges of a row are disjoint the row is
    swapped as one slice. Otherwise the two ranges overlap and the row is
    swapped element by element, highest column first, so that no element is
    overwritten before it has been moved.
    """
    ensure_len(adjacencies, new_capacity * new_capacity)
    for c in range(old_capacity - 1, 0, -1):
        pos = c * old_capacity
        new_pos = c * new_capacity
        if pos + old_capacity <= new_pos:
            (
                adjacencies[pos : pos + old_capacity],
                adjacencies[new_pos : new_pos + old_capacity],
            ) = (
                adjacencies[new_pos : new_pos + old_capacity],
                adjacencies[pos : pos + old_capacity],
            )
        else:
            for i in range(old_capacity - 1, -1, -1):
                a = pos + i
                b = new_pos + i
                adjacencies[a], adjacencies[b] = adjacencies[b], adjacencies[a]


def extend_triangular_matrix(adjacencies, new_capacity):
    """Grow a packed lower-triangular matrix. Existing slots stay put."""
    ensure_len(adjacencies, matrix_size(new_capacity, False))
