"""Exhaustive searches: subsets, sudoku and word tracing on a grid."""

_DIGITS = "123456789"
_EMPTY = "."


def subsets(nums):
    """Return every subset of ``nums`` in depth-first order, each keeping
    the input order of its items, starting with the empty subset."""
    result = []
    path = []

    def extend(start):
        result.append(list(path))
        for index in range(start, len(nums)):
            path.append(nums[index])
            extend(index + 1)
            path.pop()

    extend(0)
    return result


def _box(row, col):
    return 3 * (row // 3) + col // 3


def solve_sudoku(board):
    """Fill the empty ``'.'`` cells of a 9x9 board of characters in place.

    Raises ``ValueError`` for a malformed or conflicting board, or one with
    no solution; the board is then left as it was.
    """
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("board must be 9 rows of 9 cells")
    rows = [set() for _ in range(9)]
    cols = [set() for _ in range(9)]
    boxes = [set() for _ in range(9)]
    empty = []
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == _EMPTY:
                empty.append((r, c))
                continue
            if cell not in _DIGITS or len(cell) != 1:
                raise ValueError(f"invalid cell {cell!r} at ({r}, {c})")
            b = _box(r, c)
            if cell in rows[r] or cell in cols[c] or cell in boxes[b]:
                raise ValueError(f"digit {cell!r} at ({r}, {c}) conflicts")
            rows[r].add(cell)
            cols[c].add(cell)
            boxes[b].add(cell)

    def place(position):
        if position == len(empty):
            return True
        r, c = empty[position]
        b = _box(r, c)
        for digit in _DIGITS:
            if digit in rows[r] or digit in cols[c] or digit in boxes[b]:
                continue
            rows[r].add(digit)
            cols[c].add(digit)
            boxes[b].add(digit)
            board[r][c] = digit
            if place(position + 1):
                return True
            rows[r].discard(digit)
            cols[c].discard(digit)
            boxes[b].discard(digit)
            board[r][c] = _EMPTY
        return False

    if not place(0):
        raise ValueError("sudoku has no solution")


def exist(board, word):
    """Return True if ``word`` can be traced through horizontally or
    vertically adjacent cells, using each cell at most once.

    An empty word is never found.
    """
    if not word:
        return False
    rows = len(board)
    visited = set()

    def trace(row, col, position):
        if not (0 <= row < rows and 0 <= col < len(board[row])):
            return False
        if (row, col) in visited or board[row][col] != word[position]:
            return False
        if position == len(word) - 1:
            return True
        visited.add((row, col))
        found = (
            trace(row + 1, col, position + 1)
            or trace(row - 1, col, position + 1)
            or trace(row, col + 1, position + 1)
            or trace(row, col - 1, position + 1)
        )
        visited.discard((row, col))
        return found

    return any(
        trace(row, col, 0) for row in range(rows) for col in range(len(board[row]))
    )