"""Graph traversals: course ordering, reporting chains and grid islands."""

from collections import deque
from dataclasses import dataclass, field

_LAND = "1"


@dataclass
class Employee:
    """An employee with an importance score and direct reports by id."""

    id: int
    importance: int
    subordinates: list = field(default_factory=list)


def can_finish(num_courses, prerequisites):
    """Return True if every course can be taken given ``[course, required]``
    prerequisite pairs, that is, if they contain no cycle."""
    incoming = [0] * num_courses
    edges = [[] for _ in range(num_courses)]
    for course, required in prerequisites:
        incoming[course] += 1
        edges[required].append(course)

    ready = deque(course for course, count in enumerate(incoming) if count == 0)
    remaining = len(prerequisites)
    while ready:
        current = ready.popleft()
        for follower in edges[current]:
            remaining -= 1
            incoming[follower] -= 1
            if incoming[follower] == 0:
                ready.append(follower)
    return remaining == 0


def get_importance(employees, employee_id):
    """Return the total importance of an employee and everyone reporting to
    them, directly or not.

    Raises ``KeyError`` for an id that belongs to no employee.
    """
    by_id = {employee.id: employee for employee in employees}
    total = 0
    pending = [employee_id]
    while pending:
        employee = by_id[pending.pop()]
        total += employee.importance
        pending.extend(employee.subordinates)
    return total


def num_islands(grid):
    """Return how many groups of horizontally or vertically connected
    ``'1'`` cells the grid holds. The grid is left unchanged."""
    rows = len(grid)
    visited = set()
    islands = 0
    for row in range(rows):
        for col in range(len(grid[row])):
            if grid[row][col] != _LAND or (row, col) in visited:
                continue
            islands += 1
            visited.add((row, col))
            frontier = [(row, col)]
            while frontier:
                r, c = frontier.pop()
                for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
                    if (
                        0 <= nr < rows
                        and 0 <= nc < len(grid[nr])
                        and grid[nr][nc] == _LAND
                        and (nr, nc) not in visited
                    ):
                        visited.add((nr, nc))
                        frontier.append((nr, nc))
    return islands