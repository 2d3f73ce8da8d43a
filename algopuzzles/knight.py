"""A knight's tour of the chessboard found by backtracking."""

__all__ = ["knights_tour"]

_SIZE = 8
_MOVES = ((1, -2), (2, -1), (2, 1), (1, 2), (-1, -2), (-2, -1), (-1, 2), (-2, 1))

Square = tuple[int, int]


def _neighbours() -> dict[Square, list[Square]]:
    board = {}
    for x in range(1, _SIZE + 1):
        for y in range(1, _SIZE + 1):
            board[(x, y)] = [
                (x + dx, y + dy)
                for dx, dy in _MOVES
                if 1 <= x + dx <= _SIZE and 1 <= y + dy <= _SIZE
            ]
    return board


_NEIGHBOURS = _neighbours()
_NEIGHBOUR_SETS = {square: set(around) for square, around in _NEIGHBOURS.items()}


def knights_tour(start_x: int = 3, start_y: int = 5) -> list[Square] | None:
    """The first tour from ``(start_x, start_y)`` that visits all 64 squares.

    Squares are ``(x, y)`` with both from 1 to 8; moves are tried in a fixed
    order and the search backtracks. Returns None if no tour exists.
    """
    start = (start_x, start_y)
    if start not in _NEIGHBOURS:
        raise ValueError(f"square off the board: {start}")
    total = _SIZE * _SIZE
    visited: set[Square] = set()
    path: list[Square] = []
    degree = {square: len(around) for square, around in _NEIGHBOURS.items()}

    def enter(square: Square) -> None:
        visited.add(square)
        path.append(square)
        for other in _NEIGHBOURS[square]:
            degree[other] -= 1

    def leave(square: Square) -> None:
        visited.discard(square)
        path.pop()
        for other in _NEIGHBOURS[square]:
            degree[other] += 1

    def viable(current: Square) -> bool:
        # Cut branches that leave an unvisited square unreachable or
        # force more than one square to be the end of the tour.
        remaining = total - len(path)
        if remaining == 0:
            return True
        ends = 0
        near = _NEIGHBOUR_SETS[current]
        for square in _NEIGHBOURS:
            if square in visited:
                continue
            links = degree[square]
            adjacent = square in near
            if links == 0:
                if remaining > 1 or not adjacent:
                    return False
            elif links == 1 and not adjacent:
                ends += 1
                if ends > 1:
                    return False
        return True

    def extend(current: Square) -> bool:
        if len(path) == total:
            return True
        for nxt in _NEIGHBOURS[current]:
            if nxt in visited:
                continue
            enter(nxt)
            if viable(nxt) and extend(nxt):
                return True
            leave(nxt)
        return False

    enter(start)
    return list(path) if extend(start) else None