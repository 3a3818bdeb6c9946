from collections import deque
from text_maze.core.grid import Grid


def popcount_passages(val: int) -> int:
    c = 0
    if val & Grid.NORTH: c += 1
    if val & Grid.EAST: c += 1
    if val & Grid.SOUTH: c += 1
    if val & Grid.WEST: c += 1
    return c


class MazeAnalyzer:
    @staticmethod
    def count_passages(grid: Grid) -> int:
        """
        Number of open walls. Each passage is recorded on both of its cells,
        so only EAST and SOUTH bits are counted.
        """
        count = 0
        for val in grid.cells:
            if val & Grid.EAST: count += 1
            if val & Grid.SOUTH: count += 1
        return count

    @staticmethod
    def is_connected(grid: Grid) -> bool:
        total = grid.rows * grid.columns
        seen = {(0, 0)}
        queue = deque([(0, 0)])

        while queue:
            x, y = queue.popleft()
            for nxt in grid.get_open_neighbors(x, y):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)

        return len(seen) == total

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """Connected with exactly rows*columns-1 passages: a spanning tree."""
        total = grid.rows * grid.columns
        return (MazeAnalyzer.count_passages(grid) == total - 1
                and MazeAnalyzer.is_connected(grid))

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        intersections = 0 # 3, 4 exits
        corridors = 0 # 2 exits

        for val in grid.cells:
            exits = popcount_passages(val)
            if exits == 1: dead_ends += 1
            elif exits == 2: corridors += 1
            elif exits >= 3: intersections += 1

        total = grid.rows * grid.columns
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "dead_end_percent": (dead_ends / total) * 100,
            "passages": MazeAnalyzer.count_passages(grid),
        }
