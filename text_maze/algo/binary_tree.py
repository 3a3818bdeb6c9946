from typing import Iterator
from text_maze.algo.base import Generator


class BinaryTree(Generator):
    def run(self) -> Iterator[str]:
        grid = self.grid
        last_x = grid.columns - 1

        # Bottom row first, row 0 last
        for y in range(grid.rows - 1, -1, -1):
            for x in range(grid.columns):
                if y == 0:
                    # No north neighbor: knit the top row into one corridor
                    grid.open_east(x, y)
                elif x == last_x:
                    grid.open_north(x, y)
                elif self.coin():
                    grid.open_north(x, y)
                else:
                    grid.open_east(x, y)
                self.step_count += 1

            yield f"Row {y} carved"

        yield "Done"
