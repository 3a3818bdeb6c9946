from typing import Iterator, List
from text_maze.core.grid import Grid
from text_maze.algo.base import Generator


class Sidewinder(Generator):
    def current_run(self, x: int, y: int) -> List[int]:
        """
        Columns of the run ending at (x, y), found by walking west
        while the cell is open to the west.
        """
        run = [x]
        while x > 0 and self.grid.is_open(x, y, Grid.WEST):
            x -= 1
            run.append(x)
        run.reverse()
        return run

    def run(self) -> Iterator[str]:
        grid = self.grid
        last_x = grid.columns - 1

        for y in range(grid.rows - 1, -1, -1):
            for x in range(grid.columns):
                if y == 0:
                    grid.open_east(x, y)
                elif x == last_x or self.coin():
                    # Close the run: one random member carves north
                    run = self.current_run(x, y)
                    chosen = run[self.rng.randrange(len(run))]
                    grid.open_north(chosen, y)
                else:
                    grid.open_east(x, y)
                self.step_count += 1

            yield f"Row {y} carved"

        yield "Done"
