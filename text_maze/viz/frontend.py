import logging
import random
import shutil
import sys
from abc import ABC, abstractmethod
from typing import Iterator, Optional, TextIO, Tuple
from text_maze.core.grid import Grid
from text_maze.algo.base import RandomSource
from text_maze.algo.registry import Algorithm, create_generator
from text_maze.viz.text_renderer import render, fit_to_text

logger = logging.getLogger(__name__)


class MazeSession:
    """
    Grid, algorithm and random source driven by a front end,
    plus the most recent rendering.
    """
    def __init__(self, rows: int, columns: int, algorithm: Algorithm,
                 seed: int = None, rng: Optional[RandomSource] = None):
        self.grid = Grid(rows, columns)
        self.algorithm = algorithm
        self.rng = rng if rng is not None else random.Random(seed)
        self.text = ""

    def carve(self) -> Iterator[str]:
        """Clears the grid and yields generator progress while carving."""
        self.grid.clear()
        generator = create_generator(self.grid, self.algorithm, rng=self.rng)
        for status in generator.run():
            yield status
        self.text = render(self.grid)

    def regenerate(self) -> str:
        for _ in self.carve():
            pass
        return self.text

    def resize(self, rows: int, columns: int) -> str:
        self.grid.resize(rows, columns)
        return self.regenerate()


class Frontend(ABC):
    """
    Capabilities a front end offers the maze core: reporting the text area
    it can show, reacting to a resize, and quitting.
    """
    def __init__(self, session: MazeSession):
        self.session = session
        self.running = True

    @abstractmethod
    def report_available_size(self) -> Tuple[int, int]:
        """(columns, rows) of text the front end can display."""
        pass

    def on_resize(self, rows: int, columns: int) -> str:
        logger.info(f"Resizing to {rows}x{columns} ({self.session.algorithm.label})")
        return self.session.resize(rows, columns)

    def fit(self) -> str:
        rows, columns = fit_to_text(*self.report_available_size())
        return self.on_resize(rows, columns)

    def on_quit(self):
        self.running = False


class ConsoleFrontend(Frontend):
    def __init__(self, session: MazeSession, stream: TextIO = None):
        super().__init__(session)
        self.stream = stream if stream is not None else sys.stdout

    def report_available_size(self) -> Tuple[int, int]:
        size = shutil.get_terminal_size()
        # Leave a line for the shell prompt
        return size.columns, size.lines - 1

    def show(self, text: str = None):
        self.stream.write(text if text is not None else self.session.text)
        self.stream.flush()
