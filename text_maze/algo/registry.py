import logging
from enum import Enum
from typing import Optional
from text_maze.core.grid import Grid
from text_maze.algo.base import Generator, RandomSource
from text_maze.algo.binary_tree import BinaryTree
from text_maze.algo.sidewinder import Sidewinder

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    BINARY_TREE = "binary-tree"
    SIDEWINDER = "sidewinder"

    @classmethod
    def parse(cls, name: str) -> "Algorithm":
        key = name.strip().lower().replace("_", "-")
        aliases = {"bt": cls.BINARY_TREE, "sw": cls.SIDEWINDER}
        if key in aliases:
            return aliases[key]
        for algo in cls:
            if algo.value == key:
                return algo
        raise ValueError(f"Unknown algorithm: {name!r}")

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


GENERATORS = {
    Algorithm.BINARY_TREE: BinaryTree,
    Algorithm.SIDEWINDER: Sidewinder,
}


def create_generator(grid: Grid, algorithm: Algorithm, rng: Optional[RandomSource] = None,
                     seed: int = None) -> Generator:
    return GENERATORS[algorithm](grid, seed=seed, rng=rng)


def generate(grid: Grid, algorithm: Algorithm, rng: Optional[RandomSource] = None,
             seed: int = None) -> Generator:
    """Carve a perfect maze into grid in place. Returns the finished generator."""
    logger.debug(f"Generating {grid.rows}x{grid.columns} with {algorithm.label}")
    generator = create_generator(grid, algorithm, rng=rng, seed=seed)
    generator.run_all()
    logger.debug(f"{algorithm.label} done after {generator.step_count} cells")
    return generator
