import random
from abc import ABC, abstractmethod
from itertools import cycle
from typing import Iterable, Iterator, Optional, Protocol
from text_maze.core.grid import Grid


class RandomSource(Protocol):
    def randrange(self, n: int) -> int:
        """Return an integer picked uniformly from [0, n)."""
        ...


class ScriptedRandom:
    """
    Replays a fixed sequence of picks, cycling when it runs out.
    ScriptedRandom([0]) always takes the first branch.
    """
    def __init__(self, values: Iterable[int]):
        self.values = list(values)
        if not self.values:
            raise ValueError("ScriptedRandom needs at least one value")
        self._iter = cycle(self.values)

    def randrange(self, n: int) -> int:
        value = next(self._iter)
        if not 0 <= value < n:
            raise ValueError(f"Scripted value {value} outside [0, {n})")
        return value


class Generator(ABC):
    def __init__(self, grid: Grid, seed: int = None, rng: Optional[RandomSource] = None):
        self.grid = grid
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0

    def coin(self) -> bool:
        """Fair coin: True on a pick of 0 from [0, 2)."""
        return self.rng.randrange(2) == 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields one status string per carved row, then "Done".
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
