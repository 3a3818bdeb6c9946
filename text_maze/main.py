import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'text_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from text_maze.algo.registry import Algorithm

DEFAULT_ROWS = 15
DEFAULT_COLUMNS = 15
DEFAULT_ALGORITHM = Algorithm.SIDEWINDER
DEFAULT_BENCHMARK_SEED = 123

logger = logging.getLogger("text_maze")


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def parse_dimension(value, default: int, name: str) -> int:
    """
    Reads a maze dimension from user input. Anything that is not a
    positive integer falls back to the default with a warning.
    """
    if value is None:
        return default
    try:
        number = int(str(value).strip())
    except ValueError:
        logger.warning(f"Invalid {name} {value!r}, using default {default}")
        return default
    if number < 1:
        logger.warning(f"{name.capitalize()} must be positive, got {number}; using default {default}")
        return default
    return number


def parse_seed(value, default):
    """Reads a random seed; non-numeric input falls back to the default with a warning."""
    if value is None:
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        logger.warning(f"Invalid seed {value!r}, using default {default}")
        return default


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Text Maze: perfect maze generator with ASCII output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    algo_help = "Generation Algorithm: " + ", ".join(a.value for a in Algorithm) + " (aliases bt, sw)"

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a maze and print it")
    gen_parser.add_argument("--rows", type=str, default=None, help=f"Maze rows (default {DEFAULT_ROWS})")
    gen_parser.add_argument("--columns", type=str, default=None, help=f"Maze columns (default {DEFAULT_COLUMNS})")
    gen_parser.add_argument("--algo", type=Algorithm.parse, default=DEFAULT_ALGORITHM, help=algo_help)
    gen_parser.add_argument("--seed", type=str, default=None, help="Random Seed")
    gen_parser.add_argument("--fit", action="store_true", help="Size the maze to the terminal")
    gen_parser.add_argument("--stats", action="store_true", help="Log maze statistics")

    # Interactive Command
    int_parser = subparsers.add_parser("interactive", help="Open a resizable window that redraws the maze")
    int_parser.add_argument("--algo", type=Algorithm.parse, default=DEFAULT_ALGORITHM, help=algo_help)
    int_parser.add_argument("--seed", type=str, default=None, help="Random Seed")
    int_parser.add_argument("--animate", action="store_true", help="Show carving row by row")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time both algorithms")
    bench_parser.add_argument("--size", type=str, default="500", help="Benchmark size (square)")
    bench_parser.add_argument("--seed", type=str, default=None, help="Random Seed")

    return parser


def run_generate(args) -> int:
    from text_maze.viz.frontend import ConsoleFrontend, MazeSession

    algorithm = args.algo
    seed = parse_seed(args.seed, None)
    rows = parse_dimension(args.rows, DEFAULT_ROWS, "rows")
    columns = parse_dimension(args.columns, DEFAULT_COLUMNS, "columns")

    session = MazeSession(rows, columns, algorithm, seed=seed)
    frontend = ConsoleFrontend(session)

    if args.fit:
        logger.info("Fitting maze to terminal...")
        frontend.fit()
    else:
        logger.info(f"Generating {rows}x{columns} maze with {algorithm.label}...")
        frontend.on_resize(rows, columns)

    frontend.show()

    if args.stats:
        from text_maze.core.complexity import MazeAnalyzer
        stats = MazeAnalyzer.calculate_stats(session.grid)
        logger.info(f"Stats: {stats}")
        if not MazeAnalyzer.is_perfect(session.grid):
            logger.error("Generated maze is not a spanning tree")
            return 1
    return 0


def run_interactive(args) -> int:
    from text_maze.viz.frontend import MazeSession
    from text_maze.viz.window import WindowFrontend

    algorithm = args.algo
    seed = parse_seed(args.seed, None)
    logger.info("Visual mode enabled - Opening window...")
    session = MazeSession(DEFAULT_ROWS, DEFAULT_COLUMNS, algorithm, seed=seed)
    frontend = WindowFrontend(session, animate=args.animate)
    frontend.init_window()
    frontend.run_loop()
    return 0


def run_benchmark(args) -> int:
    from text_maze.core.grid import Grid
    from text_maze.core.complexity import MazeAnalyzer
    from text_maze.algo.registry import generate
    import random

    size = parse_dimension(args.size, 500, "size")
    seed = parse_seed(args.seed, DEFAULT_BENCHMARK_SEED)
    logger.info(f"Running Generator Benchmark (Size: {size}x{size})...")

    print(f"\n{'ALGORITHM':<14} | {'TIME (s)':<10} | {'DEAD ENDS':<10} | {'PERFECT':<8}")
    print("-" * 52)

    for algorithm in Algorithm:
        grid = Grid(size, size)
        t_start = time.time()
        generate(grid, algorithm, rng=random.Random(seed))
        duration = time.time() - t_start

        stats = MazeAnalyzer.calculate_stats(grid)
        perfect = MazeAnalyzer.is_perfect(grid)
        print(f"{algorithm.label:<14} | {duration:<10.4f} | {stats['dead_ends']:<10} | {str(perfect):<8}")
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        return run_generate(args)
    elif args.command == "interactive":
        return run_interactive(args)
    elif args.command == "benchmark":
        return run_benchmark(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
