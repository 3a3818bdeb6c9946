import unittest
import io
import sys
import os
from contextlib import redirect_stdout
from unittest import mock

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from text_maze import main as cli
from text_maze.algo.registry import Algorithm

class TestParseDimension(unittest.TestCase):
    def test_valid(self):
        self.assertEqual(cli.parse_dimension("12", 15, "rows"), 12)
        self.assertEqual(cli.parse_dimension(" 3 ", 15, "rows"), 3)
        self.assertEqual(cli.parse_dimension(None, 15, "rows"), 15)

    def test_invalid_falls_back_with_warning(self):
        for value in ("abc", "0", "-4", "2.5", ""):
            with self.subTest(value=value):
                with self.assertLogs("text_maze", level="WARNING"):
                    self.assertEqual(cli.parse_dimension(value, 15, "columns"), 15)


class TestCommands(unittest.TestCase):
    def run_cli(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = cli.main(list(argv))
        return code, out.getvalue()

    def test_generate_prints_maze(self):
        code, out = self.run_cli("generate", "--rows", "4", "--columns", "6", "--seed", "1", "--stats")
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 2 * 4 + 2)
        self.assertEqual(lines[1], "    +" + "---+" * 6)

    def test_generate_is_seeded(self):
        _, first = self.run_cli("generate", "--algo", "binary-tree", "--seed", "77")
        _, second = self.run_cli("generate", "--algo", "binary-tree", "--seed", "77")
        self.assertEqual(first, second)

    def test_generate_bad_size_uses_default(self):
        with self.assertLogs("text_maze", level="WARNING"):
            code, out = self.run_cli("generate", "--rows", "zero", "--columns", "-2", "--seed", "3")
        self.assertEqual(code, 0)
        self.assertEqual(len(out.splitlines()), 2 * cli.DEFAULT_ROWS + 2)

    def test_generate_bad_seed_uses_default(self):
        with self.assertLogs("text_maze", level="WARNING") as logs:
            code, out = self.run_cli("generate", "--rows", "3", "--columns", "4", "--seed", "abc")
        self.assertEqual(code, 0)
        self.assertEqual(len(out.splitlines()), 2 * 3 + 2)
        self.assertTrue(any("seed" in line for line in logs.output))

    def test_parse_seed(self):
        self.assertEqual(cli.parse_seed("42", None), 42)
        self.assertEqual(cli.parse_seed("-7", None), -7)
        self.assertIsNone(cli.parse_seed(None, None))
        with self.assertLogs("text_maze", level="WARNING"):
            self.assertEqual(cli.parse_seed("x1", cli.DEFAULT_BENCHMARK_SEED), cli.DEFAULT_BENCHMARK_SEED)

    def test_benchmark_bad_seed(self):
        with self.assertLogs("text_maze", level="WARNING"):
            code, out = self.run_cli("benchmark", "--size", "5", "--seed", "nope")
        self.assertEqual(code, 0)
        self.assertNotIn("False", out)

    def test_algorithm_aliases(self):
        _, full = self.run_cli("generate", "--algo", "binary-tree", "--seed", "5")
        _, short = self.run_cli("generate", "--algo", "bt", "--seed", "5")
        _, underscored = self.run_cli("generate", "--algo", "Binary_Tree", "--seed", "5")
        self.assertEqual(full, short)
        self.assertEqual(full, underscored)

        args = cli.build_parser().parse_args(["interactive", "--algo", "sw"])
        self.assertIs(args.algo, Algorithm.SIDEWINDER)
        args = cli.build_parser().parse_args(["generate"])
        self.assertIs(args.algo, cli.DEFAULT_ALGORITHM)

    def test_generate_fit(self):
        size = os.terminal_size((45, 13))
        with mock.patch("shutil.get_terminal_size", return_value=size):
            code, out = self.run_cli("generate", "--fit", "--seed", "2")
        self.assertEqual(code, 0)
        lines = out.splitlines()
        # 45 columns -> 10 maze columns, 12 usable lines -> 5 maze rows
        self.assertEqual(len(lines), 12)
        self.assertEqual(len(lines[1]), 45)

    def test_unknown_algorithm_rejected(self):
        with self.assertRaises(SystemExit):
            with redirect_stdout(io.StringIO()), mock.patch("sys.stderr", io.StringIO()):
                cli.main(["generate", "--algo", "prim"])

    def test_benchmark(self):
        code, out = self.run_cli("benchmark", "--size", "12")
        self.assertEqual(code, 0)
        for algorithm in Algorithm:
            self.assertIn(algorithm.label, out)
        self.assertNotIn("False", out)

    def test_package_metadata_files_exist(self):
        try:
            import tomllib
        except ImportError:
            self.skipTest("tomllib needs Python 3.11+")
        root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
        with open(os.path.join(root, "pyproject.toml"), "rb") as f:
            project = tomllib.load(f)["project"]
        if "readme" in project:
            self.assertTrue(os.path.exists(os.path.join(root, project["readme"])))

    def test_no_command_prints_help(self):
        code, out = self.run_cli()
        self.assertEqual(code, 0)
        self.assertIn("generate", out)

if __name__ == '__main__':
    unittest.main()
