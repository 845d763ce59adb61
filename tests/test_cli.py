import contextlib
import io
import tempfile
import unittest
from pathlib import Path

from bigrational.cli import load_parfile, main, pairs_from_arguments


def run_main(argv):
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        code = main(argv)
    return code, out.getvalue().splitlines()


class CliTests(unittest.TestCase):
    def test_pairs_from_arguments(self):
        self.assertEqual(pairs_from_arguments(["4", "8", "-3", "6"]), [(4, 8), (-3, 6)])
        with self.assertRaises(ValueError):
            pairs_from_arguments(["1"])
        with self.assertRaises(ValueError):
            pairs_from_arguments(["1", "x"])

    def test_prints_canonical_forms(self):
        code, lines = run_main(["4", "8", "7", "0", "0", "0", "3", "-6"])
        self.assertEqual(code, 0)
        self.assertEqual(
            lines,
            [
                "4/8 -> 1/2 (finite)",
                "7/0 -> +Infinity (infinite)",
                "0/0 -> NaN (nan)",
                "3/-6 -> -1/2 (finite)",
            ],
        )

    def test_repr_output(self):
        _, lines = run_main(["--repr", "5", "5"])
        self.assertEqual(lines, ["5/5 -> BigRational(1, 1) (finite)"])

    def test_parfile(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            parfile = Path(tmpdir) / "parfile"
            parfile.write_text(
                'pairs = [[0, 5], [-3, -6], ["123456789012345678901234567890", "-10"]]\n'
            )
            self.assertEqual(
                load_parfile(parfile),
                [(0, 5), (-3, -6), (123456789012345678901234567890, -10)],
            )
            _, lines = run_main(["--parfile", str(parfile)])
        self.assertEqual(
            lines,
            [
                "0/5 -> 0/1 (finite)",
                "-3/-6 -> 1/2 (finite)",
                "123456789012345678901234567890/-10 -> -12345678901234567890123456789/1 (finite)",
            ],
        )

    def test_parfile_errors(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = Path(tmpdir) / "missing"
            with self.assertRaises(FileNotFoundError):
                load_parfile(missing)

            no_pairs = Path(tmpdir) / "no_pairs"
            no_pairs.write_text("values = 1\n")
            with self.assertRaises(ValueError):
                load_parfile(no_pairs)

            bad_pair = Path(tmpdir) / "bad_pair"
            bad_pair.write_text("pairs = [[1, 2, 3]]\n")
            with self.assertRaises(ValueError):
                load_parfile(bad_pair)

            floats = Path(tmpdir) / "floats"
            floats.write_text("pairs = [[1.5, 2]]\n")
            with self.assertRaises(ValueError):
                load_parfile(floats)

    def test_no_pairs_is_usage_error(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main([])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
