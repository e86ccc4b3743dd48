"""
Tests for the coolparse command-line driver.

Author: xwest
"""

import unittest
import sys
import os
import io
import json
import tempfile
from contextlib import redirect_stdout, redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from coolparse.cli import main


class TestCommandLine(unittest.TestCase):

    def _run(self, *argv):
        """Run the CLI and capture (exit code, stdout, stderr)."""
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_expression_prints_tree(self):
        code, out, _ = self._run("-e", "8 / 4 / 2")
        self.assertEqual(code, 0)
        self.assertEqual(out, "(/ 8 (/ 4 2))\n")

    def test_left_assoc_factors_flag(self):
        _, out, _ = self._run("-e", "8 / 4 / 2", "--left-assoc-factors")
        self.assertEqual(out, "(/ (/ 8 4) 2)\n")

    def test_json_output(self):
        code, out, _ = self._run("-e", "1 - 2 - 3", "--json")
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(data["op"], "SUB")
        self.assertEqual(data["left"]["type"], "BinaryExpr")

    def test_structural_rule_prints_ok(self):
        code, out, _ = self._run("--rule", "class", "-e", "class A inherits B {}")
        self.assertEqual(code, 0)
        self.assertEqual(out, "ok\n")

    def test_program_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "main.cl")
            with open(path, "w", encoding="utf-8") as f:
                f.write("class Main {\n  main() : Int { 0 };\n};\n")
            code, out, _ = self._run(path)
        self.assertEqual(code, 0)
        self.assertEqual(out, "ok\n")

    def test_parse_failure_reports_diagnostic(self):
        code, out, err = self._run("-e", "1 +")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("ERROR:", err)
        self.assertIn("<expr>:1:4", err)

    def test_variables_flag(self):
        code, _, err = self._run("-e", "x", "--no-variables")
        self.assertEqual(code, 1)
        self.assertIn("ERROR:", err)

    def test_undecodable_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "bad.cl")
            with open(path, "wb") as f:
                f.write(b"class A {};\xff\xfe")
            code, out, err = self._run(path)
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("cannot decode", err)

    def test_missing_file(self):
        code, _, err = self._run(os.path.join(tempfile.gettempdir(), "does-not-exist.cl"))
        self.assertEqual(code, 2)
        self.assertIn("cannot read", err)


if __name__ == '__main__':
    unittest.main()
