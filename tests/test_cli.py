"""Command-line flags, exit codes and the yes/no prompt."""

from __future__ import annotations

import contextlib
import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from cli import cli_entry
from cli.cli_interactive import confirm
from core import ConfirmationAborted, EditOptions, ExecutionResult, ValidationError
from core.models_fs import Entry


class CliEntryTests(unittest.TestCase):
    def _main(self, argv, **patch_kwargs):
        err = io.StringIO()
        with contextlib.redirect_stderr(err), contextlib.redirect_stdout(io.StringIO()), \
                mock.patch("cli.cli_entry.edit_directory", **patch_kwargs) as edit:
            code = cli_entry.main(argv)
        return code, edit, err.getvalue()

    def test_defaults_to_current_directory(self) -> None:
        code, edit, _err = self._main([], return_value=ExecutionResult())

        self.assertEqual(code, 0)
        directory, options, prompt = edit.call_args.args
        self.assertEqual(directory, Path("."))
        self.assertEqual(options, EditOptions())
        self.assertIs(prompt, confirm)

    def test_flags_are_resolved_with_precedence(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            code, edit, _err = self._main(["-v", "-i", "-f", tmp], return_value=ExecutionResult())

        self.assertEqual(code, 0)
        directory, options, _prompt = edit.call_args.args
        self.assertEqual(directory, Path(tmp))
        self.assertEqual(options, EditOptions(verbose=True, interactive=False, force=True))

    def test_dry_run_implies_verbose(self) -> None:
        _code, edit, _err = self._main(["-d"], return_value=ExecutionResult())

        options = edit.call_args.args[1]
        self.assertTrue(options.dry_run)
        self.assertTrue(options.verbose)

    def test_structural_error_exits_one(self) -> None:
        code, _edit, err = self._main([], side_effect=ValidationError("duplicate index 1", 2))

        self.assertEqual(code, 1)
        self.assertIn("error: duplicate index 1 (line 2)", err)

    def test_failed_entry_exits_one(self) -> None:
        result = ExecutionResult(failed=[(Entry(index=0, name="a"), "boom")])
        code, _edit, _err = self._main([], return_value=result)

        self.assertEqual(code, 1)

    def test_missing_directory_exits_one(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            code, edit, err = self._main([str(Path(tmp) / "missing")])

        self.assertEqual(code, 1)
        edit.assert_not_called()
        self.assertIn("not a directory", err)


class ConfirmTests(unittest.TestCase):
    def test_repeats_until_valid_answer(self) -> None:
        out = io.StringIO()

        answer = confirm("Delete a?", stdin=io.StringIO("maybe\nyes\nY\n"), stderr=out)

        self.assertTrue(answer)
        self.assertEqual(out.getvalue().count("Delete a? y/n: "), 3)

    def test_no_answer(self) -> None:
        self.assertFalse(confirm("Delete a?", stdin=io.StringIO("n\n"), stderr=io.StringIO()))

    def test_end_of_input_aborts(self) -> None:
        with self.assertRaises(ConfirmationAborted):
            confirm("Delete a?", stdin=io.StringIO(""), stderr=io.StringIO())


if __name__ == "__main__":
    unittest.main()
