# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pypdf import PdfReader
from typer.testing import CliRunner

from paperage import __version__
from paperage.cli import app
from tests.test_support import cli_runner_env, is_valid_pdf, strip_ansi


class TestCliTyper(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        self.tmp_path = Path(self._tmpdir.name)
        self.env = cli_runner_env(self.tmp_path / "xdg")
        self.input_path = self.tmp_path / "secret.txt"
        self.input_path.write_bytes(b"the cake is a lie\n")
        self.output_path = self.tmp_path / "out.pdf"

    def invoke(self, args: list[str], **kwargs):
        result = self.runner.invoke(app, args, env=self.env, **kwargs)
        return result, strip_ansi(result.output)

    def test_root_info_commands(self) -> None:
        cases = (
            {"args": ["--help"], "contains": ("create", "fonts-license", "manpage")},
            {"args": ["--version"], "contains": (f"paperage {__version__}",)},
            {"args": ["create", "--help"], "contains": ("--title", "--page-size", "--force")},
        )
        for case in cases:
            with self.subTest(args=case["args"]):
                result, output = self.invoke(case["args"])
                self.assertEqual(result.exit_code, 0, output)
                for expected in case["contains"]:
                    self.assertIn(expected, output)

    def test_root_without_subcommand_references_help(self) -> None:
        result, output = self.invoke([])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("paperage --help", output)

    def test_init_config(self) -> None:
        result, output = self.invoke(["--init-config"])
        self.assertEqual(result.exit_code, 0, output)
        self.assertIn("User config ready", output)
        self.assertTrue((self.tmp_path / "xdg" / "paperage" / "config.toml").is_file())

        result, output = self.invoke(["--init-config"])
        self.assertEqual(result.exit_code, 0, output)
        self.assertIn("already exists", output)

    def test_fonts_license(self) -> None:
        result, output = self.invoke(["fonts-license"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("SIL OPEN FONT LICENSE Version 1.1", output)

    def test_manpage(self) -> None:
        result, output = self.invoke(["manpage"])
        self.assertEqual(result.exit_code, 0, output)
        self.assertIn(".TH PAPERAGE 1", output)
        self.assertIn(".SS create", output)
        self.assertIn(".SS fonts-license", output)
        self.assertIn("Usage: paperage [OPTIONS] COMMAND [ARGS]...", output)
        self.assertIn("Usage: paperage create [OPTIONS] [INPUT]", output)
        self.assertIn("--page-size", output)
        self.assertIn("Defaults to standard input", output)
        self.assertNotIn("Traceback", output)

        man_path = self.tmp_path / "paperage.1"
        result, output = self.invoke(["manpage", "--output", str(man_path)])
        self.assertEqual(result.exit_code, 0, output)
        self.assertIn(".SH NAME", man_path.read_text(encoding="utf-8"))

    def test_create_writes_pdf(self) -> None:
        result, output = self.invoke(
            ["create", "--title", "Cake", "-o", str(self.output_path), str(self.input_path)]
        )
        self.assertEqual(result.exit_code, 0, output)
        self.assertIn("- wrote", output)
        data = self.output_path.read_bytes()
        self.assertTrue(is_valid_pdf(data))
        self.assertEqual(PdfReader(self.output_path).metadata.title, "Cake")

    def test_create_reads_stdin_and_writes_stdout(self) -> None:
        result = self.runner.invoke(
            app,
            ["create", "--quiet", "-o", "-", "-"],
            env=self.env,
            input=b"from stdin",
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(result.stdout_bytes.startswith(b"%PDF-"))

    def test_create_piped_stdin_without_terminal_or_passphrase(self) -> None:
        env = dict(self.env, PAPERAGE_PASSPHRASE=None)
        with mock.patch("paperage.cli.ui.prompts.TTY_PATH", str(self.tmp_path / "no-tty")):
            result = self.runner.invoke(
                app,
                ["create", "-o", str(self.output_path), "-"],
                env=env,
                input=b"from stdin",
            )
        output = strip_ansi(result.output)
        self.assertEqual(result.exit_code, 2, output)
        self.assertIn("PAPERAGE_PASSPHRASE", output)
        self.assertFalse(self.output_path.exists())

    def test_create_letter_with_options(self) -> None:
        result, output = self.invoke(
            [
                "create",
                "-s",
                "LETTER",
                "-g",
                "-n",
                "--notes-label",
                "Hint:",
                "--skip-notes-line",
                "-o",
                str(self.output_path),
                str(self.input_path),
            ]
        )
        self.assertEqual(result.exit_code, 0, output)
        page = PdfReader(self.output_path).pages[0]
        self.assertAlmostEqual(float(page.mediabox.width), 612.0, places=0)
        self.assertAlmostEqual(float(page.mediabox.height), 792.0, places=0)

    def test_create_verbose_logs_lengths(self) -> None:
        result, output = self.invoke(
            ["create", "-vv", "-o", str(self.output_path), str(self.input_path)]
        )
        self.assertEqual(result.exit_code, 0, output)
        self.assertIn("Plaintext length: 18 bytes", output)
        self.assertIn("Encrypted length:", output)

    def test_create_exit_codes(self) -> None:
        big_input = self.tmp_path / "big.bin"
        big_input.write_bytes(b"\x00" * 4000)
        existing = self.tmp_path / "existing.pdf"
        existing.write_bytes(b"keep me")
        cases = (
            {
                "name": "title too long",
                "args": ["create", "-t", "x" * 65, "-o", str(self.output_path), str(self.input_path)],
                "code": 65,
                "message": "The title cannot be longer than 64 characters",
            },
            {
                "name": "missing input",
                "args": ["create", "-o", str(self.output_path), str(self.tmp_path / "nope.txt")],
                "code": 66,
                "message": "File not found",
            },
            {
                "name": "output exists",
                "args": ["create", "-o", str(existing), str(self.input_path)],
                "code": 73,
                "message": "Output file already exists",
            },
            {
                "name": "too much data",
                "args": ["create", "-o", str(self.output_path), str(big_input)],
                "code": 65,
                "message": "Too much data after encryption, please try a smaller file",
            },
            {
                "name": "bad page size",
                "args": ["create", "-s", "legal", str(self.input_path)],
                "code": 2,
                "message": None,
            },
        )
        for case in cases:
            with self.subTest(case=case["name"]):
                result, output = self.invoke(case["args"])
                self.assertEqual(result.exit_code, case["code"], output)
                if case["message"]:
                    self.assertIn(case["message"], output)
        self.assertFalse(self.output_path.exists())
        self.assertEqual(existing.read_bytes(), b"keep me")

    def test_create_force_overwrites(self) -> None:
        self.output_path.write_bytes(b"old")
        result, output = self.invoke(
            ["create", "--force", "-o", str(self.output_path), str(self.input_path)]
        )
        self.assertEqual(result.exit_code, 0, output)
        self.assertIn("Overwriting existing output file", output)
        self.assertTrue(is_valid_pdf(self.output_path.read_bytes()))

    def test_create_uses_config_file(self) -> None:
        config_path = self.tmp_path / "paperage.toml"
        config_path.write_text('[document]\ntitle = "From config"\n', encoding="utf-8")
        result, output = self.invoke(
            ["create", "--config", str(config_path), "-o", str(self.output_path), str(self.input_path)]
        )
        self.assertEqual(result.exit_code, 0, output)
        self.assertEqual(PdfReader(self.output_path).metadata.title, "From config")

    def test_create_rejects_bad_config(self) -> None:
        config_path = self.tmp_path / "paperage.toml"
        config_path.write_text('[document]\ngrid = "sometimes"\n', encoding="utf-8")
        result, output = self.invoke(
            ["create", "--config", str(config_path), "-o", str(self.output_path), str(self.input_path)]
        )
        self.assertEqual(result.exit_code, 2)
        self.assertIn("document.grid must be a boolean", output)


if __name__ == "__main__":
    unittest.main()
