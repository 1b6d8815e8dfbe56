from __future__ import annotations

import contextlib
import io
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from nativecalls.cli import main
from nativecalls.errors import DefinitionError, DuplicateDefinitionError
from nativecalls.generator import generate_native_calls
from nativecalls.platforms import find_runtime

PROTOTYPES = """\
// configuration
int br_get_config()
void br_foo(x, y)
uint br_sha256_out(void* ctx, void* dst)
"""

EXPECTED_FILES = [
    "NativeCalls.win-x86.cs",
    "NativeCalls.win-x64.cs",
    "NativeCalls.linux-x86.cs",
    "NativeCalls.linux-x64.cs",
    "NativeCalls.osx-x64.cs",
    "NativeCalls.ref.cs",
    "linkcommands",
]


class GenerateNativeCallsTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.prototypes = self.root / "prototypes.txt"
        self.prototypes.write_text(PROTOTYPES, encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_writes_all_files_in_order(self) -> None:
        out = self.root / "nested" / "obj"
        paths = generate_native_calls(self.prototypes, out)
        self.assertEqual([p.name for p in paths], EXPECTED_FILES)
        self.assertTrue(all(p.parent == out for p in paths))
        self.assertIn("bearssl.win.x64.dll", (out / "NativeCalls.win-x64.cs").read_text(encoding="utf-8"))
        self.assertEqual(
            (out / "linkcommands").read_text(encoding="utf-8").splitlines(),
            ["export br_get_config", "export br_foo", "export br_sha256_out"],
        )

    def test_output_is_reproducible(self) -> None:
        first = generate_native_calls(self.prototypes, self.root / "a")
        second = generate_native_calls(self.prototypes, self.root / "b")
        for a, b in zip(first, second):
            self.assertEqual(a.read_bytes(), b.read_bytes())

    def test_rerun_replaces_previous_output(self) -> None:
        out = self.root / "out"
        generate_native_calls(self.prototypes, out)
        self.prototypes.write_text("int br_only()\n", encoding="utf-8")
        generate_native_calls(self.prototypes, out)
        self.assertEqual((out / "linkcommands").read_text(encoding="utf-8"), "export br_only\n")
        self.assertNotIn("br_foo", (out / "NativeCalls.ref.cs").read_text(encoding="utf-8"))

    def test_reference_file_without_runtimes(self) -> None:
        paths = generate_native_calls(self.prototypes, self.root / "out", runtimes=[])
        self.assertEqual([p.name for p in paths], ["NativeCalls.ref.cs", "linkcommands"])
        self.assertEqual(paths[0].read_text(encoding="utf-8").count("=> throw null;"), 3)

    def test_selected_runtimes(self) -> None:
        paths = generate_native_calls(self.prototypes, self.root / "out", runtimes=[find_runtime("linux-x64")])
        self.assertEqual(paths[0].name, "NativeCalls.linux-x64.cs")
        self.assertEqual(len(paths), 3)

    def test_malformed_line_aborts_before_writing(self) -> None:
        self.prototypes.write_text("int ok()\nint broken(\n", encoding="utf-8")
        out = self.root / "out"
        with self.assertRaises(DefinitionError) as ctx:
            generate_native_calls(self.prototypes, out)
        self.assertEqual(ctx.exception.line_number, 2)
        self.assertFalse(out.exists())

    def test_duplicate_names_rejected_by_default(self) -> None:
        self.prototypes.write_text("int a()\nint a()\n", encoding="utf-8")
        with self.assertRaises(DuplicateDefinitionError):
            generate_native_calls(self.prototypes, self.root / "out")
        paths = generate_native_calls(self.prototypes, self.root / "out", allow_duplicates=True)
        self.assertEqual(paths[-1].read_text(encoding="utf-8"), "export a\nexport a\n")


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.prototypes = self.root / "prototypes.txt"
        self.prototypes.write_text(PROTOTYPES, encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_prints_generated_paths(self) -> None:
        out = self.root / "gen"
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            status = main([str(self.prototypes), "-o", str(out), "--runtime", "win-x64", "--export-style", "msvc"])
        self.assertEqual(status, 0)
        printed = stdout.getvalue().splitlines()
        self.assertEqual(printed[0], f"Generated: {out / 'NativeCalls.win-x64.cs'}")
        self.assertTrue(printed[-1].startswith("Generation completed in "))
        self.assertIn("/link /export:br_foo", (out / "linkcommands").read_text(encoding="utf-8"))

    def test_reports_parse_errors(self) -> None:
        self.prototypes.write_text("int f(int (*cb)(int))\n", encoding="utf-8")
        with self.assertRaises(SystemExit) as ctx:
            main([str(self.prototypes), "-o", str(self.root / "gen")])
        self.assertIn("line 1: nested parentheses are not supported", str(ctx.exception.code))

    def test_reports_missing_input(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            main([str(self.root / "missing.txt"), "-o", str(self.root / "gen")])
        self.assertIn("Generation failed", str(ctx.exception.code))


if __name__ == "__main__":
    unittest.main()
