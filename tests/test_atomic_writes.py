import tempfile
import unittest
from pathlib import Path

from sast_checkstyle.io import write_stream_atomic


class TestAtomicWrites(unittest.TestCase):
    def test_stream_creates_parents_and_cleans_temp(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out_dir = Path(td) / "out" / "nested"
            out_path = out_dir / "checkstyle.xml"

            def _write(f) -> None:
                f.write("<module")
                f.write("/>")

            write_stream_atomic(out_path, _write)

            self.assertEqual("<module/>", out_path.read_text(encoding="utf-8"))
            self.assertEqual([], list(out_dir.glob("*.tmp")))

    def test_failed_stream_leaves_existing_file_untouched(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out_dir = Path(td)
            out_path = out_dir / "checkstyle.xml"
            out_path.write_text("previous", encoding="utf-8")

            def _write(f) -> None:
                f.write("<partial")
                raise RuntimeError("boom")

            with self.assertRaises(RuntimeError):
                write_stream_atomic(out_path, _write)

            self.assertEqual("previous", out_path.read_text(encoding="utf-8"))
            self.assertEqual([], list(out_dir.glob("*.tmp")))


if __name__ == "__main__":
    unittest.main()
