import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest import mock

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import utils


class TestMaxWordLength(unittest.TestCase):
    def test_default(self):
        with mock.patch.dict(os.environ, {"SPELL_MAX_WORD_LENGTH": ""}):
            self.assertEqual(utils.get_max_word_length(), 20)

    def test_from_environment(self):
        with mock.patch.dict(os.environ, {"SPELL_MAX_WORD_LENGTH": "12"}):
            self.assertEqual(utils.get_max_word_length(), 12)

    def test_invalid_values_fall_back(self):
        for raw in ("twelve", "0", "-3", "1.5"):
            with mock.patch.dict(os.environ, {"SPELL_MAX_WORD_LENGTH": raw}):
                self.assertEqual(utils.get_max_word_length(), 20, raw)


class TestFlags(unittest.TestCase):
    def test_is_truthy(self):
        for value in ("1", "true", "TRUE", " yes "):
            self.assertTrue(utils.is_truthy(value), value)
        for value in (None, "", "0", "false", "no"):
            self.assertFalse(utils.is_truthy(value), value)

    def test_corpus_file(self):
        with mock.patch.dict(os.environ, {"SPELL_CORPUS_FILE": " /data/big.txt "}):
            self.assertEqual(utils.get_corpus_file(), "/data/big.txt")
        with mock.patch.dict(os.environ, {"SPELL_CORPUS_FILE": "  "}):
            self.assertIsNone(utils.get_corpus_file())


class TestDbgPrint(unittest.TestCase):
    def test_traces_calls_when_debug_enabled(self):
        with mock.patch.dict(os.environ, {"DEBUG": "1"}):
            @utils.dbg_print
            def add(a, b):
                return a + b

        out = io.StringIO()
        with redirect_stdout(out):
            result = add(2, 3)
        self.assertEqual(result, 5)
        self.assertEqual(out.getvalue(), "[DEBUG] Calling: add\n")
        self.assertEqual(add.__name__, "add")

    def test_returns_original_function_when_debug_disabled(self):
        def add(a, b):
            return a + b

        with mock.patch.dict(os.environ, {"DEBUG": "false"}):
            self.assertIs(utils.dbg_print(add), add)


class TestReadFromTextFile(unittest.TestCase):
    def test_reads_utf8(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "corpus.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("naïve spelling\n")
            self.assertEqual(utils.read_from_text_file(path), "naïve spelling\n")


if __name__ == "__main__":
    unittest.main()
