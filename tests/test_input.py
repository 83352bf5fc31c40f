"""
Tests for the lexer's input cursors.

Author: xwest
"""

import io
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from kaleidoscope.lexer.input import StringInput, StreamInput, IteratorInput


class TestStringInput(unittest.TestCase):
    """Current/peek/advance over an in-memory string."""

    def test_window_moves_forward(self):
        cursor = StringInput("123")

        self.assertEqual(cursor.current, '1')
        self.assertEqual(cursor.current, '1')
        self.assertEqual(cursor.peek(), '2')
        self.assertEqual(cursor.peek(), '2')
        self.assertEqual(cursor.advance(), '2')
        self.assertEqual(cursor.current, '2')
        self.assertEqual(cursor.peek(), '3')
        self.assertEqual(cursor.advance(), '3')
        self.assertIsNone(cursor.peek())
        self.assertIsNone(cursor.advance())
        self.assertIsNone(cursor.current)

    def test_single_character(self):
        cursor = StringInput("1")

        self.assertEqual(cursor.current, '1')
        self.assertIsNone(cursor.peek())
        self.assertIsNone(cursor.advance())
        self.assertIsNone(cursor.current)

    def test_empty_string(self):
        cursor = StringInput("")

        self.assertIsNone(cursor.current)
        self.assertIsNone(cursor.peek())
        self.assertTrue(cursor.at_end)

    def test_advance_past_end_is_idempotent(self):
        cursor = StringInput("a")
        cursor.advance()

        for _ in range(5):
            self.assertIsNone(cursor.advance())
        self.assertIsNone(cursor.current)
        self.assertEqual(cursor.location.offset, 1)

    def test_location_tracking(self):
        cursor = StringInput("ab\ncd", filename="test.ks")

        loc = cursor.location
        self.assertEqual((loc.filename, loc.line, loc.column, loc.offset), ("test.ks", 1, 1, 0))

        cursor.advance()  # b
        self.assertEqual((cursor.location.line, cursor.location.column), (1, 2))

        cursor.advance()  # \n
        cursor.advance()  # c
        self.assertEqual(cursor.current, 'c')
        self.assertEqual((cursor.location.line, cursor.location.column), (2, 1))
        self.assertEqual(cursor.location.offset, 3)
        self.assertEqual(str(cursor.location), "test.ks:2:1")


class TestStreamInput(unittest.TestCase):
    """Stream input must behave exactly like string input."""

    def test_matches_string_input(self):
        text = "def f(x)\n  x*2 # double\n"
        from_string = StringInput(text)
        from_stream = StreamInput(io.StringIO(text))

        while True:
            self.assertEqual(from_string.current, from_stream.current)
            self.assertEqual(from_string.peek(), from_stream.peek())
            a, b = from_string.location, from_stream.location
            self.assertEqual((a.line, a.column, a.offset), (b.line, b.column, b.offset))
            a, b = from_string.advance(), from_stream.advance()
            self.assertEqual(a, b)
            if a is None:
                break
        self.assertIsNone(from_stream.advance())

    def test_reads_lazily(self):
        stream = io.StringIO("abcdef")
        cursor = StreamInput(stream)

        # Only the two-character window has been read
        self.assertEqual(stream.tell(), 2)
        cursor.advance()
        self.assertEqual(stream.tell(), 3)

    def test_empty_stream(self):
        cursor = StreamInput(io.StringIO(""))
        self.assertIsNone(cursor.current)
        self.assertIsNone(cursor.advance())


class TestIteratorInput(unittest.TestCase):

    def test_does_not_pull_past_exhaustion(self):
        pulled = []

        def chars():
            for c in "xy":
                pulled.append(c)
                yield c

        cursor = IteratorInput(chars())
        self.assertEqual(pulled, ['x', 'y'])
        self.assertEqual(cursor.advance(), 'y')
        self.assertIsNone(cursor.advance())
        self.assertIsNone(cursor.advance())


if __name__ == "__main__":
    unittest.main()
