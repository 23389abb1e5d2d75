"""
Tests for the value model and the shared source cursor.

Author: xwest
"""

import os
import sys
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from aqa.source import Position, SourceCursor
from aqa.values import INT64_MAX, INT64_MIN, Value, ValueKind


class TestValue(unittest.TestCase):

    def test_structural_equality(self):
        self.assertEqual(Value.integer(3), Value.integer(3))
        self.assertEqual(Value.text("a"), Value.text("a"))
        self.assertNotEqual(Value.integer(1), Value.float_(1.0))
        self.assertNotEqual(Value.integer(1), Value.boolean(True))

    def test_payload_must_match_kind(self):
        with self.assertRaises(TypeError):
            Value(ValueKind.INTEGER, True)
        with self.assertRaises(TypeError):
            Value(ValueKind.FLOAT, 1)
        with self.assertRaises(TypeError):
            Value(ValueKind.TEXT, 1)

    def test_integer_range(self):
        Value.integer(INT64_MAX)
        Value.integer(INT64_MIN)
        with self.assertRaises(OverflowError):
            Value.integer(INT64_MAX + 1)

    def test_immutable(self):
        value = Value.integer(1)
        with self.assertRaises(AttributeError):
            value.data = 2

    def test_display(self):
        self.assertEqual(str(Value.text("hi")), "hi")
        self.assertEqual(str(Value.float_(2.5)), "2.5")
        self.assertEqual(str(Value.boolean(False)), "False")
        self.assertEqual(repr(Value.text("hi")), "Text('hi')")
        self.assertEqual(repr(Value.integer(-4)), "Integer(-4)")

    def test_is_numeric(self):
        self.assertTrue(Value.integer(1).is_numeric)
        self.assertTrue(Value.float_(1.0).is_numeric)
        self.assertFalse(Value.boolean(True).is_numeric)


class TestSourceCursor(unittest.TestCase):

    def test_advance_tracks_lines_and_columns(self):
        cursor = SourceCursor("ab\nc")

        self.assertEqual(cursor.advance(), "a")
        self.assertEqual(cursor.position, Position(1, 2))
        cursor.advance()
        self.assertEqual(cursor.advance(), "\n")
        self.assertEqual(cursor.position, Position(2, 1))
        self.assertEqual(cursor.advance(), "c")
        self.assertTrue(cursor.at_end())

    def test_end_of_input(self):
        cursor = SourceCursor("")

        self.assertIsNone(cursor.peek())
        self.assertIsNone(cursor.advance())
        self.assertEqual(cursor.position, Position(1, 1))

    def test_match(self):
        cursor = SourceCursor("<=")
        cursor.advance()

        self.assertFalse(cursor.match("-"))
        self.assertTrue(cursor.match("="))
        self.assertEqual(cursor.offset, 2)

    def test_position_display(self):
        self.assertEqual(str(Position(3, 7)), "line 3, column 7")


if __name__ == "__main__":
    unittest.main()
