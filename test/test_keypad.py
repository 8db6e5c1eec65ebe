#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from ochip.keypad import Keypad, KeypadError


class TestKeypad(unittest.TestCase):
    def setUp(self):
        self.keypad = Keypad()

    def test_keypad_set_key(self):
        self.keypad.set_key(0xA, True)
        self.assertTrue(self.keypad.is_key_down(0xA))
        self.keypad.set_key(0xA, False)
        self.assertFalse(self.keypad.is_key_down(0xA))

    def test_keypad_invalid_key(self):
        self.assertRaises(KeypadError, self.keypad.set_key, 0x10, True)
        self.assertRaises(KeypadError, self.keypad.set_key, -1, True)

    def test_keypad_first_pressed(self):
        self.assertIsNone(self.keypad.get_first_pressed())
        self.keypad.set_key(0xC, True)
        self.keypad.set_key(0x3, True)
        self.assertEqual(0x3, self.keypad.get_first_pressed())

    def test_keypad_clear(self):
        self.keypad.set_key(0x0, True)
        self.keypad.clear()
        self.assertIsNone(self.keypad.get_first_pressed())
