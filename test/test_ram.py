#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from ochip.ram import RAM, RAMError


class TestRAM(unittest.TestCase):
    def setUp(self):
        self.ram = RAM(5)

    def test_ram_init(self):
        ram = RAM()
        self.assertEqual("", ram.mem.hex())

    def test_ram_resize(self):
        self.assertEqual("0000000000", self.ram.mem.hex())
        self.ram.resize(2)
        self.assertEqual("0000", self.ram.mem.hex())

    def test_ram_write(self):
        self.ram.write(1, 255)
        self.assertEqual("00ff000000", self.ram.mem.hex())
        self.assertEqual(255, self.ram.read(1))

    def test_ram_write_block(self):
        self.ram.write_block(1, bytearray(b"\xFD\xFE"))
        self.ram.write_block(4, bytearray(b"\xFF"))
        self.assertEqual("00fdfe00ff", self.ram.mem.hex())

    def test_ram_write_empty_block(self):
        self.ram.write_block(5, b"")
        self.assertEqual("0000000000", self.ram.mem.hex())

    def test_ram_read_block(self):
        self.ram.write_block(2, b"\x01\x02\x03")
        self.assertEqual(b"\x02\x03", self.ram.read_block(3, 2))
        self.assertIsInstance(self.ram.read_block(0), bytes)

    def test_ram_byte_overflow(self):
        self.assertRaises(RAMError, self.ram.write, 5, 255)
        self.assertRaises(RAMError, self.ram.read, 5)

    def test_ram_negative_location(self):
        self.assertRaises(RAMError, self.ram.read, -1)
        self.assertRaises(RAMError, self.ram.write, -1, 0)

    def test_ram_block_overflow(self):
        self.assertRaises(RAMError, self.ram.write_block, 4, bytearray(b"\xFE\xFF"))
        self.assertRaises(RAMError, self.ram.read_block, 4, 2)

    def test_ram_block_overflow_leaves_memory_untouched(self):
        self.ram.write_block(0, b"\x01\x02\x03\x04\x05")
        self.assertRaises(RAMError, self.ram.write_block, 3, b"\xAA\xBB\xCC")
        self.assertEqual("0102030405", self.ram.mem.hex())

    def test_ram_zero_block(self):
        self.ram.write_block(0, bytearray(b"\xFC\xFD\xFE\xFF"))
        self.assertEqual("fcfdfeff00", self.ram.mem.hex())
        self.ram.zero_block(1, 2)
        self.assertEqual("fc0000ff00", self.ram.mem.hex())
        self.assertRaises(RAMError, self.ram.zero_block, 4, 2)

    def test_ram_clear(self):
        self.ram.write_block(1, bytearray(b"\xFD\xFE"))
        self.assertEqual("00fdfe0000", self.ram.mem.hex())
        self.ram.clear()
        self.assertEqual("0000000000", self.ram.mem.hex())
