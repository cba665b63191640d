#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from tchip.constants import FONT_SET, PROGRAM_START
from tchip.errors import AddressOutOfRange, RomTooLarge, RAMError, VMError
from tchip.ram import RAM


class TestRAM(unittest.TestCase):
    def setUp(self):
        self.ram = RAM(5)

    def test_ram_init(self):
        self.assertEqual("0000000000", self.ram.mem.hex())
        self.assertEqual(0x1000, RAM().mem_size)

    def test_ram_write(self):
        self.ram.write(1, 255)
        self.assertEqual("00ff000000", self.ram.mem.hex())
        self.assertEqual(255, self.ram.read(1))

    def test_ram_write_block(self):
        self.ram.write_block(1, bytearray(b"\xFD\xFE"))
        self.ram.write_block(4, bytearray(b"\xFF"))
        self.assertEqual("00fdfe00ff", self.ram.mem.hex())
        self.assertEqual(b"\xFD\xFE", self.ram.read_block(1, 2))

    def test_ram_read_block_empty(self):
        self.assertEqual(b"", self.ram.read_block(0, 0))

    def test_ram_byte_overflow(self):
        self.assertRaises(AddressOutOfRange, self.ram.write, 5, 255)
        self.assertRaises(AddressOutOfRange, self.ram.read, 5)
        self.assertRaises(AddressOutOfRange, self.ram.read, -1)

    def test_ram_block_overflow(self):
        self.assertRaises(AddressOutOfRange, self.ram.write_block, 4, bytearray(b"\xFE\xFF"))
        self.assertRaises(AddressOutOfRange, self.ram.read_block, 4, 2)
        # Nothing should have been written
        self.assertEqual("0000000000", self.ram.mem.hex())

    def test_ram_error_hierarchy(self):
        with self.assertRaises(RAMError) as context:
            self.ram.read(0x10)

        self.assertIsInstance(context.exception, VMError)
        self.assertEqual(0x10, context.exception.address)


class TestRAMLoading(unittest.TestCase):
    def setUp(self):
        self.ram = RAM()
        self.ram.load_font()

    def test_ram_font(self):
        self.assertEqual(FONT_SET, self.ram.read_block(0x000, 80))
        # Digit 'A' starts at 10 * 5
        self.assertEqual(b"\xF0\x90\xF0\x90\x90", self.ram.read_block(50, 5))

    def test_ram_load_rom(self):
        self.ram.load_rom(b"\x12\x34\x56")
        self.assertEqual(b"\x12\x34\x56", self.ram.read_block(PROGRAM_START, 3))
        self.assertEqual(0, self.ram.read(PROGRAM_START - 1))

    def test_ram_load_rom_full(self):
        rom = bytes([0xAB]) * 0xE00
        self.ram.load_rom(rom)
        self.assertEqual(0xAB, self.ram.read(0xFFF))

    def test_ram_load_rom_too_large(self):
        rom = bytes([0xAB]) * 0xE01

        with self.assertRaises(RomTooLarge) as context:
            self.ram.load_rom(rom)

        self.assertEqual(0xE01, context.exception.size)
        self.assertEqual(0xE00, context.exception.capacity)
        # Loading is all-or-nothing
        self.assertEqual(bytes(0xE00), self.ram.read_block(PROGRAM_START, 0xE00))
        self.assertEqual(FONT_SET, self.ram.read_block(0x000, 80))
