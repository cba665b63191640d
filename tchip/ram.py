#!/usr/bin/env python3

"""
RAM Emulator

Supports reading and writing of blocks of memory or individual bytes.  Every
access is bounds-checked, as addresses derived from the index register or the
program counter can quite legitimately point past the top of memory.

The bottom 512 bytes are reserved for the interpreter.  The system font is
written there when the RAM is created, and ROMs are always loaded above it.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import MEM_SIZE, FONT_LOCATION, FONT_SET, PROGRAM_START
from .errors import AddressOutOfRange, RomTooLarge


class RAM:
    def __init__(self, mem_size=MEM_SIZE):
        self.mem = memoryview(bytearray(mem_size))
        self.mem_top = mem_size - 1
        self.mem_size = mem_size

    def read(self, location):
        self.check_range(location)
        return self.mem[location]

    def read_block(self, location, size=1):
        if size <= 0:
            return b""

        self.check_range(location)
        self.check_range(location + size - 1)
        return bytes(self.mem[location:location + size])

    def write(self, location, byte):
        self.check_range(location)
        self.mem[location] = byte

    def write_block(self, location, block):
        block_top = location + len(block)
        self.check_range(location)
        self.check_range(block_top - 1)
        self.mem[location:block_top] = block

    def check_range(self, location):
        if location < 0 or location > self.mem_top:
            raise AddressOutOfRange(location)

    def load_font(self):
        self.write_block(FONT_LOCATION, FONT_SET)

    def load_rom(self, rom):
        # All or nothing.  Check the size before anything is copied, so a failed load leaves memory untouched.
        capacity = self.mem_size - PROGRAM_START

        if len(rom) > capacity:
            raise RomTooLarge(len(rom), capacity)

        self.write_block(PROGRAM_START, rom)
