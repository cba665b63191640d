#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "TinyChip Emulator"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Memory map
MEM_SIZE = 0x1000       # 4K of addressable RAM, 0x000 - 0xFFF
FONT_LOCATION = 0x000   # System font lives at the very bottom of the reserved area
PROGRAM_START = 0x200   # Everything below this is reserved for the interpreter
STACK_DEPTH = 16
NUM_REGISTERS = 16
NUM_KEYS = 16

# Display
VID_WIDTH = 64
VID_HEIGHT = 32

# Clocks (Hz).  CPU and timer rates are independent of each other
DEFAULT_CLOCK_SPEED = 500
TIMER_FREQ = 60.0
DISPLAY_FREQ = 60.0

# 4x5 hexadecimal digits 0-F, 5 bytes per glyph
FONT_GLYPH_SIZE = 5
FONT_SET = bytes((
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
))

# Default PyGame keyscan codes for keys 0-F.  The physical layout is the usual 4x4 block on a QWERTY keyboard:
#
#   1 2 3 C      1 2 3 4
#   4 5 6 D  =>  Q W E R
#   7 8 9 E      A S D F
#   A 0 B F      Z X C V
DEFAULT_KEYMAP = "120,49,50,51,113,119,101,97,115,100,122,99,52,114,102,118"
