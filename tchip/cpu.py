#!/usr/bin/env python3

"""
CPU Emulator (CHIP-8)

Each call to cycle() runs exactly one step: fetch the two-byte opcode at the
program counter, advance the program counter past it, decode, then execute.
Because the program counter has already moved on when an instruction runs,
jumps simply overwrite it, and skips just advance it by another 2.

The CPU never blocks.  Waiting for a keypress (Fx0A) puts the CPU into the
AWAITING_KEY state, where each cycle only polls the keypad and returns.  The
first cycle that sees a key held stores it and drops back to RUNNING, carrying
on from the instruction after the wait.

Nothing here knows about wall-clock time.  Whatever drives the CPU also
decides when to tick the timers.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import random
from .constants import APP_INTRO, FONT_LOCATION, FONT_GLYPH_SIZE, NUM_REGISTERS
from .decoder import (
    decode, CLS, RET, JP, CALL, SE_BYTE, SNE_BYTE, SE_REG, LD_BYTE, ADD_BYTE, LD_REG, OR, AND, XOR, ADD_REG, SUB, SHR,
    SUBN, SHL, SNE_REG, LD_I, JP_V0, RND, DRW, SKP, SKNP, LD_VX_DT, LD_VX_K, LD_DT_VX, LD_ST_VX, ADD_I, LD_F, LD_B,
    LD_MEM_VX, LD_VX_MEM
)
from .errors import UnrecognizedOpcode

CPU_ENDIAN = "big"  # CHIP-8 is big-endian

# CPU states
RUNNING = "RUNNING"
AWAITING_KEY = "AWAITING_KEY"


class CPU:
    def __init__(self, ram, stack, framebuffer, timers, keypad, debugger, rng=None):
        self.ram = ram
        self.stack = stack
        self.framebuffer = framebuffer
        self.timers = timers
        self.keypad = keypad
        self.debugger = debugger
        self.live_debug = self.debugger.is_live()
        # Anything with a randint(a, b) method will do.  Tests swap in a seeded random.Random
        self.rng = random if rng is None else rng

        self.instructions = {
            CLS:       self._00E0,
            RET:       self._00EE,
            JP:        self._1nnn,
            CALL:      self._2nnn,
            SE_BYTE:   self._3xkk,
            SNE_BYTE:  self._4xkk,
            SE_REG:    self._5xy0,
            LD_BYTE:   self._6xkk,
            ADD_BYTE:  self._7xkk,
            LD_REG:    self._8xy0,
            OR:        self._8xy1,
            AND:       self._8xy2,
            XOR:       self._8xy3,
            ADD_REG:   self._8xy4,
            SUB:       self._8xy5,
            SHR:       self._8xy6,
            SUBN:      self._8xy7,
            SHL:       self._8xyE,
            SNE_REG:   self._9xy0,
            LD_I:      self._Annn,
            JP_V0:     self._Bnnn,
            RND:       self._Cxkk,
            DRW:       self._Dxyn,
            SKP:       self._Ex9E,
            SKNP:      self._ExA1,
            LD_VX_DT:  self._Fx07,
            LD_VX_K:   self._Fx0A,
            LD_DT_VX:  self._Fx15,
            LD_ST_VX:  self._Fx18,
            ADD_I:     self._Fx1E,
            LD_F:      self._Fx29,
            LD_B:      self._Fx33,
            LD_MEM_VX: self._Fx55,
            LD_VX_MEM: self._Fx65
        }

        # Initialise registers
        self.v = memoryview(bytearray(NUM_REGISTERS))
        self.i = 0  # Index register.  16 bits wide, so it can point past the top of RAM after Fx1E

        # Initialise program counter and current opcode
        self.pc = 0
        self.debug_pc = 0
        self.opcode = 0

        # Key wait state
        self.state = RUNNING
        self.wait_register = None

    def reset(self, start_location):
        self.pc = start_location
        self.state = RUNNING
        self.wait_register = None

    def cycle(self):
        if self.state == AWAITING_KEY:
            self._poll_keypad()
            return

        # Keep track of the program counter before altering it in any way for debugging purposes
        self.debug_pc = self.pc
        self.opcode = self.fetch()
        self.inc_pc()
        self.execute(self.decode())

    def fetch(self):
        return int.from_bytes(self.ram.read_block(self.pc, 2), CPU_ENDIAN, signed=False)

    def decode(self):
        try:
            return decode(self.opcode)
        except UnrecognizedOpcode:
            self._opcode_unsupported()

    def execute(self, instruction):
        if self.live_debug:
            self.debugger.output(self, instruction)

        self.instructions[instruction.tag](instruction)

    def inc_pc(self):
        self.pc = (self.pc + 2) & 0xFFFF

    def is_awaiting_key(self):
        return self.state == AWAITING_KEY

    def _poll_keypad(self):
        key = self.keypad.first_pressed()

        if key is not None:
            self.v[self.wait_register] = key
            self.wait_register = None
            self.state = RUNNING

    def _opcode_unsupported(self):
        raise UnrecognizedOpcode(
            self.opcode,
            (
                "Emulation halted.\n\n" +
                "{}Debug info:\n" +
                "{}\n\nOpcode 0x{:04x} at address 0x{:03x} is not recognised."
            ).format(APP_INTRO, self.debugger.debug(self, "???", verbose=True), self.opcode, self.debug_pc)
        ) from None

    def _00E0(self, ins):  # CLS
        self.framebuffer.clear()

    def _00EE(self, ins):  # RET
        self.pc = self.stack.pop()

    def _1nnn(self, ins):  # JP addr
        self.pc = ins.nnn

    def _2nnn(self, ins):  # CALL addr
        # The return address is the instruction after this one, which is where the PC already points
        self.stack.push(self.pc)
        self.pc = ins.nnn

    def _3xkk(self, ins):  # SE Vx, byte
        if self.v[ins.x] == ins.kk:
            self.inc_pc()

    def _4xkk(self, ins):  # SNE Vx, byte
        if self.v[ins.x] != ins.kk:
            self.inc_pc()

    def _5xy0(self, ins):  # SE Vx, Vy
        if self.v[ins.x] == self.v[ins.y]:
            self.inc_pc()

    def _6xkk(self, ins):  # LD Vx, byte
        self.v[ins.x] = ins.kk

    def _7xkk(self, ins):  # ADD Vx, byte
        # No carry flag for this one
        self.v[ins.x] = (self.v[ins.x] + ins.kk) & 0xFF

    def _8xy0(self, ins):  # LD Vx, Vy
        self.v[ins.x] = self.v[ins.y]

    def _8xy1(self, ins):  # OR Vx, Vy
        self.v[ins.x] |= self.v[ins.y]

    def _8xy2(self, ins):  # AND Vx, Vy
        self.v[ins.x] &= self.v[ins.y]

    def _8xy3(self, ins):  # XOR Vx, Vy
        self.v[ins.x] ^= self.v[ins.y]

    # For the flagged arithmetic below, both operands are read before anything is written, and Vf is always written
    # last.  That way ADD V1, V1 doubles correctly, and if x is 0xF the flag wins over the result.

    def _8xy4(self, ins):  # ADD Vx, Vy
        val = self.v[ins.x] + self.v[ins.y]
        self.v[ins.x] = val & 0xFF
        self.v[0xF] = int(val > 0xFF)  # Vf is set when carrying

    def _8xy5(self, ins):  # SUB Vx, Vy
        vx = self.v[ins.x]
        vy = self.v[ins.y]
        self.v[ins.x] = (vx - vy) & 0xFF
        self.v[0xF] = int(vx >= vy)  # Vf is set when NOT borrowing

    def _8xy6(self, ins):  # SHR Vx
        val = self.v[ins.x]
        self.v[ins.x] = val >> 1
        self.v[0xF] = val & 1

    def _8xy7(self, ins):  # SUBN Vx, Vy
        vx = self.v[ins.x]
        vy = self.v[ins.y]
        self.v[ins.x] = (vy - vx) & 0xFF
        self.v[0xF] = int(vy >= vx)

    def _8xyE(self, ins):  # SHL Vx
        val = self.v[ins.x]
        self.v[ins.x] = (val << 1) & 0xFF
        self.v[0xF] = val >> 7

    def _9xy0(self, ins):  # SNE Vx, Vy
        if self.v[ins.x] != self.v[ins.y]:
            self.inc_pc()

    def _Annn(self, ins):  # LD I, addr
        self.i = ins.nnn

    def _Bnnn(self, ins):  # JP V0, addr
        # May land past 0xFFF.  The next fetch reports that.
        self.pc = ins.nnn + self.v[0x0]

    def _Cxkk(self, ins):  # RND Vx, byte
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.v[ins.x] = self.rng.randint(0, 0xFF) & ins.kk

    def _Dxyn(self, ins):  # DRW Vx, Vy, nibble
        sprite = self.ram.read_block(self.i, ins.n)
        self.v[0xF] = int(self.framebuffer.draw(self.v[ins.x], self.v[ins.y], sprite))

    def _Ex9E(self, ins):  # SKP Vx
        # Only the low nibble of Vx names a key
        if self.keypad.is_pressed(self.v[ins.x] & 0xF):
            self.inc_pc()

    def _ExA1(self, ins):  # SKNP Vx
        if not self.keypad.is_pressed(self.v[ins.x] & 0xF):
            self.inc_pc()

    def _Fx07(self, ins):  # LD Vx, DT
        self.v[ins.x] = self.timers.dt

    def _Fx0A(self, ins):  # LD Vx, K
        # The PC already points past this instruction, so execution resumes there once a key arrives
        self.state = AWAITING_KEY
        self.wait_register = ins.x

    def _Fx15(self, ins):  # LD DT, Vx
        self.timers.set_delay(self.v[ins.x])

    def _Fx18(self, ins):  # LD ST, Vx
        self.timers.set_sound(self.v[ins.x])

    def _Fx1E(self, ins):  # ADD I, Vx
        # Not capped at 0xFFF.  RAM checks the address when I is next used.
        self.i = (self.i + self.v[ins.x]) & 0xFFFF

    def _Fx29(self, ins):  # LD F, Vx
        self.i = FONT_LOCATION + FONT_GLYPH_SIZE * self.v[ins.x]

    def _Fx33(self, ins):  # LD B, Vx
        val = self.v[ins.x]
        # Hundreds, tens, then units.  Written as one block so nothing is stored if I+2 is out of range.
        self.ram.write_block(self.i, bytes((val // 100, (val // 10) % 10, val % 10)))

    def _Fx55(self, ins):  # LD [I], Vx
        # Ensure with +1 that the final register is copied
        self.ram.write_block(self.i, bytes(self.v[:ins.x + 1]))

    def _Fx65(self, ins):  # LD Vx, [I]
        self.v[:ins.x + 1] = self.ram.read_block(self.i, ins.x + 1)
