#!/usr/bin/env python3

"""
Instruction Decoder

Turns a raw 16-bit opcode into an Instruction: a named tuple tagged with the
instruction's name and carrying every operand field already extracted.

    n   = lowest nibble
    kk  = lowest byte
    nnn = lowest 12 bits (address)
    x/y = register numbers held in the second and third nibbles

Several leading nibbles are shared by more than one instruction, so the first
nibble only selects a mask.  The masked opcode then picks the instruction:

    0x0     -> 0xFFFF (exact match)
    0x5/8/9 -> 0xF00F
    0xE/F   -> 0xF0FF
    others  -> 0xF000

Anything that doesn't match raises UnrecognizedOpcode.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple
from .errors import UnrecognizedOpcode

# Instruction tags
CLS = "CLS"
RET = "RET"
JP = "JP"
CALL = "CALL"
SE_BYTE = "SE_BYTE"
SNE_BYTE = "SNE_BYTE"
SE_REG = "SE_REG"
LD_BYTE = "LD_BYTE"
ADD_BYTE = "ADD_BYTE"
LD_REG = "LD_REG"
OR = "OR"
AND = "AND"
XOR = "XOR"
ADD_REG = "ADD_REG"
SUB = "SUB"
SHR = "SHR"
SUBN = "SUBN"
SHL = "SHL"
SNE_REG = "SNE_REG"
LD_I = "LD_I"
JP_V0 = "JP_V0"
RND = "RND"
DRW = "DRW"
SKP = "SKP"
SKNP = "SKNP"
LD_VX_DT = "LD_VX_DT"
LD_VX_K = "LD_VX_K"
LD_DT_VX = "LD_DT_VX"
LD_ST_VX = "LD_ST_VX"
ADD_I = "ADD_I"
LD_F = "LD_F"
LD_B = "LD_B"
LD_MEM_VX = "LD_MEM_VX"
LD_VX_MEM = "LD_VX_MEM"

MASKS = {
    0x0: 0xFFFF,
    0x5: 0xF00F,
    0x8: 0xF00F,
    0x9: 0xF00F,
    0xE: 0xF0FF,
    0xF: 0xF0FF
}

# Masked opcode -> (tag, assembly format)
PATTERNS = {
    0x00E0: (CLS, "CLS"),
    0x00EE: (RET, "RET"),
    0x1000: (JP, "JP 0x{nnn:03x}"),
    0x2000: (CALL, "CALL 0x{nnn:03x}"),
    0x3000: (SE_BYTE, "SE V{x:01x}, 0x{kk:02x}"),
    0x4000: (SNE_BYTE, "SNE V{x:01x}, 0x{kk:02x}"),
    0x5000: (SE_REG, "SE V{x:01x}, V{y:01x}"),
    0x6000: (LD_BYTE, "LD V{x:01x}, 0x{kk:02x}"),
    0x7000: (ADD_BYTE, "ADD V{x:01x}, 0x{kk:02x}"),
    0x8000: (LD_REG, "LD V{x:01x}, V{y:01x}"),
    0x8001: (OR, "OR V{x:01x}, V{y:01x}"),
    0x8002: (AND, "AND V{x:01x}, V{y:01x}"),
    0x8003: (XOR, "XOR V{x:01x}, V{y:01x}"),
    0x8004: (ADD_REG, "ADD V{x:01x}, V{y:01x}"),
    0x8005: (SUB, "SUB V{x:01x}, V{y:01x}"),
    0x8006: (SHR, "SHR V{x:01x}"),
    0x8007: (SUBN, "SUBN V{x:01x}, V{y:01x}"),
    0x800E: (SHL, "SHL V{x:01x}"),
    0x9000: (SNE_REG, "SNE V{x:01x}, V{y:01x}"),
    0xA000: (LD_I, "LD I, 0x{nnn:03x}"),
    0xB000: (JP_V0, "JP V0, 0x{nnn:03x}"),
    0xC000: (RND, "RND V{x:01x}, 0x{kk:02x}"),
    0xD000: (DRW, "DRW V{x:01x}, V{y:01x}, 0x{n:01x}"),
    0xE09E: (SKP, "SKP V{x:01x}"),
    0xE0A1: (SKNP, "SKNP V{x:01x}"),
    0xF007: (LD_VX_DT, "LD V{x:01x}, DT"),
    0xF00A: (LD_VX_K, "LD V{x:01x}, K"),
    0xF015: (LD_DT_VX, "LD DT, V{x:01x}"),
    0xF018: (LD_ST_VX, "LD ST, V{x:01x}"),
    0xF01E: (ADD_I, "ADD I, V{x:01x}"),
    0xF029: (LD_F, "LD F, V{x:01x}"),
    0xF033: (LD_B, "LD B, V{x:01x}"),
    0xF055: (LD_MEM_VX, "LD [I], V{x:01x}"),
    0xF065: (LD_VX_MEM, "LD V{x:01x}, [I]")
}

TAGS = frozenset(tag for tag, _ in PATTERNS.values())


class Instruction(namedtuple("Instruction", "tag opcode x y n kk nnn")):
    __slots__ = ()

    def __str__(self):
        return self.assembly()

    def assembly(self):
        _, fmt = PATTERNS[mask_opcode(self.opcode)]
        return fmt.format(x=self.x, y=self.y, n=self.n, kk=self.kk, nnn=self.nnn)


def mask_opcode(opcode):
    return opcode & MASKS.get(opcode >> 12, 0xF000)


def decode(opcode):
    pattern = PATTERNS.get(mask_opcode(opcode))

    if pattern is None:
        raise UnrecognizedOpcode(opcode)

    return Instruction(
        pattern[0],
        opcode,
        (opcode & 0xF00) >> 8,
        (opcode & 0xF0) >> 4,
        opcode & 0xF,
        opcode & 0xFF,
        opcode & 0xFFF
    )
