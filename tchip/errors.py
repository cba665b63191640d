#!/usr/bin/env python3

"""
Virtual Machine Errors

Every condition that halts the emulated machine derives from VMError, so a
driver can catch the whole family in one place.  None of these are recoverable
inside the VM itself, and they are never silently corrected: the running
program is in an undefined state once one has been raised.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class VMError(Exception):
    pass


class RAMError(VMError):
    pass


class RomTooLarge(RAMError):
    def __init__(self, size, capacity):
        self.size = size
        self.capacity = capacity
        super().__init__("ROM is {} bytes, but only {} bytes are available".format(size, capacity))


class AddressOutOfRange(RAMError):
    def __init__(self, address):
        self.address = address
        super().__init__("Memory address 0x{:04x} is out of range".format(address))


class StackError(VMError):
    pass


class StackOverflow(StackError):
    def __init__(self):
        super().__init__("Stack overflow")


class StackUnderflow(StackError):
    def __init__(self):
        super().__init__("Stack underflow")


class CPUError(VMError):
    pass


class UnrecognizedOpcode(CPUError):
    def __init__(self, opcode, message=None):
        self.opcode = opcode
        super().__init__(message or "Unrecognized opcode 0x{:04x}".format(opcode))
