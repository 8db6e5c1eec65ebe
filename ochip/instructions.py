#!/usr/bin/env python3

"""
Instruction Set

One function per opcode.  Each takes the decoded Opcode and only the pieces of
machine state it needs, mutates them in place and returns nothing.  None of
these know about the Interpreter, so they can be driven directly by tests.

Where an instruction sets VF as well as a result register, VF is always
written last.  Programs sometimes pass VF as an operand, and the flag must win
if it is also the destination.

Errors raised here (stack and memory range errors) are fatal to the running
program and propagate straight out of Interpreter.tick().
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import FONT_START_ADDRESS, FONT_CHAR_SIZE

I_BITMASK = 0xFFFF       # Index register width
I_ADDRESS_LIMIT = 0xFFF  # Highest address I can reference without overflowing (index overflow quirk)


def cls(framebuffer):  # 00E0
    framebuffer.clear()


def ret(registers, stack):  # 00EE
    registers.pc = stack.pop()


def jp_addr(opcode, registers):  # 1nnn
    registers.pc = opcode.address


def call_addr(opcode, registers, stack):  # 2nnn
    stack.push(registers.pc)
    registers.pc = opcode.address


def se_vx_byte(opcode, registers):  # 3xkk
    if registers.v[opcode.x] == opcode.byte:
        registers.pc += 2


def sne_vx_byte(opcode, registers):  # 4xkk
    if registers.v[opcode.x] != opcode.byte:
        registers.pc += 2


def se_vx_vy(opcode, registers):  # 5xy0
    if registers.v[opcode.x] == registers.v[opcode.y]:
        registers.pc += 2


def ld_vx_byte(opcode, registers):  # 6xkk
    registers.v[opcode.x] = opcode.byte


def add_vx_byte(opcode, registers):  # 7xkk
    # No carry flag for this one
    registers.v[opcode.x] = (registers.v[opcode.x] + opcode.byte) & 0xFF


def _reset_flag_after_logic(registers, logic_quirks):
    # The original COSMAC VIP interpreter clobbered VF on all of 8xy1-8xy3
    if logic_quirks:
        registers.v[0xF] = 0


def ld_vx_vy(opcode, registers):  # 8xy0
    registers.v[opcode.x] = registers.v[opcode.y]


def or_vx_vy(opcode, registers, logic_quirks=False):  # 8xy1
    registers.v[opcode.x] |= registers.v[opcode.y]
    _reset_flag_after_logic(registers, logic_quirks)


def and_vx_vy(opcode, registers, logic_quirks=False):  # 8xy2
    registers.v[opcode.x] &= registers.v[opcode.y]
    _reset_flag_after_logic(registers, logic_quirks)


def xor_vx_vy(opcode, registers, logic_quirks=False):  # 8xy3
    registers.v[opcode.x] ^= registers.v[opcode.y]
    _reset_flag_after_logic(registers, logic_quirks)


def add_vx_vy(opcode, registers):  # 8xy4
    v = registers.v
    val = v[opcode.x] + v[opcode.y]
    v[opcode.x] = val & 0xFF
    v[0xF] = int(val > 0xFF)  # Vf is set when carrying


def _store_difference(opcode, registers, val):
    registers.v[opcode.x] = val & 0xFF
    registers.v[0xF] = int(val >= 0)  # Vf is set when NOT borrowing


def sub_vx_vy(opcode, registers):  # 8xy5
    _store_difference(opcode, registers, registers.v[opcode.x] - registers.v[opcode.y])


def subn_vx_vy(opcode, registers):  # 8xy7
    _store_difference(opcode, registers, registers.v[opcode.y] - registers.v[opcode.x])


def shr_vx_vy(opcode, registers, shift_quirks=True):  # 8xy6
    # Super-CHIP shifts Vx in place.  CHIP-8 and XO-CHIP shift Vy into Vx.
    v = registers.v
    val = v[opcode.x if shift_quirks else opcode.y]
    v[opcode.x] = val >> 1
    v[0xF] = val & 1


def shl_vx_vy(opcode, registers, shift_quirks=True):  # 8xyE
    v = registers.v
    val = v[opcode.x if shift_quirks else opcode.y]
    v[opcode.x] = (val << 1) & 0xFF
    v[0xF] = val >> 7


def sne_vx_vy(opcode, registers):  # 9xy0
    if registers.v[opcode.x] != registers.v[opcode.y]:
        registers.pc += 2


def ld_i_addr(opcode, registers):  # Annn
    registers.i = opcode.address


def jp_v0_addr(opcode, registers, jump_quirks=False):  # Bnnn
    # Super-CHIP misreads this as Bxnn, jumping to xnn + Vx
    reg = opcode.x if jump_quirks else 0
    registers.pc = opcode.address + registers.v[reg]


def rnd_vx_byte(opcode, registers, rng):  # Cxkk
    # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
    registers.v[opcode.x] = rng.generate_number() & opcode.byte


def drw_vx_vy_nibble(opcode, ram, registers, framebuffer, wrap_quirks=False):  # Dxyn
    """
    XOR an 8-pixel wide, n-row sprite from memory[I] onto the screen.

    The sprite's origin always wraps.  Pixels running off the right or bottom
    edge wrap around when wrap_quirks is set, and are clipped otherwise.  VF is
    set if any lit pixel was erased.
    """
    v = registers.v
    vid_width, vid_height = framebuffer.get_vid_size()
    vx_pos = v[opcode.x] % vid_width
    vy_pos = v[opcode.y] % vid_height
    i = registers.i
    collided = False

    for y in range(opcode.nibble):
        spr_data = ram.read(i + y)
        scr_y = vy_pos + y

        for x in range(8):
            if spr_data & (0x80 >> x):
                if framebuffer.xor_pixel(vx_pos + x, scr_y, wrap_quirks):
                    # Don't stop drawing.  Set the flag, and never unset it for this sprite.
                    collided = True

    v[0xF] = int(collided)


def skp_vx(opcode, registers, keypad):  # Ex9E
    if keypad.is_key_down(registers.v[opcode.x]):
        registers.pc += 2


def sknp_vx(opcode, registers, keypad):  # ExA1
    if not keypad.is_key_down(registers.v[opcode.x]):
        registers.pc += 2


def ld_vx_dt(opcode, registers):  # Fx07
    registers.v[opcode.x] = registers.dt


def ld_vx_k(opcode, registers, keypad):  # Fx0A
    # Rather than block, rewind the program counter so this instruction is fetched again on the next tick.  Timers and
    # the display keep running in the meantime.
    key = keypad.get_first_pressed()

    if key is None:
        registers.pc -= 2
    else:
        registers.v[opcode.x] = key


def ld_dt_vx(opcode, registers):  # Fx15
    registers.dt = registers.v[opcode.x]


def ld_st_vx(opcode, registers):  # Fx18
    registers.st = registers.v[opcode.x]


def add_i_vx(opcode, registers, index_overflow_quirks=False):  # Fx1E
    val = registers.i + registers.v[opcode.x]
    registers.i = val & I_BITMASK

    # Allow for Amiga CHIP-8 interpreter behaviour
    if index_overflow_quirks:
        registers.v[0xF] = int(val > I_ADDRESS_LIMIT)


def ld_f_vx(opcode, registers):  # Fx29
    registers.i = FONT_START_ADDRESS + FONT_CHAR_SIZE * (registers.v[opcode.x] & 0xF)


def ld_b_vx(opcode, ram, registers):  # Fx33
    val = registers.v[opcode.x]
    # Hundreds, tens, units.  Written as one block so nothing lands if I+2 is out of range.
    ram.write_block(registers.i, bytes((val // 100, (val // 10) % 10, val % 10)))


def _advance_index(opcode, registers, load_quirks):
    if load_quirks:
        registers.i = (registers.i + opcode.x + 1) & I_BITMASK


def ld_i_vx(opcode, ram, registers, load_quirks=False):  # Fx55
    ram.write_block(registers.i, registers.v[:opcode.x + 1])
    _advance_index(opcode, registers, load_quirks)


def ld_vx_i(opcode, ram, registers, load_quirks=False):  # Fx65
    count = opcode.x + 1
    registers.v[:count] = ram.read_block(registers.i, count)
    _advance_index(opcode, registers, load_quirks)
