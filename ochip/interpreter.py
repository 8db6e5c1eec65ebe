#!/usr/bin/env python3

"""
CHIP-8 Interpreter

Owns the machine state (memory, registers, stack, framebuffer and keypad) and
runs one instruction per tick().  The host drives it: tick() as often as the
chosen clock speed requires, and update_timers() at a steady 60Hz.  Nothing in
here sleeps, blocks or keeps time.

Decoding is a two-level lookup.  The top nibble selects an instruction
directly, or (for prefixes 0x0, 0x8, 0xE and 0xF) a second table keyed on the
low byte or low nibble.  Anything that falls through either table raises
IllegalOpcodeError.

Instruction semantics live in the 'instructions' module.  The handlers here
only pick out the state each instruction needs and pass it along, together
with any quirk flags that affect it.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from . import instructions
from .constants import (
    APP_INTRO, FONT_START_ADDRESS, MAX_ROM_SIZE, MEMORY_SIZE, PROG_START_ADDRESS, QUIRK_PRESETS, STACK_SIZE,
    SYSTEM_FONT
)
from .debugger import Debugger, disassemble
from .framebuffer import Framebuffer
from .keypad import Keypad
from .opcode import Opcode
from .ram import RAM
from .registers import Registers
from .rng import RandomSource
from .stack import Stack

DEFAULT_QUIRKS = QUIRK_PRESETS["modern"]


class InterpreterError(Exception):
    pass


class IllegalOpcodeError(InterpreterError):
    def __init__(self, message, opcode=None, address=None):
        super().__init__(message)
        self.opcode = opcode
        self.address = address


class RomSizeError(InterpreterError):
    pass


class Interpreter:
    def __init__(self, rng=None, debugger=None, shift_quirks=None, load_quirks=None, wrap_quirks=None,
                 logic_quirks=None, jump_quirks=None, index_overflow_quirks=None):

        self.rng = RandomSource() if rng is None else rng
        self.debugger = Debugger() if debugger is None else debugger

        """
        Quirks
        ------

        - Shift quirks          : 8xy6/8xyE shift Vx in place, instead of shifting Vy into Vx.
        - Load quirks           : Fx55/Fx65 advance I by x + 1 afterwards.
        - Wrap quirks           : Sprites wrap around the screen edges instead of being clipped.
        - Logic quirks          : 8xy1/8xy2/8xy3 reset VF to 0.
        - Jump quirks           : Bnnn is treated as Bxnn, jumping to xnn + Vx.
        - Index overflow quirks : Fx1E sets VF when I passes 0xFFF.

        Anything left as None takes the "modern" preset value.  reset() puts
        back whatever was chosen here.
        """

        supplied = {
            "shift": shift_quirks,
            "load": load_quirks,
            "wrap": wrap_quirks,
            "logic": logic_quirks,
            "jump": jump_quirks,
            "index_overflow": index_overflow_quirks
        }

        self.quirk_defaults = {
            quirk: DEFAULT_QUIRKS[quirk] if setting is None else bool(setting) for quirk, setting in supplied.items()
        }

        # Define instruction pointers, looked up by the opcode's first nibble
        self.instructions = {
            0x0: self._0nnn,
            0x1: self._1nnn,
            0x2: self._2nnn,
            0x3: self._3xkk,
            0x4: self._4xkk,
            0x5: self._5xy0,
            0x6: self._6xkk,
            0x7: self._7xkk,
            0x8: self._8nnn,
            0x9: self._9xy0,
            0xA: self._Annn,
            0xB: self._Bnnn,
            0xC: self._Cxkk,
            0xD: self._Dxyn,
            0xE: self._Ennn,
            0xF: self._Fnnn
        }

        # Instructions beginning with nibble 0x0, keyed on the low byte
        self.instructions_0 = {
            0xE0: self._00E0,
            0xEE: self._00EE
        }

        # Instructions beginning with nibble 0x8, keyed on the low nibble
        self.instructions_8 = {
            0x0: self._8xy0,
            0x1: self._8xy1,
            0x2: self._8xy2,
            0x3: self._8xy3,
            0x4: self._8xy4,
            0x5: self._8xy5,
            0x6: self._8xy6,
            0x7: self._8xy7,
            0xE: self._8xyE
        }

        # Instructions beginning with nibble 0xE, keyed on the low byte
        self.instructions_E = {
            0x9E: self._Ex9E,
            0xA1: self._ExA1
        }

        # Instructions beginning with nibble 0xF, keyed on the low byte
        self.instructions_F = {
            0x07: self._Fx07,
            0x0A: self._Fx0A,
            0x15: self._Fx15,
            0x18: self._Fx18,
            0x1E: self._Fx1E,
            0x29: self._Fx29,
            0x33: self._Fx33,
            0x55: self._Fx55,
            0x65: self._Fx65
        }

        # Machine state.  The font is written once here and survives every reset.
        self.ram = RAM(MEMORY_SIZE)
        self.ram.write_block(FONT_START_ADDRESS, SYSTEM_FONT)
        self.registers = Registers()
        self.stack = Stack(STACK_SIZE)
        self.framebuffer = Framebuffer()
        self.keypad = Keypad()

        # Current opcode, and the address it was fetched from, for debugging
        self.opcode = Opcode(0)
        self.debug_pc = PROG_START_ADDRESS

        self.reset()

    def reset(self):
        self.ram.zero_block(0, FONT_START_ADDRESS)
        font_top = FONT_START_ADDRESS + len(SYSTEM_FONT)
        self.ram.zero_block(font_top, MEMORY_SIZE - font_top)

        self.registers.reset()
        self.stack.clear()
        self.framebuffer.clear()
        self.keypad.clear()
        self.opcode = Opcode(0)
        self.debug_pc = PROG_START_ADDRESS

        self.shift_quirks = self.quirk_defaults["shift"]
        self.load_quirks = self.quirk_defaults["load"]
        self.wrap_quirks = self.quirk_defaults["wrap"]
        self.logic_quirks = self.quirk_defaults["logic"]
        self.jump_quirks = self.quirk_defaults["jump"]
        self.index_overflow_quirks = self.quirk_defaults["index_overflow"]

    def load_rom(self, data):
        rom_size = len(data)

        if rom_size > MAX_ROM_SIZE:
            raise RomSizeError(
                "ROM exceeds maximum size (current size: {} bytes, maximum size: {} bytes)".format(
                    rom_size, MAX_ROM_SIZE
                )
            )

        self.ram.write_block(PROG_START_ADDRESS, data)

    def fetch(self):
        return Opcode.from_bytes(self.ram.read_block(self.registers.pc, 2))

    def tick(self):
        # Keep track of the program counter before altering it in any way for debugging purposes
        self.debug_pc = self.registers.pc
        self.opcode = self.fetch()
        self.registers.pc += 2  # Program counter updates after fetch, but before execute

        if self.debugger.is_live():
            self.debugger.output(self, disassemble(self.opcode))

        self._call_instruction(self.instructions, self.opcode.prefix)

    def update_timers(self):
        registers = self.registers

        if registers.dt > 0:
            registers.dt -= 1

        if registers.st > 0:
            registers.st -= 1

    def set_key(self, key, pressed):
        self.keypad.set_key(key, pressed)

    # Quirk configuration

    def set_shift_quirks(self, enabled):
        self.shift_quirks = bool(enabled)

    def set_load_quirks(self, enabled):
        self.load_quirks = bool(enabled)

    def set_wrap_quirks(self, enabled):
        self.wrap_quirks = bool(enabled)

    def set_logic_quirks(self, enabled):
        self.logic_quirks = bool(enabled)

    def set_jump_quirks(self, enabled):
        self.jump_quirks = bool(enabled)

    def set_index_overflow_quirks(self, enabled):
        self.index_overflow_quirks = bool(enabled)

    def get_quirks(self):
        return {
            "shift": self.shift_quirks,
            "load": self.load_quirks,
            "wrap": self.wrap_quirks,
            "logic": self.logic_quirks,
            "jump": self.jump_quirks,
            "index_overflow": self.index_overflow_quirks
        }

    # Read-only accessors for renderers and debuggers.  Values are copies where the underlying state is mutable.

    def get_register(self, index):
        if index < 0 or index >= len(self.registers.v):
            raise IndexError("Invalid register index: {}".format(index))

        return self.registers.v[index]

    def get_registers(self):
        return bytes(self.registers.v)

    def get_pc(self):
        return self.registers.pc

    def get_index(self):
        return self.registers.i

    def get_sp(self):
        return self.stack.sp

    def get_delay_timer(self):
        return self.registers.dt

    def get_sound_timer(self):
        return self.registers.st

    def sound_timer_on(self):
        return self.registers.st > 0

    def get_stack_value(self, index):
        return self.stack.get_value(index)

    def get_stack(self):
        return self.stack.get_items()

    def get_frame(self):
        return self.framebuffer

    def read_memory(self, address, size=1):
        return self.ram.read_block(address, size)

    def disassemble(self, address):
        return disassemble(Opcode.from_bytes(self.ram.read_block(address, 2)))

    def disassemble_program(self):
        # One line per byte address, as sprites and data are interleaved with code
        return "\n".join(
            "0x{:04x}: {}".format(address, self.disassemble(address))
            for address in range(PROG_START_ADDRESS, MEMORY_SIZE - 1)
        )

    # Dispatch

    def _call_instruction(self, table, key):
        instruction = table.get(key)

        if instruction is None:
            self._opcode_unsupported()

        instruction()

    def _opcode_unsupported(self):
        raise IllegalOpcodeError(
            (
                "Emulation halted.\n\n" +
                "{}Debug info:\n" +
                "{}\n\nOpcode 0x{:04x} at address 0x{:03x} is not a valid instruction."
            ).format(
                APP_INTRO, self.debugger.debug(self, "???", verbose=True), self.opcode.full, self.debug_pc
            ),
            opcode=self.opcode.full,
            address=self.debug_pc
        )

    def _0nnn(self):
        self._call_instruction(self.instructions_0, self.opcode.byte)

    def _8nnn(self):
        self._call_instruction(self.instructions_8, self.opcode.nibble)

    def _Ennn(self):
        self._call_instruction(self.instructions_E, self.opcode.byte)

    def _Fnnn(self):
        self._call_instruction(self.instructions_F, self.opcode.byte)

    def _00E0(self):  # CLS
        instructions.cls(self.framebuffer)

    def _00EE(self):  # RET
        instructions.ret(self.registers, self.stack)

    def _1nnn(self):  # JP addr
        instructions.jp_addr(self.opcode, self.registers)

    def _2nnn(self):  # CALL addr
        instructions.call_addr(self.opcode, self.registers, self.stack)

    def _3xkk(self):  # SE Vx, byte
        instructions.se_vx_byte(self.opcode, self.registers)

    def _4xkk(self):  # SNE Vx, byte
        instructions.sne_vx_byte(self.opcode, self.registers)

    def _5xy0(self):  # SE Vx, Vy
        instructions.se_vx_vy(self.opcode, self.registers)

    def _6xkk(self):  # LD Vx, byte
        instructions.ld_vx_byte(self.opcode, self.registers)

    def _7xkk(self):  # ADD Vx, byte
        instructions.add_vx_byte(self.opcode, self.registers)

    def _8xy0(self):  # LD Vx, Vy
        instructions.ld_vx_vy(self.opcode, self.registers)

    def _8xy1(self):  # OR Vx, Vy
        instructions.or_vx_vy(self.opcode, self.registers, self.logic_quirks)

    def _8xy2(self):  # AND Vx, Vy
        instructions.and_vx_vy(self.opcode, self.registers, self.logic_quirks)

    def _8xy3(self):  # XOR Vx, Vy
        instructions.xor_vx_vy(self.opcode, self.registers, self.logic_quirks)

    def _8xy4(self):  # ADD Vx, Vy
        instructions.add_vx_vy(self.opcode, self.registers)

    def _8xy5(self):  # SUB Vx, Vy
        instructions.sub_vx_vy(self.opcode, self.registers)

    def _8xy6(self):  # SHR Vx {, Vy}
        instructions.shr_vx_vy(self.opcode, self.registers, self.shift_quirks)

    def _8xy7(self):  # SUBN Vx, Vy
        instructions.subn_vx_vy(self.opcode, self.registers)

    def _8xyE(self):  # SHL Vx {, Vy}
        instructions.shl_vx_vy(self.opcode, self.registers, self.shift_quirks)

    def _9xy0(self):  # SNE Vx, Vy
        instructions.sne_vx_vy(self.opcode, self.registers)

    def _Annn(self):  # LD I, addr
        instructions.ld_i_addr(self.opcode, self.registers)

    def _Bnnn(self):  # JP V0, addr
        instructions.jp_v0_addr(self.opcode, self.registers, self.jump_quirks)

    def _Cxkk(self):  # RND Vx, byte
        instructions.rnd_vx_byte(self.opcode, self.registers, self.rng)

    def _Dxyn(self):  # DRW Vx, Vy, nibble
        instructions.drw_vx_vy_nibble(self.opcode, self.ram, self.registers, self.framebuffer, self.wrap_quirks)

    def _Ex9E(self):  # SKP Vx
        instructions.skp_vx(self.opcode, self.registers, self.keypad)

    def _ExA1(self):  # SKNP Vx
        instructions.sknp_vx(self.opcode, self.registers, self.keypad)

    def _Fx07(self):  # LD Vx, DT
        instructions.ld_vx_dt(self.opcode, self.registers)

    def _Fx0A(self):  # LD Vx, K
        instructions.ld_vx_k(self.opcode, self.registers, self.keypad)

    def _Fx15(self):  # LD DT, Vx
        instructions.ld_dt_vx(self.opcode, self.registers)

    def _Fx18(self):  # LD ST, Vx
        instructions.ld_st_vx(self.opcode, self.registers)

    def _Fx1E(self):  # ADD I, Vx
        instructions.add_i_vx(self.opcode, self.registers, self.index_overflow_quirks)

    def _Fx29(self):  # LD F, Vx
        instructions.ld_f_vx(self.opcode, self.registers)

    def _Fx33(self):  # LD B, Vx
        instructions.ld_b_vx(self.opcode, self.ram, self.registers)

    def _Fx55(self):  # LD [I], Vx
        instructions.ld_i_vx(self.opcode, self.ram, self.registers, self.load_quirks)

    def _Fx65(self):  # LD Vx, [I]
        instructions.ld_vx_i(self.opcode, self.ram, self.registers, self.load_quirks)
