#!/usr/bin/env python3

"""
Interpreter Debugger

If enabled, this will output information before each instruction executed:
    * All 16 of the [V] registers, starting with most significant (Vf) and
      reducing to least significant (V0)
    * I  - Index register
    * DT - Delay timer
    * ST - Sound timer
    * PC - Program counter
    * OP - OpCode number
    * IN - Decoded instruction

If a crash occurs, all of the above will be outputted, with the addition of:
    * SP    - Stack pointer
    * Stack - Stack contents

Instructions are decoded into mnemonics with the same two-level lookup the
Interpreter uses, so anything that cannot be executed shows up as "???".
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

UNKNOWN_MNEMONIC = "???"

# Mnemonic templates, keyed by prefix.  Formatted with the opcode's fields.
MNEMONICS = {
    0x1: "JP 0x{address:03x}",
    0x2: "CALL 0x{address:03x}",
    0x3: "SE V{x:01x}, 0x{byte:02x}",
    0x4: "SNE V{x:01x}, 0x{byte:02x}",
    0x5: "SE V{x:01x}, V{y:01x}",
    0x6: "LD V{x:01x}, 0x{byte:02x}",
    0x7: "ADD V{x:01x}, 0x{byte:02x}",
    0x9: "SNE V{x:01x}, V{y:01x}",
    0xA: "LD I, 0x{address:03x}",
    0xB: "JP V0, 0x{address:03x}",
    0xC: "RND V{x:01x}, 0x{byte:02x}",
    0xD: "DRW V{x:01x}, V{y:01x}, 0x{nibble:01x}"
}

# Prefixes needing a second lookup, keyed by the field that selects the instruction
SUB_MNEMONICS = {
    0x0: ("byte", {
        0xE0: "CLS",
        0xEE: "RET"
    }),
    0x8: ("nibble", {
        0x0: "LD V{x:01x}, V{y:01x}",
        0x1: "OR V{x:01x}, V{y:01x}",
        0x2: "AND V{x:01x}, V{y:01x}",
        0x3: "XOR V{x:01x}, V{y:01x}",
        0x4: "ADD V{x:01x}, V{y:01x}",
        0x5: "SUB V{x:01x}, V{y:01x}",
        0x6: "SHR V{x:01x}, V{y:01x}",
        0x7: "SUBN V{x:01x}, V{y:01x}",
        0xE: "SHL V{x:01x}, V{y:01x}"
    }),
    0xE: ("byte", {
        0x9E: "SKP V{x:01x}",
        0xA1: "SKNP V{x:01x}"
    }),
    0xF: ("byte", {
        0x07: "LD V{x:01x}, DT",
        0x0A: "LD V{x:01x}, K",
        0x15: "LD DT, V{x:01x}",
        0x18: "LD ST, V{x:01x}",
        0x1E: "ADD I, V{x:01x}",
        0x29: "LD F, V{x:01x}",
        0x33: "LD B, V{x:01x}",
        0x55: "LD [I], V{x:01x}",
        0x65: "LD V{x:01x}, [I]"
    })
}


def disassemble(opcode):
    prefix = opcode.prefix
    template = MNEMONICS.get(prefix)

    if template is None:
        field, table = SUB_MNEMONICS[prefix]
        template = table.get(getattr(opcode, field))

        if template is None:
            return UNKNOWN_MNEMONIC

    return template.format(x=opcode.x, y=opcode.y, nibble=opcode.nibble, byte=opcode.byte, address=opcode.address)


class Debugger:
    def __init__(self):
        self.live = False

    def debug(self, interpreter, instruction, verbose=False):
        registers = interpreter.get_registers()

        debug_str = (
            "V: 0x" + ("{:02x}" * 16) + " I: 0x{:04x} DT: 0x{:02x} ST: 0x{:02x} PC: 0x{:03x} OP: 0x{:04x} IN: {}"
        ).format(
            *[registers[reg_num] for reg_num in range(15, -1, -1)] +
            [
                interpreter.get_index(), interpreter.get_delay_timer(), interpreter.get_sound_timer(),
                interpreter.debug_pc, interpreter.opcode.full, instruction
            ]
        )

        if verbose:
            stack_items = interpreter.get_stack()
            stack_str = (" 0x{:03x}" * len(stack_items)).format(*stack_items)
            debug_str += "\nSP: {}".format(interpreter.get_sp())
            debug_str += "\nStack:{}".format(stack_str or " (Empty)")

        return debug_str

    def set_live(self, enabled):
        self.live = bool(enabled)

    def is_live(self):
        return self.live

    def output(self, interpreter, instruction):
        print(self.debug(interpreter, instruction))
