#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "OctaChip Emulator"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Memory layout
MEMORY_SIZE = 0x1000
PROG_START_ADDRESS = 0x200
MAX_ROM_SIZE = MEMORY_SIZE - PROG_START_ADDRESS

# Machine state sizes
V_REG_COUNT = 0x10
STACK_SIZE = 16
KEY_COUNT = 0x10
FRAME_WIDTH = 64
FRAME_HEIGHT = 32

# Built-in hexadecimal font, 5 bytes per glyph
FONT_START_ADDRESS = 0x050
FONT_CHAR_SIZE = 5
SYSTEM_FONT = bytes((
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

# Timing
TIMER_FREQ = 60              # 60Hz timer decrement and display refresh
DEFAULT_CLOCK_SPEED = 700    # Instructions per second
MAX_FRAME_DELTA = 0.25       # Longest stretch of wall time replayed in one loop

# Default mappings for keys 0-F, later populated into a dictionary.  Note that the keyscans (on a UK QWERTY keyboard)
# and ASCII characters for these are the same code
DEFAULT_KEYMAP = "120,49,50,51,113,119,101,97,115,100,122,99,52,114,102,118"

# Configurable quirks
CPU_QUIRKS = ["shift", "load", "wrap", "logic", "jump", "index_overflow"]

# Quirk presets.  "modern" matches the interpreter's own defaults.
QUIRK_PRESETS = {
    "modern": {
        "shift": True, "load": False, "wrap": False, "logic": False, "jump": False, "index_overflow": False
    },
    "chip8": {   # COSMAC VIP behaviour
        "shift": False, "load": True, "wrap": False, "logic": True, "jump": False, "index_overflow": False
    },
    "schip": {   # HP48 Super-CHIP behaviour
        "shift": True, "load": False, "wrap": False, "logic": False, "jump": True, "index_overflow": False
    },
    "xochip": {  # Octo XO-CHIP behaviour
        "shift": False, "load": True, "wrap": True, "logic": False, "jump": False, "index_overflow": False
    }
}
