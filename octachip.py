#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

from argparse import ArgumentParser
from ochip import main
from ochip.constants import APP_NAME, DEFAULT_CLOCK_SPEED, DEFAULT_KEYMAP, CPU_QUIRKS, QUIRK_PRESETS


def parse_args(argv=None):
    parser = ArgumentParser(prog="octachip", description="{}: runs CHIP-8 programs".format(APP_NAME))
    parser.add_argument("filename", help="program binary to load at 0x200 (usually .ch8)")

    system = parser.add_argument_group("system")
    system.add_argument(
        "-a", "--arch", choices=list(QUIRK_PRESETS.keys()), default="modern",
        help="quirk preset to start from (default modern)"
    )
    system.add_argument(
        "-c", "--clock_speed", type=int,
        help="instructions executed per second (default {})".format(DEFAULT_CLOCK_SPEED)
    )
    system.add_argument("--seed", type=int, help="fixed seed for RND, so runs can be repeated")

    for cpu_quirk in CPU_QUIRKS:
        system.add_argument(
            "--{}_quirks".format(cpu_quirk), type=int, choices=[0, 1],
            help="override the preset's {} quirk (0 off, 1 on)".format(cpu_quirk.replace("_", " "))
        )

    display = parser.add_argument_group("display and input")
    display.add_argument(
        "-r", "--renderer", choices=["pygame", "curses", "null"],
        help="host front end (tries pygame, then curses, if not given)"
    )
    display.add_argument(
        "-s", "--scale", type=int,
        help="PyGame window width in pixels (default 512), or Curses columns per pixel (default 2)"
    )
    display.add_argument(
        "-f", "--smoothing", type=int, default=0,
        help="Scale2x passes applied before PyGame scales the frame (default 0)"
    )
    display.add_argument("--pygame_palette", help="PyGame colours as background,foreground hex, e.g. 000000,33FF66")
    display.add_argument(
        "--curses_cursor_mode", type=int, choices=[0, 1, 2], default=0,
        help="Curses cursor visibility while running"
    )
    display.add_argument(
        "-k", "--keymap", default=DEFAULT_KEYMAP,
        help="16 comma separated host key codes for keys 0-F (PyGame keyscans, or Curses character numbers)"
    )

    parser.add_argument("-d", "--debug", action="store_true", default=False, help="print every instruction as it runs")
    return parser.parse_args(argv)  # Exits with status 2 on bad arguments


def launch():
    # A GUI front end can skip this and hand main() its own dictionary
    main(vars(parse_args()))


if __name__ == "__main__":
    launch()
