#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the emulator, replacing args with a dictionary
of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.

Renderer and input plugins come in matching pairs (renderers/r_<name>.py and
inputs/i_<name>.py), and are only imported once chosen, so a missing PyGame or
Curses install only matters if that pair is actually used.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from importlib import import_module
from .constants import APP_INTRO, APP_COPYRIGHT, CPU_QUIRKS, QUIRK_PRESETS
from .debugger import Debugger
from .emulator import Emulator
from .hostio import Loader
from .interpreter import Interpreter
from .rng import RandomSource

# Plugin name -> (host module it needs, name shown if that module is missing)
PLUGIN_BACKENDS = {
    "pygame": ("pygame", "PyGame"),
    "curses": ("curses", "Curses (or Windows-Curses)"),
    "null": (None, None)
}

# Tried in order when no renderer is requested
AUTO_SELECT_ORDER = ("pygame", "curses")


class StartupError(Exception):
    pass


def resolve_quirks(args):
    # Start from the chosen preset, then apply any individual overrides
    preset_name = args["arch"] or "modern"
    preset = QUIRK_PRESETS.get(preset_name)

    if preset is None:
        raise StartupError("Unknown quirk preset: {}".format(preset_name))

    quirk_settings = {}

    for cpu_quirk in CPU_QUIRKS:
        quirk_label = "{}_quirks".format(cpu_quirk)
        override = args[quirk_label]
        quirk_settings[quirk_label] = preset[cpu_quirk] if override is None else bool(override)

    return quirk_settings


def _backend_available(module_name):
    if module_name is None:
        return True

    try:
        import_module(module_name)
    except ImportError:
        return False

    return True


def select_plugins(opt_renderer):
    if opt_renderer is None:
        for candidate in AUTO_SELECT_ORDER:
            if _backend_available(PLUGIN_BACKENDS[candidate][0]):
                opt_renderer = candidate
                break
        else:
            raise StartupError("Neither PyGame nor Curses (or Windows-Curses) appear to be installed.")

    elif opt_renderer not in PLUGIN_BACKENDS:
        raise StartupError("Unknown renderer: {}".format(opt_renderer))

    else:
        backend_module, backend_name = PLUGIN_BACKENDS[opt_renderer]

        if not _backend_available(backend_module):
            raise StartupError("{} does not appear to be installed.".format(backend_name))

    renderer_module = import_module(".renderers.r_{}".format(opt_renderer), __name__)
    inputs_module = import_module(".inputs.i_{}".format(opt_renderer), __name__)
    return renderer_module.Renderer, inputs_module.Inputs


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))
    quirk_settings = resolve_quirks(args)
    Renderer, Inputs = select_plugins(args["renderer"])

    # Read the ROM before opening any windows, so a bad filename fails cleanly
    rom = Loader().load_binary(args["filename"])

    debugger = Debugger()
    debugger.set_live(args["debug"])

    interpreter = Interpreter(rng=RandomSource(args["seed"]), debugger=debugger, **quirk_settings)
    interpreter.load_rom(rom)

    renderer = Renderer(
        scale=args["scale"],
        pygame_palette=args["pygame_palette"],
        curses_cursor_mode=args["curses_cursor_mode"],
        smoothing=args["smoothing"]
    )

    # Input plugins may hook into the renderer (Curses shares its screen), so they are built second
    try:
        inputs = Inputs(args["keymap"], renderer)
    except Exception:
        renderer.shutdown()
        raise

    emulator = Emulator(interpreter, renderer, inputs, clock_speed=args["clock_speed"])

    try:
        emulator.run()
    finally:
        # __del__ cannot be relied upon to restore the host display when using PyPy
        inputs.shutdown()
        renderer.shutdown()
