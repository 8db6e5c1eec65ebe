#!/usr/bin/env python3

"""
Null Input Plugin

Serves as a base class for other Input plugins.  Can be used on its own if zero
input functionality is required.

Plugins never hold key state themselves.  Each host key code is looked up in
the keymap, and every change is pushed through the set_key callback handed to
process_messages() (normally Interpreter.set_key).

A keymap is a comma separated list of 16 decimal host key codes, giving the
host key for 0x0 first and 0xF last.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from ..constants import KEY_COUNT


class InputsError(Exception):
    pass


def parse_keymap(keymap, force_lowercase=False):
    # Returns {host key code: hex key}
    host_codes = keymap.split(",")

    if len(host_codes) != KEY_COUNT:
        raise InputsError(
            "Keymap defines {} keys, but {} are required.  Use commas to split numbers".format(
                len(host_codes), KEY_COUNT
            )
        )

    try:
        host_codes = [int(host_code) for host_code in host_codes]
    except ValueError:
        raise InputsError("Keymap entries must all be decimal integers") from None

    if force_lowercase:
        # Character based hosts report the lowercase code however the key was typed
        host_codes = [ord(chr(host_code).lower()) for host_code in host_codes]

    keymap_dict = {host_code: hex_key for hex_key, host_code in enumerate(host_codes)}

    if len(keymap_dict) != KEY_COUNT:
        raise InputsError("The same host key is mapped more than once")

    return keymap_dict


class Inputs:
    def __init__(self, keymap, renderer, force_lowercase=False):
        self.renderer = renderer
        self.keymap_dict = parse_keymap(keymap, force_lowercase)

    def process_messages(self, set_key):  # pylint: disable=unused-argument
        return False  # Never asks to quit

    def shutdown(self):
        pass
