#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the emulator, replacing args with a dictionary
of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_COPYRIGHT, DEFAULT_KEYMAP
from .debugger import Debugger
from .driver import Driver
from .hostio import Loader
from .machine import Machine


class StartupError(Exception):
    pass


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))
    opt_renderer = args["renderer"]
    mute_audio = args["mute"]

    # flake8: noqa: F401
    if opt_renderer is None or opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel
        try:
            import pygame
        except ImportError:
            raise StartupError(
                "PyGame does not appear to be installed.  Use the null renderer to run without a display."
            ) from None

        from .inputs.i_pygame import Inputs
        from .renderers.r_pygame import Renderer

        if mute_audio:
            from .audio.a_null import Audio
        else:
            from .audio.a_pygame import Audio
    elif opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer
        from .audio.a_null import Audio
    else:
        raise StartupError("Unknown renderer '{}'".format(opt_renderer))

    # Set up debugger and live output if necessary
    debugger = Debugger()
    debugger.set_live(args["debug"])

    # Build the machine, then read the ROM binary and write it into RAM
    machine = Machine(debugger)
    machine.load_rom(Loader().load_binary(args["filename"]))

    renderer = Renderer(scale=args["scale"], pygame_palette=args.get("pygame_palette"))

    # Set up host inputs, and link to the chosen rendering module in case it provides inputs too
    inputs = Inputs(args["keymap"] or DEFAULT_KEYMAP, machine.keypad, renderer)
    audio = Audio()

    driver = Driver(machine, renderer, inputs, audio, clock_speed=args["clock_speed"])

    try:
        driver.run()
    finally:
        # The machine has stopped, so shut down the host plugins.  __del__ cannot be relied upon when using PyPy
        audio.shutdown()
        inputs.shutdown()
        renderer.shutdown()
