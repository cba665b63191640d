#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

This module can be used on its own as a Renderer plugin if you only want to see
debug output, or are running headless.  The last frame handed over is kept, so
it can be inspected.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class RendererError(Exception):
    pass


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale
        self.frame = None
        self.title = ""

    def draw_frame(self, frame):
        # 'frame' is an immutable snapshot: rows of booleans, top row first
        self.frame = frame

    def set_title(self, title):
        self.title = title

    def shutdown(self):
        pass
