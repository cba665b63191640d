#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Draws frames onto an SDL window surface via PyGame.  The surface is allocated
at the emulated screen size (64x32), and then the contents are stretched (using
'Nearest Neighbour' translation) to fit the window itself.  This means we don't
have to draw the same pixel multiple times.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import RendererError, Renderer as RendererBase
from ..constants import APP_NAME

DEFAULT_PALETTE = "222222,DDDDDD"  # Background, foreground


class Renderer(RendererBase):
    def __init__(self, scale=None, pygame_palette=None, **kwargs):
        if scale is None:
            scale = 512  # Default window width if not supplied

        pygame.display.init()
        self.scaled_size = (scale, scale // 2)
        self.display_surface = pygame.display.set_mode(self.scaled_size)
        self.rgb_map = self._parse_palette(DEFAULT_PALETTE if pygame_palette is None else pygame_palette)
        super().__init__(scale)
        self.set_title(APP_NAME)

    def _parse_palette(self, palette):
        palette_split = palette.split(",")

        if len(palette_split) != 2:
            raise RendererError("Exactly 2 palette colours must be defined.")

        rgb_map = []

        for colour in palette_split:
            if len(colour) != 6:
                raise RendererError("Palette colours must all be 6 hex digits long.")

            try:
                rgb = int(colour, 16)
            except ValueError:
                raise RendererError("Invalid palette colour defined.") from None

            # Split compound RGB values for faster byte-based lookup later
            rgb_map.append(bytes((rgb >> 16, (rgb >> 8) & 0xFF, rgb & 0xFF)))

        return rgb_map

    def draw_frame(self, frame):
        super().draw_frame(frame)
        height = len(frame)
        width = len(frame[0]) if height else 0
        background, foreground = self.rgb_map

        # Build the whole RGB buffer at once to minimise PyGame calls
        rgb_buffer = b"".join(foreground if pixel else background for row in frame for pixel in row)
        render_surface = pygame.image.frombuffer(rgb_buffer, (width, height), "RGB")
        scaled_win = pygame.transform.scale(render_surface, self.scaled_size)
        self.display_surface.blit(scaled_win, (0, 0))
        pygame.display.flip()

    def set_title(self, title):
        super().set_title(title)
        pygame.display.set_caption(title)

    def shutdown(self):
        # PyGame currently segfaults if display.quit is called via __del__
        pygame.display.quit()
        super().shutdown()
