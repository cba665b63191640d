#!/usr/bin/env python3

"""
Framebuffer Emulator

A 64x32 grid of 1-bit pixels.  Programs cannot write to video memory directly.
Instead, sprites are drawn using an XOR method: each set bit in a sprite row
flips the pixel beneath it.

A collision is reported when any flip turns a lit pixel off.  Wrapping is done
per pixel, so a sprite hanging off the right edge continues on the left edge,
and one hanging off the bottom continues at the top.

Only the CPU mutates the framebuffer.  Renderers should take a snapshot with
get_frame() once per display refresh rather than holding the live buffer.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import VID_WIDTH, VID_HEIGHT


class Framebuffer:
    def __init__(self, vid_width=VID_WIDTH, vid_height=VID_HEIGHT):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.vram = bytearray(self.vid_size)
        self.changed = True  # Force the first frame to be drawn

    def clear(self):
        self.vram[:] = bytes(self.vid_size)
        self.changed = True

    def xor_pixel(self, x, y):
        # Returns True if a lit pixel was turned off
        x %= self.vid_width
        y %= self.vid_height
        vram_loc = y * self.vid_width + x
        pixel = self.vram[vram_loc]
        self.vram[vram_loc] = pixel ^ 1
        self.changed = True

        return pixel == 1

    def draw(self, x, y, sprite):
        # Each sprite byte is one 8-pixel row, most significant bit on the left
        collision = False

        for row, spr_data in enumerate(sprite):
            for col in range(8):
                if spr_data & (0x80 >> col):
                    # Don't stop drawing on a collision.  The flag covers the whole sprite.
                    if self.xor_pixel(x + col, y + row):
                        collision = True

        return collision

    def get_frame(self):
        # Immutable copy, safe to hand to another thread
        width = self.vid_width
        return tuple(
            tuple(bool(pixel) for pixel in self.vram[row:row + width]) for row in range(0, self.vid_size, width)
        )

    def consume_changed(self):
        # Lets a renderer skip redrawing when nothing has been drawn since the last frame
        changed = self.changed
        self.changed = False
        return changed
