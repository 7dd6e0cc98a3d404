import logging
import math

import chordgrid

from .models import FingeredString
from .utils import clamp, merge_style

logger = logging.getLogger(__name__)


class Layout(object):
    """
    Geometry of a chord diagram.

    Everything is derived from the constants in the ``layout`` section of
    config.yml. Strings run vertically, string 0 on the left; frets run
    horizontally below the nut. Above the nut there is a row for open and
    silent string markers, and above that the title band.
    """

    def __init__(self, string_count=None, fret_count=None, overrides=None):
        self.constants = merge_style(chordgrid.LAYOUT, overrides)
        if string_count is not None:
            self.constants.string_count = string_count
        if fret_count is not None:
            self.constants.fret_count = fret_count

    @property
    def cell_size(self):
        return self.constants.cell_size

    @property
    def string_count(self):
        return self.constants.string_count

    @property
    def fret_count(self):
        return self.constants.fret_count

    @property
    def title_depth(self):
        return self.constants.title_depth

    @property
    def nut_depth(self):
        return self.constants.nut.depth

    @property
    def nut_offset_x(self):
        return self.constants.nut.offset_x

    @property
    def nut_offset_y(self):
        return self.title_depth + self.cell_size

    @property
    def fret_depth(self):
        return self.constants.fret.depth

    @property
    def fret_width(self):
        return self.constants.fret.width

    @property
    def string_separation(self):
        return self.constants.string.separation

    @property
    def string_width(self):
        return self.constants.string.width

    @property
    def string_length(self):
        return self.nut_depth + self.fret_count * self.fret_depth

    @property
    def neck_width(self):
        return self.string_separation * (self.string_count - 1)

    @property
    def canvas_width(self):
        return 2 * self.nut_offset_x + self.neck_width

    @property
    def canvas_height(self):
        return self.nut_offset_y + self.string_length + self.cell_size

    def canvas_size(self):
        return self.canvas_width, self.canvas_height

    def is_valid_string(self, string):
        return 0 <= string < self.string_count

    def is_valid_fret(self, fret):
        return 0 <= fret <= self.fret_count

    def string_x(self, string):
        return self.nut_offset_x + string * self.string_separation

    def fret_y(self, fret):
        """Y of fret wire ``fret``; fret 0 is the bottom edge of the nut."""
        return self.nut_offset_y + self.nut_depth + fret * self.fret_depth

    def marker_y(self, fret):
        """Y of the centre of the cell a finger presses to sound ``fret``."""
        return self.fret_y(fret) - self.fret_depth / 2

    def open_row_y(self):
        return self.nut_offset_y - self.cell_size / 2

    def position_at(self, x, y):
        """
        Map a click at (x, y) on the canvas to the FingeredString under it.
        Takes loose coordinates; unpack a MouseCoordinates with
        ``position_at(*click)``.

        Clicks in the open row, on the nut or anywhere above give fret 0.
        Clicks beside or below the neck are clamped to the nearest string
        and fret.
        """
        string = math.floor(
            (x - self.nut_offset_x) / self.string_separation + 0.5)
        fret = math.floor(
            (y - self.nut_offset_y - self.nut_depth) / self.fret_depth) + 1

        clamped = FingeredString(
            string=clamp(string, 0, self.string_count - 1),
            fret=clamp(fret, 0, self.fret_count),
        )
        if clamped != (string, fret):
            logger.debug('Clamped click at (%s, %s) from string %d, fret %d '
                         'to string %d, fret %d', x, y, string, fret, *clamped)
        return clamped
