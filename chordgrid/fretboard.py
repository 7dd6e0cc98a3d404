import logging
from io import StringIO

import svgwrite

import chordgrid

from .layout import Layout
from .models import DiagramParameters, FingeredString, is_open, is_silent
from .utils import merge_style, parse_positions, truncate_name

logger = logging.getLogger(__name__)

# fretboard = GuitarFretboard(positions='133211', title='F')
# fretboard.set_barre(string=0, fret=1)
# fretboard.draw()
# fretboard.save('F.svg')


class Fretboard(object):
    default_style = merge_style(chordgrid.FRETBOARD_STYLE)
    string_count = None

    def __init__(
            self,
            positions=None,
            title=None,
            first_fret_offset=0,
            barre=None,
            style=None,
            layout=None,
            parameters=None
    ):
        if parameters is not None:
            title, first_fret_offset, barre = parameters

        self.layout = Layout(
            string_count=self.string_count,
            overrides=layout,
        )
        self.positions = parse_positions(positions)
        self.title = title
        self.first_fret_offset = first_fret_offset
        self.barre = FingeredString(*barre) if barre is not None else None

        self.style = merge_style(self.default_style, style)

        self.drawing = self.new_drawing()

    @property
    def parameters(self):
        return DiagramParameters(
            name=self.title,
            first_fret_offset=self.first_fret_offset,
            barre=self.barre,
        )

    def set_barre(self, string, fret):
        self.barre = FingeredString(string=string, fret=fret)

    def new_drawing(self):
        return svgwrite.Drawing(size=self.layout.canvas_size())

    def barre_is_active(self):
        return (self.barre is not None
                and self.layout.is_valid_string(self.barre.string)
                and 1 <= self.barre.fret <= self.layout.fret_count)

    def is_under_barre(self, string):
        return self.barre_is_active() and string >= self.barre.string

    def draw_nut(self):
        group = self.drawing.g()
        group.add(
            self.drawing.rect(
                insert=(self.layout.nut_offset_x, self.layout.nut_offset_y),
                size=(self.layout.neck_width, self.layout.nut_depth),
                fill=self.style.nut.color,
            )
        )
        return group

    def draw_frets(self):
        group = self.drawing.g()
        start_x = self.layout.nut_offset_x
        end_x = start_x + self.layout.neck_width

        for fret in range(1, self.layout.fret_count + 1):
            y = self.layout.fret_y(fret)
            group.add(
                self.drawing.line(
                    start=(start_x, y),
                    end=(end_x, y),
                    stroke=self.style.fret.color,
                    stroke_width=self.layout.fret_width,
                )
            )
        return group

    def draw_strings(self):
        group = self.drawing.g()
        top = self.layout.nut_offset_y
        bottom = top + self.layout.string_length

        for string in range(self.layout.string_count):
            x = self.layout.string_x(string)
            group.add(
                self.drawing.line(
                    start=(x, top),
                    end=(x, bottom),
                    stroke=self.style.string.color,
                    stroke_width=self.layout.string_width,
                )
            )
        return group

    def draw_marker(self, string, fret):
        """
        Draw what a single string is doing: an open ring, a silent X or a
        dot on the pressed fret. Out of range positions draw nothing.
        """
        group = self.drawing.g()

        if not self.layout.is_valid_string(string):
            logger.debug('Ignoring string %d, diagram has %d strings',
                         string, self.layout.string_count)
            return group
        if fret > self.layout.fret_count:
            logger.debug('Ignoring fret %d on string %d, diagram has %d frets',
                         fret, string, self.layout.fret_count)
            return group

        x = self.layout.string_x(string)

        if is_open(fret):
            if not self.is_under_barre(string):
                group.add(
                    self.drawing.circle(
                        center=(x, self.layout.open_row_y()),
                        r=self.style.open.radius,
                        fill='none',
                        stroke=self.style.open.color,
                        stroke_width=self.style.open.stroke_width,
                    )
                )
        elif is_silent(fret):
            if not self.is_under_barre(string):
                y = self.layout.open_row_y()
                size = self.style.silent.size
                for dy in (-size, size):
                    group.add(
                        self.drawing.line(
                            start=(x - size, y - dy),
                            end=(x + size, y + dy),
                            stroke=self.style.silent.color,
                            stroke_width=self.style.silent.stroke_width,
                        )
                    )
        else:
            group.add(
                self.drawing.circle(
                    center=(x, self.layout.marker_y(fret)),
                    r=self.style.marker.radius,
                    fill=self.style.marker.color,
                )
            )
        return group

    def draw_barre(self):
        group = self.drawing.g()
        if not self.barre_is_active():
            if self.barre is not None:
                logger.debug('Ignoring barre at string %d, fret %d',
                             *self.barre)
            return group

        radius = self.style.marker.radius
        start_x = self.layout.string_x(self.barre.string)
        end_x = self.layout.string_x(self.layout.string_count - 1)
        y = self.layout.marker_y(self.barre.fret)

        group.add(
            self.drawing.rect(
                insert=(start_x - radius, y - radius),
                size=(end_x - start_x + radius * 2, radius * 2),
                rx=radius,
                ry=radius,
                fill=self.style.barre.color,
            )
        )
        return group

    def draw_markers(self):
        group = self.drawing.g()
        group.add(self.draw_barre())
        for string, fret in enumerate(self.positions):
            group.add(self.draw_marker(string, fret))
        return group

    def draw_title(self):
        group = self.drawing.g()
        name = truncate_name(self.title, self.style.title.max_length)
        if not name:
            return group

        text_width = (len(name)
                      * self.style.title.font_size
                      * self.style.title.char_width)
        x = max(
            self.layout.nut_offset_x + (self.layout.neck_width - text_width) / 2,
            0
        )
        y = self.layout.title_depth / 2

        group.add(
            self.drawing.text(
                name,
                insert=(x, y),
                font_family=self.style.title.font_family,
                font_size=self.style.title.font_size,
                font_weight='bold',
                fill=self.style.title.font_color,
                text_anchor='start',
                alignment_baseline='central',
            )
        )
        return group

    def draw_fret_label(self):
        group = self.drawing.g()
        if not 1 <= self.first_fret_offset < 10:
            return group

        x = self.layout.nut_offset_x - self.layout.string_separation / 2
        y = self.layout.marker_y(1)
        group.add(
            self.drawing.text(
                '{0}'.format(self.first_fret_offset),
                insert=(x, y),
                font_family=self.style.drawing.font_family,
                font_size=self.style.fret_label.font_size,
                font_weight='bold',
                fill=self.style.fret_label.font_color,
                text_anchor='end',
                alignment_baseline='central',
            )
        )
        return group

    def draw(self):
        self.drawing = self.new_drawing()

        if self.style.drawing.background_color is not None:
            self.drawing.add(
                self.drawing.rect(
                    insert=(0, 0),
                    size=self.layout.canvas_size(),
                    fill=self.style.drawing.background_color
                )
            )

        self.drawing.add(self.draw_title())
        self.drawing.add(self.draw_fret_label())
        self.drawing.add(self.draw_frets())
        self.drawing.add(self.draw_strings())
        self.drawing.add(self.draw_nut())
        self.drawing.add(self.draw_markers())
        return self.drawing

    def render(self, output=None):
        self.draw()

        if output is None:
            output = StringIO()

        self.drawing.write(output)
        return output

    def save(self, filename):
        with open(filename, 'w') as output:
            self.render(output)


class GuitarFretboard(Fretboard):
    string_count = 6


class BassFretboard(Fretboard):
    string_count = 4
