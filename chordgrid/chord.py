import logging

from .fretboard import BassFretboard, GuitarFretboard
from .layout import Layout
from .models import OPEN, SILENT, DiagramParameters, FingeredString
from .utils import fit_positions, format_positions, parse_positions

logger = logging.getLogger(__name__)


class Chord(object):
    """
    Create a chord diagram.

    positions = string of finger positions, e.g. guitar D = 'xx0232'. If frets
    go above 9, use hyphens to separate all strings, e.g. 'x-x-0-11-12-11'.
    Alternatively, provide a list of positions, for example
    ['x', 'x', 0, 2, 3, 2]. Fret numbers count rows down from the top of the
    diagram; use Chord.fit() for absolute fret numbers.

    first_fret_offset = fret number of the top row, labelled beside the neck.

    barre = (string, fret) of a barré running from that string to the last.

    parameters = DiagramParameters, taking the place of title,
    first_fret_offset and barre.
    """
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

        self.layout = Layout(string_count=self.string_count, overrides=layout)
        self.layout_overrides = layout
        self.positions = parse_positions(positions, self.layout.string_count)
        self.title = title
        self.first_fret_offset = first_fret_offset
        self.barre = FingeredString(*barre) if barre is not None else None
        self.style = style

        self.fretboard = None

    @classmethod
    def fit(cls, positions, title=None, barre_fret=None, style=None,
            layout=None):
        """
        Build a chord from absolute fret numbers, moving it up the neck when
        it doesn't fit below the nut.

        barre_fret = absolute fret of a barré, anchored on the first string
        fretted there.

        A chord spanning more frets than the layout shows gets a taller
        diagram, running from its lowest to its highest fret.
        """
        fretboard_cls = cls.fretboard_cls
        if isinstance(fretboard_cls, property):
            raise NotImplementedError

        geometry = Layout(string_count=fretboard_cls.string_count,
                          overrides=layout)
        absolute = parse_positions(positions, geometry.string_count)
        first_fret_offset, relative = fit_positions(absolute, geometry.fret_count)

        widest = max(relative, default=0)
        if widest > geometry.fret_count:
            logger.debug('Widening diagram from %d to %d frets',
                         geometry.fret_count, widest)
            layout = dict(layout or {}, fret_count=widest)

        barre = None
        if barre_fret is not None and barre_fret in absolute:
            shift = first_fret_offset - 1 if first_fret_offset else 0
            barre = (absolute.index(barre_fret), barre_fret - shift)

        return cls(
            positions=relative,
            title=title,
            first_fret_offset=first_fret_offset,
            barre=barre,
            style=style,
            layout=layout,
        )

    @property
    def fretboard_cls(self):
        raise NotImplementedError

    @property
    def string_count(self):
        return self.fretboard_cls.string_count

    @property
    def parameters(self):
        return DiagramParameters(
            name=self.title,
            first_fret_offset=self.first_fret_offset,
            barre=self.barre,
        )

    def __str__(self):
        return format_positions(self.positions)

    def set_barre(self, string, fret):
        self.barre = FingeredString(string=string, fret=fret)

    def clear_barre(self):
        self.barre = None

    def toggle(self, position):
        """
        Flip one string of the fingering, the way clicking on a diagram does.

        On the nut row an open string goes silent and anything else opens.
        On a fret, pressing the fret already held lifts the finger, any other
        fret moves the finger there.
        """
        string, fret = position
        if not (self.layout.is_valid_string(string)
                and self.layout.is_valid_fret(fret)):
            logger.debug('Ignoring toggle of string %d, fret %d', string, fret)
            return None

        current = self.positions[string]

        if fret == OPEN:
            self.positions[string] = SILENT if current == OPEN else OPEN
        elif current == fret:
            self.positions[string] = OPEN
        else:
            self.positions[string] = fret

        logger.debug('String %d: %d -> %d', string, current, self.positions[string])
        return FingeredString(string=string, fret=self.positions[string])

    def click(self, x, y):
        return self.toggle(self.layout.position_at(x, y))

    def draw(self):
        self.fretboard = self.fretboard_cls(
            positions=self.positions,
            title=self.title,
            first_fret_offset=self.first_fret_offset,
            barre=self.barre,
            style=self.style,
            layout=self.layout_overrides,
        )
        self.fretboard.draw()
        return self.fretboard

    def render(self, output=None):
        return self.draw().render(output)

    def save(self, filename):
        self.draw().save(filename)


class GuitarChord(Chord):
    fretboard_cls = GuitarFretboard


class BassChord(Chord):
    fretboard_cls = BassFretboard
