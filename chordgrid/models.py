from collections import namedtuple

# Finger positions: negative is a silent string, zero an open one, anything
# above is the fret (counted from the top of the diagram) being pressed.
SILENT = -1
OPEN = 0

FingeredString = namedtuple('FingeredString', ['string', 'fret'])

MouseCoordinates = namedtuple('MouseCoordinates', ['x', 'y'])


class DiagramParameters(namedtuple('DiagramParameters',
                                   ['name', 'first_fret_offset', 'barre'])):
    """
    What a diagram shows besides the fingering itself.

    name = chord name drawn as the title.
    first_fret_offset = fret number of the first row, labelled beside the
    neck when it is between 1 and 9. Zero means the diagram starts at the nut.
    barre = optional FingeredString anchoring a barré; it spans from that
    string to the last one.
    """
    __slots__ = ()

    def __new__(cls, name=None, first_fret_offset=0, barre=None):
        return super(DiagramParameters, cls).__new__(
            cls, name, first_fret_offset, barre)


def is_silent(position):
    return position is None or position < OPEN


def is_open(position):
    return position == OPEN
