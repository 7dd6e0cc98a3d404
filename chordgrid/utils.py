import copy
from collections.abc import Mapping

from box import Box

from .models import OPEN, SILENT


# https://gist.github.com/angstwad/bf22d1822c38a92ec0a9
def dict_merge(dct, merge_dct):
    """ Recursive dict merge. Inspired by :meth:``dict.update()``, instead of
    updating only top-level keys, dict_merge recurses down into dicts nested
    to an arbitrary depth, updating keys. The ``merge_dct`` is merged into
    ``dct``.
    :param dct: dict onto which the merge is executed
    :param merge_dct: dct merged into dct
    :return: dct
    """
    for k, v in merge_dct.items():
        if (k in dct and isinstance(dct[k], dict)
                and isinstance(merge_dct[k], Mapping)):
            dict_merge(dct[k], merge_dct[k])
        else:
            dct[k] = merge_dct[k]
    return dct


def merge_style(*styles):
    """
    Merge style mappings left to right into a fresh Box, so defaults loaded
    from config.yml are never mutated.
    """
    merged = {}
    for style in styles:
        if style:
            dict_merge(merged, copy.deepcopy(dict(style)))
    return Box(merged)


def clamp(value, low, high):
    return max(low, min(value, high))


def convert_int(item):
    """
    Used to coerce an item from an iterable to int, but to gracefully
    handle it already being so.
    Anything that isn't a fret number ('x', '-', None) is a silent string.
    """
    if isinstance(item, bool):
        return SILENT
    if isinstance(item, int):
        return item
    if isinstance(item, str) and item.strip().isdigit():
        return int(item)
    return SILENT


def parse_positions(positions, string_count=None):
    """
    Turn the various forms of position defs into a list of ints.

    positions = string of finger positions, e.g. guitar D = 'xx0232'. If frets
    go above 9, use hyphens to separate all strings, e.g. 'x-x-0-14-15-14'.
    Alternatively, provide a list of positions, e.g. ['x', 'x', 0, 2, 3, 2].

    When string_count is given the result is padded with silent strings or
    cut down to that many strings.
    """
    if positions is None:
        positions = []
    # oops, did we put in something like 5333 without quoting?
    elif isinstance(positions, int):
        positions = list(str(positions))
    elif isinstance(positions, str):
        if '-' in positions:
            positions = positions.split('-')
        else:
            positions = list(positions)

    parsed = [convert_int(p) for p in positions]

    if string_count is not None:
        parsed = parsed[:string_count]
        parsed += [SILENT] * (string_count - len(parsed))
    return parsed


def format_positions(positions):
    """The inverse of parse_positions, e.g. [-1, -1, 0, 2, 3, 2] -> 'xx0232'."""
    tokens = ['x' if p < OPEN else str(p) for p in positions]
    if any(len(token) > 1 for token in tokens):
        return '-'.join(tokens)
    return ''.join(tokens)


def truncate_name(name, max_length):
    if not name:
        return ''
    return str(name)[:max_length]


def fit_positions(positions, fret_count):
    """
    Work out where a fingering given in absolute fret numbers should sit.

    Returns (first_fret_offset, relative positions). Chords that fit below
    the nut are left alone with an offset of 0; otherwise the lowest fretted
    note moves to the first row and the offset names that fret.
    """
    fretted = [p for p in positions if p > OPEN]
    if not fretted or max(fretted) <= fret_count:
        return 0, list(positions)

    first_fret = min(fretted)
    relative = [p - first_fret + 1 if p > OPEN else p for p in positions]
    return first_fret, relative
