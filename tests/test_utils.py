import chordgrid
from chordgrid.models import SILENT
from chordgrid.utils import (
    clamp,
    convert_int,
    dict_merge,
    fit_positions,
    format_positions,
    merge_style,
    parse_positions,
    truncate_name,
)


def test_dict_merge_recurses() -> None:
    base = {'marker': {'color': 'black', 'radius': 7}, 'nut': {'color': 'black'}}
    dict_merge(base, {'marker': {'color': 'red'}})
    assert base == {'marker': {'color': 'red', 'radius': 7}, 'nut': {'color': 'black'}}


def test_merge_style_leaves_defaults_alone() -> None:
    style = merge_style(chordgrid.FRETBOARD_STYLE, {'marker': {'radius': 20}})
    assert style.marker.radius == 20
    assert chordgrid.FRETBOARD_STYLE['marker']['radius'] == 7


def test_merge_style_skips_empty() -> None:
    assert merge_style({'a': 1}, None, {}) == {'a': 1}


def test_clamp() -> None:
    assert clamp(-3, 0, 5) == 0
    assert clamp(3, 0, 5) == 3
    assert clamp(8, 0, 5) == 5


def test_convert_int() -> None:
    assert convert_int(3) == 3
    assert convert_int('12') == 12
    assert convert_int('x') == SILENT
    assert convert_int(None) == SILENT
    assert convert_int(-1) == -1


def test_parse_positions_pads_to_string_count() -> None:
    assert parse_positions('02', string_count=4) == [0, 2, SILENT, SILENT]
    assert parse_positions(None) == []


def test_format_positions() -> None:
    assert format_positions([-1, 3, 2, 0, 1, 0]) == 'x32010'
    assert format_positions([-1, 10, 12, 12]) == 'x-10-12-12'


def test_truncate_name() -> None:
    assert truncate_name('Dsus4', 9) == 'Dsus4'
    assert truncate_name('C#m7b5add11', 9) == 'C#m7b5add'
    assert truncate_name(None, 9) == ''


def test_fit_positions() -> None:
    assert fit_positions([-1, 3, 2, 0, 1, 0], 5) == (0, [-1, 3, 2, 0, 1, 0])
    assert fit_positions([8, 10, 10, 9, 8, 8], 5) == (8, [1, 3, 3, 2, 1, 1])
    assert fit_positions([SILENT] * 6, 5) == (0, [SILENT] * 6)
