import pytest

from chordgrid import BassFretboard, GuitarFretboard, Layout


def shapes(element):
    """Flatten nested groups into their drawable leaves."""
    leaves = []
    for child in element.elements:
        if child.elementname == 'g':
            leaves.extend(shapes(child))
        else:
            leaves.append(child)
    return leaves


@pytest.fixture
def layout():
    return Layout()


@pytest.fixture
def guitar():
    return GuitarFretboard()


@pytest.fixture
def bass():
    return BassFretboard()
