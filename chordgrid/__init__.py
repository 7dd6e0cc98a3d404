import logging
from importlib import resources

import yaml

__version__ = '1.0.0'
__license__ = 'MIT'

logging.getLogger(__name__).addHandler(logging.NullHandler())

config = yaml.safe_load(
    resources.files(__name__).joinpath('config.yml').read_text(encoding='utf-8')
)
LAYOUT = config['layout']
FRETBOARD_STYLE = config['fretboard']

from .models import OPEN, SILENT, FingeredString, DiagramParameters, MouseCoordinates
from .layout import Layout
from .fretboard import Fretboard, GuitarFretboard, BassFretboard
from .chord import Chord, GuitarChord, BassChord
