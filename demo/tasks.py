import os

import invoke
import livereload

from chordgrid import BassChord, GuitarChord, GuitarFretboard

server = livereload.Server()


@invoke.task
def clean(ctx):
    os.system('rm -rf ./svg/*.svg')


@invoke.task
def build(ctx):
    os.makedirs('svg', exist_ok=True)

    # Chord (D)
    chord = GuitarChord(positions='xx0232', title='D')
    chord.save('svg/D.svg')

    # Barre chord (F)
    chord = GuitarChord(positions='133211', barre=(0, 1), title='F')
    chord.save('svg/F.svg')

    # A shape, moved up to the 5th fret
    chord = GuitarChord.fit('5-7-7-6-5-5', barre_fret=5, title='A')
    chord.save('svg/A-barre.svg')

    # C shape, higher up the neck than the label goes
    chord = GuitarChord.fit('x-15-14-12-13-12', title='C')
    chord.save('svg/C-shape.svg')

    # Bass chord (E)
    chord = BassChord(positions='0221', title='E5')
    chord.save('svg/bass-E.svg')

    # Fretboard with a dark style
    fb = GuitarFretboard(
        positions='320003',
        title='G',
        style={
            'drawing': {'background_color': 'black'},
            'fret': {'color': 'darkslategray'},
            'nut': {'color': 'slategray'},
            'string': {'color': 'darkslategray'},
            'marker': {'color': 'cornflowerblue'},
            'open': {'color': 'white'},
            'silent': {'color': 'white'},
            'title': {'font_color': 'white'},
        }
    )
    fb.save('svg/G-dark.svg')


@invoke.task(pre=[clean, build])
def serve(ctx):
    server.watch(__file__, lambda: os.system('invoke build'))
    server.watch('index.html', lambda: os.system('invoke build'))
    server.watch('../chordgrid/', lambda: os.system('invoke build'))

    server.serve(
        root='.',
        host='localhost',
        liveport=35729,
        port=8080
    )
