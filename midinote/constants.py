"""MIDI note-number constants.

Convention: **C4 = 60** (Middle C), so ``midi = pitch_class + (octave + 1) * 12``
and the full MIDI range 0-127 spans C-1 through G9.

- `MIDI_NOTE_MIN = 0` / `MIDI_NOTE_MAX = 127` - valid note numbers
- `SEMITONES_PER_OCTAVE = 12` - chromatic pitch classes per octave
- `MIDI_OCTAVE_OFFSET = 1` - MIDI 0 sits in octave -1
"""

MIDI_NOTE_MIN = 0
MIDI_NOTE_MAX = 127

SEMITONES_PER_OCTAVE = 12
MIDI_OCTAVE_OFFSET = 1
