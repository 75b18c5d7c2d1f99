"""
midinote - convert between musical note names and MIDI note numbers.

Three representations are supported and converted losslessly within the
MIDI range:

- **Pitch class.** ``PitchClass`` - the 12 chromatic semitones C through B,
  each valued by its chromatic index (0-11) and displayed sharp-spelled.
- **Note.** ``Note`` - a pitch class plus an octave. ``Note.to_midi()`` and
  ``Note.from_midi()`` use the C4 = 60 convention, so MIDI 0 is C-1 and MIDI
  127 is G9.
- **Text.** ``"C#4"``-style names. ``parse()`` reads them and
  ``Note.format()`` writes them.

Minimal example:

    ```python
    import midinote

    note = midinote.parse("C#4")
    note.to_midi()                     # 61
    midinote.from_midi(127).format()   # "G9"
    ```

Run ``python -m midinote`` for an interactive two-step converter.

Package-level exports: ``PitchClass``, ``Note``, ``parse``, ``from_midi``.
"""

import midinote.note
import midinote.pitch_class


PitchClass = midinote.pitch_class.PitchClass
Note = midinote.note.Note
parse = midinote.note.parse
from_midi = midinote.note.from_midi
