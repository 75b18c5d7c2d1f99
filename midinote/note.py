"""Notes as (pitch class, octave) pairs, with MIDI and text conversions.

A `Note` pairs a `PitchClass` with an octave number. Octaves follow the
C4 = 60 convention, so MIDI note numbers map to notes by::

	midi = pitch_class_index + (octave + 1) * 12

Text names concatenate the sharp-spelled pitch class and the decimal octave
with no separator (``"C#4"``, ``"A0"``, ``"C-1"``).

Module-level helpers:
- `to_midi(note)` / `from_midi(midi)`
- `format_note(note)` / `parse(text)`

`parse()` raises a `ParseError` subclass describing the first step that failed.
"""

import dataclasses
import logging
import re

import midinote.constants
import midinote.pitch_class


logger = logging.getLogger(__name__)


# Characters that, in second position, make the note-name segment two characters long.
ACCIDENTAL_MARKERS = ("#", "b")

_OCTAVE_PATTERN = re.compile(r"[0-9]+")


class ParseError (ValueError):

	"""Base class for note name parsing failures."""


class EmptyInputError (ParseError):

	"""Raised when parsing an empty string."""

	def __init__ (self) -> None:

		super().__init__("Empty input")


class MissingOctaveError (ParseError):

	"""Raised when a note name has no octave after it."""

	def __init__ (self) -> None:

		super().__init__("No octave specified")


class InvalidOctaveError (ParseError):

	"""Raised when the octave part is not a non-negative decimal integer."""

	def __init__ (self, text: str) -> None:

		self.text = text
		super().__init__(f"Invalid octave: {text}")


class InvalidNoteNameError (ParseError):

	"""Raised when the note-name part is not a canonical sharp-spelled name."""

	def __init__ (self, text: str) -> None:

		self.text = text
		super().__init__(f"Invalid note name: {text}")


@dataclasses.dataclass(frozen=True)
class Note:

	"""
	A pitch class in a specific octave.
	"""

	pitch_class: midinote.pitch_class.PitchClass
	octave: int


	def to_midi (self) -> int:

		"""Return the MIDI note number for this note.

		No range check is applied; notes outside C-1..G9 give numbers outside
		0-127. Use `midinote.midi_utils.check_note_number()` where the MIDI
		range matters.

		Example:
			```python
			Note(PitchClass.C_SHARP, 4).to_midi()  # → 61
			```
		"""

		octave_base = (self.octave + midinote.constants.MIDI_OCTAVE_OFFSET) * midinote.constants.SEMITONES_PER_OCTAVE

		return self.pitch_class.index + octave_base


	@classmethod
	def from_midi (cls, midi: int) -> "Note":

		"""Build the note for a MIDI note number.

		Intended for 0-127. The range is not checked here; callers reject
		out-of-range values before converting.

		Example:
			```python
			Note.from_midi(0)    # → Note(PitchClass.C, -1)
			Note.from_midi(127)  # → Note(PitchClass.G, 9)
			```
		"""

		pitch_class = midinote.pitch_class.from_index(midi % midinote.constants.SEMITONES_PER_OCTAVE)
		octave = midi // midinote.constants.SEMITONES_PER_OCTAVE - midinote.constants.MIDI_OCTAVE_OFFSET

		return cls(pitch_class=pitch_class, octave=octave)


	def format (self) -> str:

		"""Return the text name, e.g. ``"C#4"``."""

		return f"{self.pitch_class.display_name}{self.octave}"


	def __str__ (self) -> str:

		return self.format()


def to_midi (note: Note) -> int:

	"""Return the MIDI note number for ``note``."""

	return note.to_midi()


def from_midi (midi: int) -> Note:

	"""Return the note for a MIDI note number."""

	return Note.from_midi(midi)


def format_note (note: Note) -> str:

	"""Return the text name for ``note``."""

	return note.format()


def parse (text: str) -> Note:

	"""Parse a note name such as ``"C#4"`` into a `Note`.

	The name is read in fixed steps, and the first step that fails decides
	the error:

	1. Empty text raises `EmptyInputError`.
	2. The note-name segment is two characters when the second character is
	   ``'#'`` or ``'b'``, otherwise one.
	3. Nothing after the segment raises `MissingOctaveError`.
	4. The rest must be a non-negative decimal integer, else
	   `InvalidOctaveError`.
	5. The segment must be one of the 12 sharp-spelled names, else
	   `InvalidNoteNameError`.

	Flat spellings are segmented as two characters in step 2 but have no
	entry in step 5, so ``"Db4"`` is rejected as an invalid note name.

	Parameters:
		text: The note name, already stripped of surrounding whitespace.

	Returns:
		The parsed `Note`.

	Raises:
		ParseError: One of the subclasses above.
	"""

	if not text:
		raise EmptyInputError()

	name_end = 1

	if len(text) > 1 and text[1] in ACCIDENTAL_MARKERS:
		name_end = 2

	if name_end >= len(text):
		raise MissingOctaveError()

	name_text = text[:name_end]
	octave_text = text[name_end:]

	if not _OCTAVE_PATTERN.fullmatch(octave_text):
		raise InvalidOctaveError(octave_text)

	octave = int(octave_text)

	try:
		pitch_class = midinote.pitch_class.from_display_name(name_text)
	except midinote.pitch_class.InvalidNameError as exc:
		raise InvalidNoteNameError(name_text) from exc

	note = Note(pitch_class=pitch_class, octave=octave)
	logger.debug(f"Parsed {text!r} as {note!r}")

	return note
