import pytest

import midinote.note
import midinote.pitch_class


PitchClass = midinote.pitch_class.PitchClass
Note = midinote.note.Note


def test_to_midi_middle_c ():

	"""C4 is MIDI 60 and C#4 is 61."""

	assert Note(PitchClass.C, 4).to_midi() == 60
	assert midinote.note.to_midi(Note(PitchClass.C_SHARP, 4)) == 61


def test_to_midi_is_unbounded ():

	"""Out-of-range notes still compute a number rather than raising."""

	assert Note(PitchClass.C, 20).to_midi() == 252
	assert Note(PitchClass.C, -2).to_midi() == -12


def test_from_midi_boundaries ():

	"""MIDI 0 is C-1 and 127 is G9."""

	assert midinote.note.from_midi(0) == Note(PitchClass.C, -1)
	assert midinote.note.from_midi(127) == Note(PitchClass.G, 9)
	assert Note.from_midi(69) == Note(PitchClass.A, 4)


def test_midi_round_trip ():

	"""Every MIDI number converts to a note and back."""

	for midi in range(128):
		assert midinote.note.from_midi(midi).to_midi() == midi


def test_note_round_trip ():

	"""Every in-range note converts to MIDI and back."""

	for pitch_class in PitchClass:
		for octave in range(-1, 10):
			note = Note(pitch_class, octave)
			if 0 <= note.to_midi() <= 127:
				assert Note.from_midi(note.to_midi()) == note


def test_note_is_immutable ():

	"""Notes are frozen values."""

	note = Note(PitchClass.E, 3)

	with pytest.raises(AttributeError):
		note.octave = 4


def test_format ():

	"""Names are the sharp pitch class followed by the octave."""

	assert Note(PitchClass.C_SHARP, 4).format() == "C#4"
	assert midinote.note.format_note(Note(PitchClass.A, 0)) == "A0"
	assert str(Note(PitchClass.C, -1)) == "C-1"


@pytest.mark.parametrize("text, expected", [
	("C4", Note(PitchClass.C, 4)),
	("C#4", Note(PitchClass.C_SHARP, 4)),
	("A#0", Note(PitchClass.A_SHARP, 0)),
	("G9", Note(PitchClass.G, 9)),
	("B12", Note(PitchClass.B, 12)),
])
def test_parse (text, expected):

	"""Canonical names parse to the expected note."""

	assert midinote.note.parse(text) == expected


def test_parse_format_inverse ():

	"""Formatting then parsing returns the same note for non-negative octaves."""

	for pitch_class in PitchClass:
		for octave in range(0, 10):
			note = Note(pitch_class, octave)
			assert midinote.note.parse(note.format()) == note


def test_parse_empty ():

	with pytest.raises(midinote.note.EmptyInputError):
		midinote.note.parse("")


@pytest.mark.parametrize("text", ["C", "C#", "Db"])
def test_parse_missing_octave (text):

	"""A bare note name has no octave."""

	with pytest.raises(midinote.note.MissingOctaveError):
		midinote.note.parse(text)


@pytest.mark.parametrize("text, bad", [
	("C4x", "4x"),
	("C-1", "-1"),
	("C+4", "+4"),
	("C 4", " 4"),
	("H4x", "4x"),
])
def test_parse_invalid_octave (text, bad):

	"""The octave must be plain digits, and is checked before the name."""

	with pytest.raises(midinote.note.InvalidOctaveError) as exc_info:
		midinote.note.parse(text)

	assert exc_info.value.text == bad
	assert str(exc_info.value) == f"Invalid octave: {bad}"


@pytest.mark.parametrize("text, bad", [
	("H4", "H"),
	("c4", "c"),
	("Db4", "Db"),
	("Bb3", "Bb"),
	("b4", "b"),
])
def test_parse_invalid_note_name (text, bad):

	"""Unknown names and flat spellings are rejected at lookup."""

	with pytest.raises(midinote.note.InvalidNoteNameError) as exc_info:
		midinote.note.parse(text)

	assert exc_info.value.text == bad


def test_parse_errors_share_base ():

	"""All parse failures are ParseError and ValueError."""

	for text in ("", "C", "C4x", "H4"):
		with pytest.raises(midinote.note.ParseError):
			midinote.note.parse(text)

	with pytest.raises(ValueError):
		midinote.note.parse("")
