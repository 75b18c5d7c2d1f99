import logging

import mido.messages.checks

import midinote.constants


logger = logging.getLogger(__name__)


class MidiRangeError (ValueError):

	"""Raised when an integer is outside the MIDI note-number range."""

	def __init__ (self, value: int) -> None:

		self.value = value
		super().__init__(
			f"MIDI values must be between {midinote.constants.MIDI_NOTE_MIN}-{midinote.constants.MIDI_NOTE_MAX}, got {value}"
		)


def check_note_number (value: int) -> int:

	"""
	Validate a MIDI note number and return it unchanged.

	Uses mido's data-byte check, so the accepted range is exactly what mido
	will put in a note message.

	Raises:
		MidiRangeError: If ``value`` is outside 0-127.
		TypeError: If ``value`` is not an integer.
	"""

	try:
		mido.messages.checks.check_data_byte(value)
	except ValueError as exc:
		logger.debug(f"Rejected MIDI note number {value}: {exc}")
		raise MidiRangeError(value) from exc

	return value


def parse_note_number (text: str) -> int:

	"""
	Parse text as a non-negative decimal integer.

	Only ASCII digits are accepted (no sign, whitespace or underscores). The
	result is not range-checked; pass it to `check_note_number()`.

	Raises:
		ValueError: If ``text`` is not a non-negative decimal integer.
	"""

	if not (text.isascii() and text.isdigit()):
		raise ValueError(f"Invalid MIDI value: {text!r}")

	return int(text)
