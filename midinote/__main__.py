import logging
import sys
import typing

import midinote.midi_utils
import midinote.note


# Configure logging
logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


NOTE_PROMPT = "Enter a note: "
MIDI_PROMPT = "Enter a MIDI value: "

EXIT_OK = 0
EXIT_RANGE_ERROR = 1
EXIT_FATAL = 2


class InputError (Exception):

	"""Raised when a line of input cannot be read or parsed."""


def _read (read_line: typing.Callable[[], str], what: str) -> str:

	try:
		return read_line().strip()
	except EOFError as exc:
		raise InputError(f"Failed to read {what}: end of input") from exc


def run (read_line: typing.Callable[[], str], write: typing.Callable[[str], None]) -> None:

	"""
	Convert one note name to MIDI, then one MIDI value to a note name.

	Reads and writes only through ``read_line`` and ``write``. Failures
	propagate to the caller:

	- `InputError` if a line cannot be read or the note / MIDI value cannot
	  be parsed.
	- `midinote.midi_utils.MidiRangeError` if the MIDI value exceeds 127.
	"""

	write(NOTE_PROMPT)

	note_text = _read(read_line, "note")

	try:
		note = midinote.note.parse(note_text)
	except midinote.note.ParseError as exc:
		raise InputError(f"Failed to parse note: {exc}") from exc

	write(f"{note.format()} = {note.to_midi()}")

	write(MIDI_PROMPT)

	midi_text = _read(read_line, "MIDI value")

	try:
		midi = midinote.midi_utils.parse_note_number(midi_text)
	except ValueError as exc:
		raise InputError(f"Failed to parse MIDI value: {exc}") from exc

	midinote.midi_utils.check_note_number(midi)

	write(f"MIDI {midi} = {midinote.note.from_midi(midi).format()}")


def main () -> int:

	"""
	Entry point for ``python -m midinote`` and the ``midinote`` script.

	Returns the process exit status: 0 on success, 1 when the MIDI value is
	out of range, 2 when input cannot be read or parsed.
	"""

	try:
		run(read_line=input, write=print)

	except midinote.midi_utils.MidiRangeError as exc:
		logger.warning(f"Rejected MIDI value {exc.value}")
		print(f"Error: {exc}")
		return EXIT_RANGE_ERROR

	except InputError as exc:
		logger.error(str(exc))
		return EXIT_FATAL

	return EXIT_OK


if __name__ == "__main__":
	sys.exit(main())
