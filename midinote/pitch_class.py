"""Pitch class definitions and index / name mappings.

A pitch class is one of the 12 chromatic semitones within an octave,
independent of octave number. Each `PitchClass` member's value is its
chromatic index (0-11), and its display name is always sharp-spelled.

Module-level constants:
- `PITCH_CLASS_NAMES`: Maps chromatic index (0-11) to display name (e.g. `"C#"`)
- `NOTE_NAME_TO_PITCH_CLASS`: Maps the 12 canonical display names to members

Module-level helpers:
- `to_index(pitch_class)` / `from_index(index)`
- `to_display_name(pitch_class)` / `from_display_name(name)`
"""

import enum
import logging
import typing

import midinote.constants


logger = logging.getLogger(__name__)


PITCH_CLASS_NAMES: typing.List[str] = [
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
]


class PitchClassError (ValueError):

	"""Base class for pitch class conversion failures."""


class InvalidIndexError (PitchClassError):

	"""Raised when a chromatic index falls outside 0-11."""

	def __init__ (self, index: typing.Any) -> None:

		self.index = index
		super().__init__(f"Invalid chromatic index: {index!r}. Expected an integer 0-11.")


class InvalidNameError (PitchClassError):

	"""Raised when a display name is not one of the 12 sharp-spelled names."""

	def __init__ (self, name: str) -> None:

		self.name = name
		super().__init__(f"Invalid pitch class name: {name!r}. Expected e.g. 'C', 'F#', 'A#'.")


class PitchClass (enum.Enum):

	"""
	The 12 chromatic pitch classes, valued by chromatic index.
	"""

	C = 0
	C_SHARP = 1
	D = 2
	D_SHARP = 3
	E = 4
	F = 5
	F_SHARP = 6
	G = 7
	G_SHARP = 8
	A = 9
	A_SHARP = 10
	B = 11


	@property
	def index (self) -> int:

		"""Chromatic index of this pitch class (0-11)."""

		return self.value


	@property
	def display_name (self) -> str:

		"""Sharp-spelled display name (e.g. ``"C#"``)."""

		return PITCH_CLASS_NAMES[self.value]


	def __str__ (self) -> str:

		return self.display_name


NOTE_NAME_TO_PITCH_CLASS: typing.Dict[str, PitchClass] = {
	name: PitchClass(index) for index, name in enumerate(PITCH_CLASS_NAMES)
}


def to_index (pitch_class: PitchClass) -> int:

	"""Return the chromatic index (0-11) of a pitch class."""

	return pitch_class.index


def from_index (index: int) -> PitchClass:

	"""Return the pitch class for a chromatic index.

	Parameters:
		index: Chromatic index, 0 (C) through 11 (B).

	Returns:
		The matching `PitchClass`.

	Raises:
		InvalidIndexError: If ``index`` is not an integer in 0-11.

	Example:
		```python
		from_index(0)   # → PitchClass.C
		from_index(11)  # → PitchClass.B
		from_index(12)  # raises InvalidIndexError
		```
	"""

	if isinstance(index, bool) or not isinstance(index, int):
		raise InvalidIndexError(index)

	if not 0 <= index < midinote.constants.SEMITONES_PER_OCTAVE:
		raise InvalidIndexError(index)

	return PitchClass(index)


def to_display_name (pitch_class: PitchClass) -> str:

	"""Return the sharp-spelled display name of a pitch class."""

	return pitch_class.display_name


def from_display_name (name: str) -> PitchClass:

	"""Look up a pitch class by its exact display name.

	Matching is case-sensitive and accepts sharp spellings only, so ``"Db"``
	and ``"c#"`` are both rejected.

	Raises:
		InvalidNameError: If ``name`` is not one of `PITCH_CLASS_NAMES`.
	"""

	if name not in NOTE_NAME_TO_PITCH_CLASS:
		logger.debug(f"Rejected pitch class name {name!r}")
		raise InvalidNameError(name)

	return NOTE_NAME_TO_PITCH_CLASS[name]
