import typing

import pytest


class FakeStdin:

	"""Scripted replacement for input() that returns queued lines, then EOF."""

	def __init__ (self, lines: typing.List[str]) -> None:

		"""Store the lines to hand out in order."""

		self.lines = list(lines)
		self.prompts: typing.List[str] = []

	def __call__ (self, prompt: str = "") -> str:

		"""Return the next line, raising EOFError once exhausted."""

		self.prompts.append(prompt)

		if not self.lines:
			raise EOFError

		return self.lines.pop(0)


@pytest.fixture
def feed_input (monkeypatch: pytest.MonkeyPatch) -> typing.Callable[[typing.List[str]], FakeStdin]:

	"""Patch builtins.input to return the given lines in turn."""

	def _feed (lines: typing.List[str]) -> FakeStdin:
		fake = FakeStdin(lines)
		monkeypatch.setattr("builtins.input", fake)
		return fake

	return _feed
