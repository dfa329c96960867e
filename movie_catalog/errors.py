"""Errors raised while turning dataset lines into movies."""

from typing import Optional


class ParseError(ValueError):
	"""A dataset line could not be turned into a Movie."""

	def __init__(self, message: str, line: str, line_number: Optional[int] = None):
		super().__init__(message)
		self.line = line  # raw line as read
		self.line_number = line_number  # 1-based position in the file, when known


class MalformedIdentifierError(ParseError):
	"""The id field of a line is not an integer."""

	def __init__(self, id_text: str, line: str, line_number: Optional[int] = None):
		location = f" at line {line_number}" if line_number is not None else ""
		super().__init__(f"Malformed movie id {id_text!r}{location}", line, line_number)
		self.id_text = id_text
