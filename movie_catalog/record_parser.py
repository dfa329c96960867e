"""
Record parsing module.
Turns one raw line of the movies dataset (`id,title,genre1|genre2|...`) into a Movie.
Handles quoted titles with embedded commas and the trailing "(YYYY)" year suffix.
"""

import re  # digit matching for ids and years
from typing import List, Optional, Tuple  # type annotations

# Console logging
from loguru import logger  # console logger

from .errors import MalformedIdentifierError  # raised on a non-integer id
from .models import Movie, UNKNOWN_YEAR  # structured movie record


class RecordParser:
	"""
	Parses dataset lines into Movie objects.
	The parser is stateless; one instance can be shared by any number of loads.
	"""

	FIELD_DELIMITER = ','  # separates id, title and genre fields
	GENRE_DELIMITER = '|'  # separates genres inside the genre field
	QUOTE = '"'  # wraps titles that contain commas

	# ASCII digits only: int() alone would also take "1_0" or "١٢"
	RE_ID = re.compile(r"\s*([+-]?[0-9]+)\s*")  # whole id field
	RE_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")  # start of the year text, "2006–2007" -> 2006

	def parse_line(self, raw: str, line_number: Optional[int] = None) -> Movie:
		"""
		Parse a single line. Raises MalformedIdentifierError if the id is not an integer.
		`line_number` is only used to enrich the error message.
		"""
		line = raw.rstrip('\r\n')  # drop the line terminator if the caller kept it
		id_text, title, genre_field = self._split_fields(line)

		id_match = self.RE_ID.fullmatch(id_text)
		if id_match is None:
			raise MalformedIdentifierError(id_text, raw, line_number)
		movie_id = int(id_match.group(1))

		title, year = self.extract_year(title)
		genres = tuple(self.split_genres(genre_field))

		logger.trace(f"[Parser] id={movie_id} title={title!r} year={year} genres={genres}")
		return Movie(id=movie_id, title=title, year=year, genres=genres)

	def _split_fields(self, line: str) -> Tuple[str, str, str]:
		"""Split a line into (id text, title, genre field) following the quoting rule."""
		id_text, _, rest = line.partition(self.FIELD_DELIMITER)

		if self.QUOTE in line:
			# Title is everything between the first and the last quote, commas included
			first_quote = line.find(self.QUOTE)
			last_quote = line.rfind(self.QUOTE)
			title = line[first_quote + 1:last_quote]
			# Skip the closing quote and the comma that follows it
			genre_field = line[last_quote + 2:]
			return id_text, title, genre_field

		# Unquoted: only the first two commas are delimiters, the rest is genre text
		title, _, genre_field = rest.partition(self.FIELD_DELIMITER)
		return id_text, title, genre_field

	def extract_year(self, title: str) -> Tuple[str, int]:
		"""
		Pull a trailing "(YYYY)" out of the title.
		The year is the integer the parenthesised text starts with, so a range like "(2006–2007)"
		yields 2006. Returns the (possibly shortened) title and the year, or the untouched title
		and UNKNOWN_YEAR when the parentheses are missing or do not start with digits.
		"""
		open_paren = title.rfind('(')
		close_paren = title.rfind(')')
		if open_paren == -1 or close_paren == -1 or close_paren < open_paren:
			return title, UNKNOWN_YEAR

		year_match = self.RE_LEADING_INT.match(title, open_paren + 1, close_paren)
		if year_match is None:
			# e.g. "City of Lost Children, The (Cité des enfants perdus, La)"
			return title, UNKNOWN_YEAR

		return title[:open_paren].rstrip(), int(year_match.group(1))

	def split_genres(self, genre_field: str) -> List[str]:
		"""Split the genre field on '|'; an empty field yields no genres."""
		return [g for g in genre_field.split(self.GENRE_DELIMITER) if g]


_default_parser = RecordParser()


def parse_line(raw: str, line_number: Optional[int] = None) -> Movie:
	"""Parse one dataset line with a shared RecordParser."""
	return _default_parser.parse_line(raw, line_number=line_number)
