"""
Data loading module.
Reads the movies CSV (or already-read lines) and builds a Catalog from it.
"""

# Standard libs for typing and paths
from typing import Iterable, List  # type hints
from pathlib import Path  # filesystem-safe paths

# Console logging
from loguru import logger  # console logger

from .catalog import Catalog  # indexed catalog
from .errors import MalformedIdentifierError  # bad id on a line
from .models import Movie  # structured movie record
from .record_parser import RecordParser  # line -> Movie


def parse_lines(lines: Iterable[str], has_header: bool = True, strict: bool = False) -> List[Movie]:
	"""
	Parse dataset lines into movies.
	The first line is discarded as a header unless `has_header` is False; blank lines are ignored.
	A line with a malformed id is skipped with a warning, or, when `strict` is set,
	the MalformedIdentifierError is raised and nothing is returned.
	"""
	parser = RecordParser()
	movies: List[Movie] = []  # accumulator for parsed movies
	skipped = 0  # lines dropped because of a bad id

	for line_num, line in enumerate(lines, 1):  # keep track of line number for diagnostics
		if has_header and line_num == 1:
			continue  # header row
		if not line.strip():
			continue  # trailing blank lines are common
		try:
			movies.append(parser.parse_line(line, line_number=line_num))
		except MalformedIdentifierError as e:
			if strict:
				logger.error(f"[DataLoader] Aborting load: {e}")
				raise
			logger.warning(f"[DataLoader] Skipping line {line_num}: {e}")
			skipped += 1

	if skipped:
		logger.warning(f"[DataLoader] Skipped {skipped} malformed lines")
	return movies


def load_catalog(lines: Iterable[str], has_header: bool = True, strict: bool = False) -> Catalog:
	"""Parse lines and build the catalog in one step."""
	return Catalog.build(parse_lines(lines, has_header=has_header, strict=strict))


class DataLoader:
	"""
	Handles loading the movies dataset from disk.
	"""

	def __init__(self, strict: bool = False):
		"""`strict` aborts the load on the first malformed line instead of skipping it."""
		self.strict = strict

	def load_movies_from_csv(self, filepath) -> List[Movie]:
		"""
		Load movies from a CSV file whose first line is a header.
		Returns a list of Movie objects in file order.
		"""
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		# Stream the file line by line; newline='' keeps '\r\n' handling inside the parser
		try:
			with open(filepath, 'r', encoding='utf-8', newline='') as f:
				movies = parse_lines(f, has_header=True, strict=self.strict)
		except UnicodeDecodeError as e:
			logger.error(f"[DataLoader] {filepath} is not valid UTF-8: {e}")
			raise

		logger.info(f"[DataLoader] Successfully loaded {len(movies)} movies.")  # summary
		return movies

	def load_catalog_from_csv(self, filepath) -> Catalog:
		"""Load the CSV file and build its Catalog."""
		return Catalog.build(self.load_movies_from_csv(filepath))
