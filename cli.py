"""
Interactive command-line front end for the Movie Catalog.
Loads the dataset once, then answers `search` commands until `quit`.

Run:  python cli.py --data data/movies.csv
"""

import argparse  # command-line flags
import sys  # exit status
from typing import Callable, List, Optional  # type hints

from loguru import logger  # console logging

from movie_catalog.catalog import Catalog  # indexed movies
from movie_catalog.config import DEFAULT_DATA_PATH, DEFAULT_LOG_LEVEL, configure_logging  # defaults
from movie_catalog.data_loader import DataLoader  # dataset reader
from movie_catalog.display import capitalize_words, format_movie  # row formatting
from movie_catalog.errors import ParseError  # strict-load failure
from movie_catalog.models import SearchQuery  # combined predicate
from movie_catalog.query_engine import QueryEngine  # filtering


def _read_genres(read: Callable[[str], str], write: Callable[[str], None]) -> List[str]:
	"""Read genre names one per line until a blank line or 'done'."""
	write("Enter genres (type 'done' when finished, press Enter to skip):")
	genres = []
	while True:
		try:
			genre = read('').strip().lower()
		except EOFError:
			break
		if not genre or genre == 'done':
			break
		genres.append(genre)
	return genres


def _parse_year(text: str) -> Optional[int]:
	"""An unparsable year means no year filter."""
	if not text:
		return None
	try:
		return int(text)
	except ValueError:
		return None


def run_search(
	engine: QueryEngine,
	read: Callable[[str], str] = input,
	write: Callable[[str], None] = print,
) -> None:
	"""Prompt for one search and print its results."""
	id_text = read("Enter movie ID (or press Enter to skip): ").strip()

	# Id search is exclusive: print the movie (or a miss) and skip the other filters
	if id_text:
		try:
			movie_id = int(id_text)
		except ValueError:
			write(f"Invalid movie ID: {id_text}")
			return
		results = engine.search(SearchQuery(movie_id=movie_id))
		if results:
			write(format_movie(results[0]))
		else:
			write(f"No movie found with ID: {movie_id}")
		return

	keyword = read("Enter title keyword (or press Enter to skip): ").strip()

	write("\nAvailable genres:")
	for genre in engine.catalog.genres():
		write(f" - {capitalize_words(genre)}")
	genres = _read_genres(read, write)

	year = _parse_year(read("Enter year (or press Enter to skip): ").strip())

	query = SearchQuery(title_contains=keyword or None, genres_all=set(genres), year=year)
	logger.debug(f"[CLI] Running query {query}")
	results = engine.search(query)

	write("\nSearch results:")
	for movie in results:
		write(format_movie(movie))
	if not results:
		write("No matches found.")


def run_loop(
	catalog: Catalog,
	read: Callable[[str], str] = input,
	write: Callable[[str], None] = print,
) -> None:
	"""Command loop: `search` or `quit`. End of input also quits."""
	engine = QueryEngine(catalog)
	while True:
		try:
			command = read("\nEnter command (search, quit): ").strip().lower()
		except EOFError:
			write("Exiting program.")
			break

		if command == 'quit':
			write("Exiting program.")
			break
		elif command == 'search':
			try:
				run_search(engine, read=read, write=write)
			except EOFError:
				write("Exiting program.")
				break
		else:
			write("Unknown command. Please try again.")


def build_arg_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description="Search an in-memory movie catalog.")
	parser.add_argument('--data', default=str(DEFAULT_DATA_PATH), help="Path to movies.csv")
	parser.add_argument('--strict', action='store_true', help="Abort the load on the first malformed line")
	parser.add_argument('--log-level', default=DEFAULT_LOG_LEVEL, help="loguru level (DEBUG, INFO, WARNING...)")
	return parser


def main(
	argv: Optional[List[str]] = None,
	read: Callable[[str], str] = input,
	write: Callable[[str], None] = print,
) -> int:
	args = build_arg_parser().parse_args(argv)
	configure_logging(args.log_level)

	loader = DataLoader(strict=args.strict)
	try:
		catalog = loader.load_catalog_from_csv(args.data)
	except OSError as e:
		write(f"Error: Could not open file {args.data} ({e})")
		return 1
	except UnicodeDecodeError as e:
		write(f"Error: Could not read file {args.data}: not UTF-8 text ({e})")
		return 1
	except ParseError as e:
		write(f"Error: {e}")
		return 1

	write(f"Loaded {len(catalog)} movies.")
	run_loop(catalog, read=read, write=write)
	return 0


if __name__ == '__main__':
	sys.exit(main())
