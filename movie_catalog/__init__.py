"""
Movie Catalog: load a movies CSV into memory and look movies up by id, title, genre and year.
"""

from .catalog import Catalog
from .data_loader import DataLoader, load_catalog, parse_lines
from .errors import MalformedIdentifierError, ParseError
from .models import Movie, SearchQuery, UNKNOWN_YEAR
from .query_engine import QueryEngine, search
from .record_parser import RecordParser, parse_line

__all__ = [
	'Catalog',
	'DataLoader',
	'MalformedIdentifierError',
	'Movie',
	'ParseError',
	'QueryEngine',
	'RecordParser',
	'SearchQuery',
	'UNKNOWN_YEAR',
	'load_catalog',
	'parse_line',
	'parse_lines',
	'search',
]
