"""
Query engine module.
Evaluates a combined SearchQuery against a Catalog and returns the first matches in file order.
"""

from typing import List  # type annotations

# Import loguru for console logging
from loguru import logger  # simple structured logger

from .catalog import Catalog  # indexed movie catalog
from .config import MAX_RESULTS  # result cap
from .models import Movie, SearchQuery  # core data classes


class QueryEngine:
	"""
	Read-only search over a Catalog.
	Results are not ranked: they are the first `max_results` matches in file order.
	"""

	def __init__(self, catalog: Catalog, max_results: int = MAX_RESULTS):
		if max_results < 1:
			raise ValueError(f"max_results must be at least 1, got {max_results}")
		self.catalog = catalog  # shared, never mutated
		self.max_results = max_results  # cap on returned movies

	def search(self, query: SearchQuery) -> List[Movie]:
		"""Run the query. Never raises; a miss is an empty list."""
		# Id lookups are exclusive: other fields are ignored
		if query.movie_id is not None:
			movie = self.catalog.by_id(query.movie_id)
			logger.debug(f"[Query] Id lookup {query.movie_id} -> {'hit' if movie else 'miss'}")
			return [movie] if movie is not None else []

		# A genre nobody carries can never be satisfied
		unknown = [g for g in query.genres_all if not self.catalog.has_genre(g)]
		if unknown:
			logger.debug(f"[Query] Unknown genres {sorted(unknown)}; no movie can match")
			return []

		keyword = query.title_contains.lower() if query.title_contains else ''
		results: List[Movie] = []  # accumulator
		for movie in self.catalog:
			if keyword and keyword not in movie.title.lower():
				continue
			if query.year is not None and (not movie.has_year or movie.year != query.year):
				continue
			if query.genres_all and not query.genres_all.issubset({g.lower() for g in movie.genres}):
				continue

			results.append(movie)
			if len(results) >= self.max_results:
				break  # rest of the catalog is not scanned

		logger.debug(
			f"[Query] title={query.title_contains!r} year={query.year} genres={sorted(query.genres_all)} -> {len(results)} results"
		)
		return results


def search(catalog: Catalog, query: SearchQuery, max_results: int = MAX_RESULTS) -> List[Movie]:
	"""Search a catalog without keeping an engine around."""
	return QueryEngine(catalog, max_results=max_results).search(query)
