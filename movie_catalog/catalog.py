"""
Catalog module.
Owns the loaded movies plus the lookup structures derived from them:
an id index, a case-insensitive genre index, and the sorted genre vocabulary.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple  # type annotations

# Console logging
from loguru import logger  # console logger

from .models import Movie  # structured movie record


class Catalog:
	"""
	Immutable, in-memory movie catalog.
	Positions (0..n-1) follow file order and are the values stored in every index.
	Build it once with Catalog.build() and share it freely; nothing mutates it afterwards.
	"""

	def __init__(
		self,
		movies: Tuple[Movie, ...],  # movies in file order
		id_index: Dict[int, int],  # movie id -> position
		genre_index: Dict[str, Tuple[int, ...]],  # lowercased genre -> positions
		genre_vocabulary: Tuple[str, ...],  # sorted distinct original-case genres
	):
		self._movies = movies
		self._id_index = id_index
		self._genre_index = genre_index
		self._genre_vocabulary = genre_vocabulary

	@classmethod
	def build(cls, movies: Iterable[Movie]) -> 'Catalog':
		"""Build every index in one pass over the movies."""
		ordered = tuple(movies)  # freeze file order
		id_index: Dict[int, int] = {}  # accumulator for id lookups
		genre_positions: Dict[str, List[int]] = {}  # accumulator for genre lookups
		vocabulary = set()  # distinct genres as written in the file

		for position, movie in enumerate(ordered):
			if movie.id in id_index:
				logger.debug(
					f"[Catalog] Duplicate id {movie.id} at position {position} shadows position {id_index[movie.id]}"
				)
			id_index[movie.id] = position  # last occurrence wins

			for genre in movie.genres:
				vocabulary.add(genre)
				positions = genre_positions.setdefault(genre.lower(), [])
				# "Comedy|Comedy" must not list the same movie twice
				if not positions or positions[-1] != position:
					positions.append(position)

		genre_index = {key: tuple(positions) for key, positions in genre_positions.items()}
		catalog = cls(ordered, id_index, genre_index, tuple(sorted(vocabulary)))
		logger.info(
			f"[Catalog] Built catalog with {len(ordered)} movies, {len(id_index)} ids and {len(genre_index)} genres"
		)
		return catalog

	@property
	def movies(self) -> Tuple[Movie, ...]:
		return self._movies

	@property
	def id_index(self) -> Dict[int, int]:
		"""Copy of the id -> position mapping."""
		return dict(self._id_index)

	@property
	def genre_index(self) -> Dict[str, Tuple[int, ...]]:
		"""Copy of the lowercased genre -> positions mapping."""
		return dict(self._genre_index)

	def by_id(self, movie_id: int) -> Optional[Movie]:
		"""Return the movie with this id, or None when the id is unknown."""
		position = self._id_index.get(movie_id)
		if position is None:
			return None
		return self._movies[position]

	def genres(self) -> List[str]:
		"""Return the sorted genre vocabulary (original case) for display."""
		return list(self._genre_vocabulary)

	def positions_for_genre(self, genre: str) -> Tuple[int, ...]:
		"""Positions of the movies carrying `genre`, matched case-insensitively."""
		return self._genre_index.get(genre.strip().lower(), ())

	def has_genre(self, genre: str) -> bool:
		return genre.strip().lower() in self._genre_index

	def __len__(self) -> int:
		return len(self._movies)

	def __iter__(self) -> Iterator[Movie]:
		return iter(self._movies)

	def __getitem__(self, position: int) -> Movie:
		return self._movies[position]
