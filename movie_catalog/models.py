"""
Data models for the Movie Catalog.
Defines the core data structures used throughout the system.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Import typing helpers for precise and self-documenting types
from typing import Optional, Set, Tuple  # optional values, sets and fixed tuples

# Sentinel year for titles without a parsable "(YYYY)" suffix
UNKNOWN_YEAR = -1


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single movie line of the dataset.
	Title and genres keep their original case; normalization happens at index/query time.
	Frozen so a catalog can hand movies out without its indices going stale.
	"""
	id: int  # unique numeric identifier of the movie
	title: str  # title with any trailing " (YYYY)" removed
	year: int = UNKNOWN_YEAR  # release year, or UNKNOWN_YEAR
	genres: Tuple[str, ...] = ()  # genres in file order (duplicates kept)

	def __post_init__(self):
		# Accept any iterable (lists from callers) but always store a tuple
		object.__setattr__(self, 'genres', tuple(self.genres))

	@property
	def has_year(self) -> bool:
		return self.year != UNKNOWN_YEAR


@dataclass
class SearchQuery:
	"""
	A combined predicate for the query engine.
	Every field is optional; the fields that are present must all match.
	"""
	movie_id: Optional[int] = None  # exclusive: bypasses every other field when set
	title_contains: Optional[str] = None  # case-insensitive substring of the title
	genres_all: Set[str] = field(default_factory=set)  # movie must carry every genre listed
	year: Optional[int] = None  # exact release year

	def __post_init__(self):
		# Case-fold requested genres so callers can pass display names ("Sci-Fi")
		self.genres_all = {g.strip().lower() for g in self.genres_all if g and g.strip()}

	def is_empty(self) -> bool:
		"""True when no field would restrict the result."""
		return (
			self.movie_id is None
			and not self.title_contains
			and not self.genres_all
			and self.year is None
		)
