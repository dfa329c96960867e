"""
Display helpers shared by the CLI and the API.
Formatting only; nothing here affects matching.
"""

from .models import Movie


def capitalize_words(text: str) -> str:
	"""
	Title-case a genre name for display: "sci-fi" -> "Sci-Fi", "FILM-NOIR" -> "Film-Noir".
	A word starts after whitespace or a hyphen. Lowercasing the result gives back the index key.
	"""
	chars = []
	capitalize_next = True
	for ch in text:
		if ch.isspace() or ch == '-':
			capitalize_next = True
			chars.append(ch)
		elif capitalize_next:
			chars.append(ch.upper())
			capitalize_next = False
		else:
			chars.append(ch.lower())
	return ''.join(chars)


def format_title(movie: Movie) -> str:
	"""Title with the year appended when it is known."""
	if movie.has_year:
		return f"{movie.title} ({movie.year})"
	return movie.title


def format_movie(movie: Movie) -> str:
	"""One result row: `id | title (year) | Genres: g1 g2 `."""
	genres = ''.join(f"{g} " for g in movie.genres)
	return f"{movie.id} | {format_title(movie)} | Genres: {genres}"
