"""
FastAPI server exposing the movie catalog.
Endpoints:
- GET /health: basic health check
- GET /genres: the genre vocabulary, for building filter pickers
- GET /movies/{movie_id}: a single movie by id
- GET /search?title=...&genre=...&genre=...&year=...: first 10 matches in file order

Startup loads the dataset named by MOVIE_CATALOG_DATA (default data/movies.csv).

Run:  uvicorn api:app --reload
"""

import os  # dataset location override
import time  # load and search timings
from typing import List, Optional

# Web layer: routes plus response schemas
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from movie_catalog.catalog import Catalog  # indexed movies
from movie_catalog.config import DATA_PATH_ENV_VAR, DEFAULT_DATA_PATH
from movie_catalog.data_loader import DataLoader  # loads the CSV
from movie_catalog.display import format_title  # "Title (Year)"
from movie_catalog.errors import ParseError  # strict-load failure
from movie_catalog.models import Movie, SearchQuery  # core data classes
from movie_catalog.query_engine import QueryEngine  # filtering

from loguru import logger

app = FastAPI(title="Movie Catalog API", version="1.0.0")

# Filled in by startup_event (or init_engine in tests); None means no catalog yet
ENGINE: Optional[QueryEngine] = None
STARTUP_TIME_S: float = 0.0  # seconds spent reading and indexing the CSV


# One catalog entry as returned by /movies and /search
class MovieOut(BaseModel):
	id: int  # unique id
	title: str  # title without the year suffix
	year: Optional[int] = None  # release year, None when unknown
	genres: List[str]  # genres as written in the dataset
	display_title: str  # title with "(year)" appended when known


# Body of /search: the capped matches plus how long the scan took
class SearchResponse(BaseModel):
	count: int  # number of results returned
	elapsed_ms: float  # server-side search time in ms
	results: List[MovieOut]  # matches in file order


class GenresResponse(BaseModel):
	genres: List[str]  # sorted vocabulary


def to_movie_out(movie: Movie) -> MovieOut:
	return MovieOut(
		id=movie.id,
		title=movie.title,
		year=movie.year if movie.has_year else None,
		genres=list(movie.genres),
		display_title=format_title(movie),
	)


def init_engine(catalog: Catalog) -> None:
	"""Install a catalog (used by startup and by tests)."""
	global ENGINE
	ENGINE = QueryEngine(catalog)


# Read the CSV once per process; a failed load leaves ENGINE unset
@app.on_event("startup")
async def startup_event():
	"""Load the dataset and log how long it took."""
	global STARTUP_TIME_S
	if ENGINE is not None:
		return  # already initialized (e.g. by a test)

	start = time.time()
	data_path = os.environ.get(DATA_PATH_ENV_VAR, str(DEFAULT_DATA_PATH))
	logger.info(f"[API] Startup: loading movies from {data_path}...")

	try:
		init_engine(DataLoader().load_catalog_from_csv(data_path))
	except (OSError, UnicodeDecodeError, ParseError) as e:
		# Keep serving /health so the failure is visible to probes
		logger.error(f"[API] Could not load catalog from {data_path}: {e}")
		return

	STARTUP_TIME_S = time.time() - start
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s with {len(ENGINE.catalog)} movies.")


def _require_engine() -> QueryEngine:
	if ENGINE is None:
		logger.warning("[API] Request received but catalog not loaded")
		raise HTTPException(status_code=503, detail="Catalog not loaded")
	return ENGINE


# Answers even when the catalog failed to load
@app.get("/health")
async def health():
	"""Report whether the catalog is loaded and how big it is."""
	return {
		"status": "ok",
		"catalog_ready": ENGINE is not None,
		"movies": len(ENGINE.catalog) if ENGINE is not None else 0,
		"startup_seconds": round(STARTUP_TIME_S, 2)
	}


@app.get("/genres", response_model=GenresResponse)
async def genres():
	"""List every genre present in the dataset."""
	return GenresResponse(genres=_require_engine().catalog.genres())


@app.get("/movies/{movie_id}", response_model=MovieOut)
async def get_movie(movie_id: int):
	"""Look a movie up by id."""
	movie = _require_engine().catalog.by_id(movie_id)
	if movie is None:
		raise HTTPException(status_code=404, detail=f"No movie found with ID: {movie_id}")
	return to_movie_out(movie)


# All filters AND together except id, which short-circuits
@app.get("/search", response_model=SearchResponse)
async def search(
	id: Optional[int] = Query(None, description="Exclusive id lookup; other filters are ignored"),
	title: Optional[str] = Query(None, description="Case-insensitive title substring"),
	genre: List[str] = Query([], description="Repeat to require several genres"),
	year: Optional[int] = Query(None, description="Exact release year"),
):
	"""Filter the catalog and return the first matches in file order."""
	engine = _require_engine()

	start = time.time()
	query = SearchQuery(movie_id=id, title_contains=title or None, genres_all=set(genre), year=year)
	logger.debug(f"[API] /search {query}")

	results = engine.search(query)
	elapsed_ms = (time.time() - start) * 1000
	logger.info(f"[API] /search served {len(results)} results in {elapsed_ms:.2f} ms")

	return SearchResponse(
		count=len(results),
		elapsed_ms=round(elapsed_ms, 2),
		results=[to_movie_out(m) for m in results],
	)
