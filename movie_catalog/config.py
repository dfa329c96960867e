"""
Configuration for the Movie Catalog.
Default paths and limits shared by the library, the CLI and the API.
"""

import sys  # stderr sink for logging
from pathlib import Path  # filesystem-safe paths

from loguru import logger  # console logger

# Dataset location relative to the working directory
DEFAULT_DATA_PATH = Path('data') / 'movies.csv'

# Environment variable the API reads to locate the dataset
DATA_PATH_ENV_VAR = 'MOVIE_CATALOG_DATA'

# Maximum number of movies a search returns
MAX_RESULTS = 10

DEFAULT_LOG_LEVEL = 'INFO'


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
	"""Replace loguru's default sink with a stderr sink at `level`."""
	logger.remove()  # drop the default DEBUG handler
	logger.add(sys.stderr, level=level.upper())
