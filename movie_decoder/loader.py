"""
Data loading module.
Loads raw OMDb documents from JSON / JSONL files and decodes them into Movie objects.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # read JSON documents
from typing import Any, Dict, List  # type hints
from pathlib import Path  # filesystem-safe paths

# Decoders and records used across the project
from .decoders import GENRE_DELIMITER, decode_genre, decode_movie  # dict -> Movie
from .errors import DecodeError, GenreDecodeError  # recoverable failures
from .models import Genre, Movie  # structured movie record

# Console logging
from loguru import logger  # console logger


class MovieLoader:
	"""
	Handles loading raw OMDb documents from disk and decoding them.
	"""

	def load_movies_from_jsonl(self, filepath: str) -> List[Movie]:
		"""
		Load movies from a JSON Lines (JSONL) file where each line is one OMDb document.
		Lines that are not JSON or fail to decode are skipped with a warning.
		A non-numeric Year is a fatal fault and is not skipped.
		"""
		movies = []  # accumulator for decoded Movie objects
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[Loader] Loading movies from {filepath}...")  # log action

		# Read line-by-line to handle large files
		with open(filepath, 'r', encoding='utf-8') as f:
			for line_num, line in enumerate(f, 1):  # keep track of line number for diagnostics
				if not line.strip():
					continue  # blank line
				try:
					document = json.loads(line)  # parse JSON object per line
				except json.JSONDecodeError as e:
					logger.warning(f"[Loader] Skipping invalid JSON at line {line_num}: {e}")  # malformed line
					continue
				try:
					movie = decode_movie(document)  # convert dict -> Movie
				except DecodeError as e:
					logger.warning(f"[Loader] Skipping undecodable movie at line {line_num}: {e}")
					continue
				self._log_dropped_genres(document, line_num)
				movies.append(movie)  # collect

		logger.info(f"[Loader] Successfully loaded {len(movies)} movies.")  # summary
		return movies

	def load_movie_from_json(self, filepath: str) -> Movie:
		"""Decode a file holding a single OMDb document. Errors propagate."""
		filepath = Path(filepath)
		if not filepath.exists():
			raise FileNotFoundError(f"Movie document not found: {filepath}")
		with open(filepath, 'r', encoding='utf-8') as f:
			document = json.load(f)
		logger.debug(f"[Loader] Decoding {filepath}")
		return decode_movie(document)

	def dropped_genre_tokens(self, document: Dict[str, Any]) -> List[str]:
		"""Return the "Genre" tokens that the movie decoder silently drops."""
		raw = document.get('Genre') if isinstance(document, dict) else None
		if not isinstance(raw, str):
			return []
		dropped = []
		for token in raw.split(GENRE_DELIMITER):
			try:
				decode_genre(token)
			except GenreDecodeError:
				dropped.append(token)
		return dropped

	def _log_dropped_genres(self, document: Dict[str, Any], line_num: int):
		dropped = self.dropped_genre_tokens(document)
		if dropped:
			logger.debug(f"[Loader] Line {line_num}: dropped unknown genres {dropped}")

	def get_all_genres(self, movies: List[Movie]) -> List[Genre]:
		"""Return all distinct genres in the dataset, sorted by tag."""
		genres = set()  # unique genres
		for movie in movies:  # iterate
			genres.update(movie.genre)
		return sorted(genres, key=lambda g: g.value)  # stable display order

	def get_all_rating_sources(self, movies: List[Movie]) -> List[str]:
		"""Return a sorted list of all unique rating providers in the dataset."""
		sources = set()
		for movie in movies:
			sources.update(r.source for r in movie.details.ratings)
		return sorted(sources)
