"""
Decoders that turn a raw OMDb document into typed records.

Every decoder is a pure function: it reads the given dict (never mutates it)
and either returns a record or raises the DecodeError subclass for the field
that was unusable. Composition follows two policies, chosen at each call site:

- fail-fast: a failing field aborts the whole decode (everything except genres)
- lossy-filter: an unknown genre token is dropped and decoding carries on
"""

import re  # strict integer token matching
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Type

from .errors import (
	DecodeError,
	ExtraDetailsDecodeError,
	ExtraDetailsErrorKind,
	GenreDecodeError,
	GenreErrorKind,
	MovieDecodeError,
	MovieErrorKind,
	RatingDecodeError,
	RatingErrorKind,
	YearParseFault,
)
from .models import ExtraDetails, Genre, Movie, Rating

# Literal delimiter used by the "Genre" field: "Action, Crime, Drama"
GENRE_DELIMITER = ', '

# Tag spelling -> Genre, built once from the enum so the enum stays the single source
_GENRES_BY_TAG: Dict[str, Genre] = {genre.value: genre for genre in Genre}

_UNSIGNED_INT = re.compile(r'[0-9]+')
_SIGNED_INT = re.compile(r'[+-]?[0-9]+')


def _read_text(document: Any, key: str) -> Optional[str]:
	"""Return document[key] if it is a string, else None (absent, null or another type)."""
	if not isinstance(document, dict):
		return None
	value = document.get(key)
	return value if isinstance(value, str) else None


def decode_genre(token: str) -> Genre:
	"""
	Map one pre-trimmed token to a Genre.
	Matching is exact and case-sensitive; anything else raises UNKNOWN_GENRE.
	"""
	genre = _GENRES_BY_TAG.get(token) if isinstance(token, str) else None
	if genre is None:
		raise GenreDecodeError(GenreErrorKind.UNKNOWN_GENRE, detail=repr(token))
	return genre


def decode_rating(document: Dict[str, Any]) -> Rating:
	"""
	Decode the first entry of document["Ratings"].
	Later entries are ignored. An absent, empty or non-list "Ratings" is
	reported as MISSING_SOURCE, since there is no source to read.
	"""
	ratings = document.get('Ratings') if isinstance(document, dict) else None
	if not isinstance(ratings, list) or not ratings:
		raise RatingDecodeError(RatingErrorKind.MISSING_SOURCE, detail='no ratings')

	first = ratings[0]  # later entries are ignored
	source = _read_text(first, 'Source')
	if not source:
		raise RatingDecodeError(RatingErrorKind.MISSING_SOURCE)
	value = _read_text(first, 'Value')  # kept verbatim, providers use different scales
	if value is None:
		raise RatingDecodeError(RatingErrorKind.MISSING_VALUE)

	return Rating(source=source, value=value)


def _decode_runtime(document: Dict[str, Any]) -> int:
	# "124 min" -> 124; "124" -> 124. Absent and malformed share one kind.
	raw = _read_text(document, 'Runtime')
	tokens = raw.split() if raw is not None else []  # whitespace split
	if not tokens or not _UNSIGNED_INT.fullmatch(tokens[0]):
		raise ExtraDetailsDecodeError(ExtraDetailsErrorKind.MISSING_RUNTIME, detail=repr(raw))
	return int(tokens[0])


def _require_text(document: Dict[str, Any], key: str, error_type: Type[DecodeError], kind: Enum) -> str:
	value = _read_text(document, key)
	if value is None:
		raise error_type(kind)
	return value


def decode_extra_details(document: Dict[str, Any]) -> ExtraDetails:
	"""
	Decode runtime, writer, ratings, actors and poster from the movie document.
	Fail-fast: the first failing field wins. Rating errors propagate unchanged.
	"""
	runtime = _decode_runtime(document)  # "124 min" -> 124
	writer = _require_text(document, 'Writer', ExtraDetailsDecodeError, ExtraDetailsErrorKind.MISSING_WRITER)  # free text, may be empty
	ratings = (decode_rating(document),)  # propagate RatingDecodeError as-is
	actors = _require_text(document, 'Actors', ExtraDetailsDecodeError, ExtraDetailsErrorKind.MISSING_ACTORS)  # names kept as one string
	poster_url = _require_text(document, 'Poster', ExtraDetailsDecodeError, ExtraDetailsErrorKind.MISSING_POSTER_URL)  # not validated as a URL

	return ExtraDetails(
		runtime=runtime,
		writer=writer,
		ratings=ratings,
		actors=actors,
		poster_url=poster_url,
	)


def _decode_year(document: Dict[str, Any]) -> int:
	raw = _read_text(document, 'Year')  # OMDb sends the year as text
	if raw is None:
		raise MovieDecodeError(MovieErrorKind.MISSING_YEAR)
	if not _SIGNED_INT.fullmatch(raw):
		# present but unparsable is a different condition from absent
		raise YearParseFault(raw)
	return int(raw)  # e.g. "2007" -> 2007


def decode_genres(raw: str) -> Tuple[Genre, ...]:
	"""
	Split a "Genre" field on ", " and keep the tokens that decode.
	Unknown tokens are dropped, order is preserved, "" gives ().
	"""
	genres: List[Genre] = []  # accumulator for recognised tags
	for token in raw.split(GENRE_DELIMITER):  # tokens arrive pre-trimmed by the split
		try:
			genres.append(decode_genre(token))
		except GenreDecodeError:
			continue  # lossy-filter: unknown tags are not an error for the movie
	return tuple(genres)  # frozen for the Movie record


def decode_movie(document: Dict[str, Any]) -> Movie:
	"""
	Decode a whole OMDb movie document.

	Raises MovieDecodeError, ExtraDetailsDecodeError or RatingDecodeError for
	the first unusable field, and YearParseFault (not a DecodeError) when
	"Year" is present but not an integer.
	"""
	title = _read_text(document, 'Title')  # empty titles count as missing
	if not title:
		raise MovieDecodeError(MovieErrorKind.MISSING_TITLE)
	year = _decode_year(document)  # may raise YearParseFault
	rated = _require_text(document, 'Rated', MovieDecodeError, MovieErrorKind.MISSING_AGE_RATING)
	raw_genre = _require_text(document, 'Genre', MovieDecodeError, MovieErrorKind.MISSING_GENRE)  # one string, not an array
	genre = decode_genres(raw_genre)  # lossy: unknown tokens dropped
	plot = _require_text(document, 'Plot', MovieDecodeError, MovieErrorKind.MISSING_PLOT)
	details = decode_extra_details(document)  # fail-fast, propagated unchanged

	return Movie(
		title=title,
		year=year,
		rated=rated,
		genre=genre,
		details=details,
		plot=plot,
	)
