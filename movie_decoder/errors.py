"""
Error taxonomy for decoding.
Each decoded entity has its own exception type whose `kind` names exactly
which required field was unusable.
"""

from enum import Enum  # closed sets of failure kinds


class MovieErrorKind(Enum):
	MISSING_TITLE = 'missing_title'  # "Title" absent, empty or not text
	MISSING_YEAR = 'missing_year'  # "Year" absent or not text; non-numeric text is YearParseFault
	MISSING_AGE_RATING = 'missing_age_rating'  # "Rated"
	MISSING_GENRE = 'missing_genre'  # "Genre" absent or not a single string
	MISSING_PLOT = 'missing_plot'  # "Plot"


class ExtraDetailsErrorKind(Enum):
	MISSING_RUNTIME = 'missing_runtime'  # absent OR unparsable, callers can't tell which
	MISSING_WRITER = 'missing_writer'
	MISSING_ACTORS = 'missing_actors'
	MISSING_POSTER_URL = 'missing_poster_url'


class RatingErrorKind(Enum):
	MISSING_SOURCE = 'missing_source'  # also raised for an absent or empty "Ratings"
	MISSING_VALUE = 'missing_value'  # first rating has no text "Value"


class GenreErrorKind(Enum):
	UNKNOWN_GENRE = 'unknown_genre'  # token matches no Genre tag exactly


class DecodeError(Exception):
	"""
	Base class for every recoverable decode failure.
	Subclasses fix which entity failed; `kind` says which field.
	"""
	entity = 'document'  # overridden per entity

	def __init__(self, kind: Enum, detail: str = ''):
		self.kind = kind  # the specific failure kind
		self.detail = detail  # optional human-readable context
		message = f"{self.entity}: {kind.value}"  # e.g. "movie: missing_title"
		if detail:
			message = f"{message} ({detail})"
		super().__init__(message)


class MovieDecodeError(DecodeError):
	entity = 'movie'  # title, year, rated, genre, plot


class ExtraDetailsDecodeError(DecodeError):
	entity = 'extra_details'  # runtime, writer, actors, poster


class RatingDecodeError(DecodeError):
	entity = 'rating'  # first entry of "Ratings"


class GenreDecodeError(DecodeError):
	"""Unrecognised genre token. Filtered out by the movie decoder, never surfaced past it."""
	entity = 'genre'


class YearParseFault(ValueError):
	"""
	The "Year" field is present but is not an integer.
	This is a fatal fault, deliberately NOT a DecodeError: code that handles
	DecodeError does not catch it.
	"""

	def __init__(self, raw_year: str):
		self.raw_year = raw_year  # the offending text, e.g. "2011–2019"
		super().__init__(f"Year field is not an integer: {raw_year!r}")
