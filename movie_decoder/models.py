"""
Data models for the movie decoder.
Defines the typed records that a raw OMDb document is decoded into.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass  # auto-generates __init__, __repr__, __eq__
# Enum gives us a closed set of genre tags
from enum import Enum  # finite tagged set
# Import typing helpers for precise and self-documenting types
from typing import Tuple  # immutable ordered sequences


class Genre(Enum):
	"""
	The closed set of genre tags we recognise.
	Each member's value is the exact spelling used in the source "Genre" field.
	Adding a genre is a single new member here.
	"""
	ACTION = 'Action'
	ADVENTURE = 'Adventure'
	ANIMATION = 'Animation'
	BIOGRAPHY = 'Biography'
	COMEDY = 'Comedy'
	CRIME = 'Crime'
	DOCUMENTARY = 'Documentary'
	DRAMA = 'Drama'
	FAMILY = 'Family'
	FANTASY = 'Fantasy'
	HISTORY = 'History'
	HORROR = 'Horror'
	MUSIC = 'Music'
	MUSICAL = 'Musical'
	MYSTERY = 'Mystery'
	ROMANCE = 'Romance'
	SCI_FI = 'Sci-fi'
	SHORT = 'Short'
	SPORT = 'Sport'
	THRILLER = 'Thriller'
	WAR = 'War'
	WESTERN = 'Western'


@dataclass(frozen=True)
class Rating:
	"""A single critic rating, e.g. Rating('Rotten Tomatoes', '85%')."""
	source: str  # review provider, never empty
	value: str  # score exactly as published ("7.2/10", "85%", "61/100")


@dataclass(frozen=True)
class ExtraDetails:
	"""
	Details about the movie that are needed less often than the headline fields.
	"""
	runtime: int  # minutes, >= 0
	writer: str  # free text, may be empty
	ratings: Tuple[Rating, ...]  # in source order; usually exactly one entry
	actors: str  # comma-separated names as published
	poster_url: str  # expected to be a URL, not validated


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single movie decoded from one OMDb document.
	Owns its ExtraDetails, which in turn owns its ratings.
	"""
	title: str  # never empty
	year: int  # release year (e.g. 2007), not range-checked
	rated: str  # age/content rating code, e.g. "R"
	genre: Tuple[Genre, ...]  # recognised genres in source order; may be empty
	details: ExtraDetails  # runtime, credits, ratings, poster
	plot: str  # synopsis

	@property
	def short_info(self) -> str:
		"""Title and year, e.g. "Shooter, 2007"."""
		return f"{self.title}, {self.year}"
