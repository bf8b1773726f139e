"""
Unit tests for the decoders: genre, rating, extra details and movie.
Run: pytest tests/test_decoders.py   (or: python tests/test_decoders.py)
"""

import copy
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

import pytest

from movie_decoder.decoders import (
	decode_extra_details,
	decode_genre,
	decode_genres,
	decode_movie,
	decode_rating,
)
from movie_decoder.errors import (
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
from movie_decoder.models import Genre, Rating


def valid_document():
	return {
		"Title": "Shooter",
		"Year": "2007",
		"Rated": "R",
		"Genre": "Action, Crime, Drama",
		"Plot": "A marksman living in exile is coaxed back into action.",
		"Runtime": "124 min",
		"Writer": "Jonathan Lemkin (screenplay), Stephen Hunter (novel)",
		"Actors": "Mark Wahlberg, Michael Peña, Danny Glover, Kate Mara",
		"Poster": "https://example.com/shooter.jpg",
		"Ratings": [
			{"Source": "Rotten Tomatoes", "Value": "7.2/10"},
			{"Source": "IMDb", "Value": "8.1"},
		],
	}


def assert_equal(actual, expected, msg):
	if actual != expected:
		raise AssertionError(f"{msg} | expected={expected}, actual={actual}")


def assert_true(cond, msg):
	if not cond:
		raise AssertionError(msg)


def decode_error_kind(fn, document):
	"""Run a decoder expected to fail and return (error type, kind)."""
	with pytest.raises(DecodeError) as info:
		fn(document)
	return type(info.value), info.value.kind


# Every required key and the exact error it produces when removed
MISSING_KEY_ERRORS = [
	("Title", MovieDecodeError, MovieErrorKind.MISSING_TITLE),
	("Year", MovieDecodeError, MovieErrorKind.MISSING_YEAR),
	("Rated", MovieDecodeError, MovieErrorKind.MISSING_AGE_RATING),
	("Genre", MovieDecodeError, MovieErrorKind.MISSING_GENRE),
	("Plot", MovieDecodeError, MovieErrorKind.MISSING_PLOT),
	("Runtime", ExtraDetailsDecodeError, ExtraDetailsErrorKind.MISSING_RUNTIME),
	("Writer", ExtraDetailsDecodeError, ExtraDetailsErrorKind.MISSING_WRITER),
	("Actors", ExtraDetailsDecodeError, ExtraDetailsErrorKind.MISSING_ACTORS),
	("Poster", ExtraDetailsDecodeError, ExtraDetailsErrorKind.MISSING_POSTER_URL),
	("Ratings", RatingDecodeError, RatingErrorKind.MISSING_SOURCE),
]


def test_decode_genre_exact_match():
	assert_equal(decode_genre("Action"), Genre.ACTION, "Action tag")
	assert_equal(decode_genre("Sci-fi"), Genre.SCI_FI, "Sci-fi tag")


def test_decode_genre_rejects_near_misses():
	for token in ["action", " Action", "Action ", "Sci-Fi", "", "Bogus"]:
		with pytest.raises(GenreDecodeError) as info:
			decode_genre(token)
		assert_equal(info.value.kind, GenreErrorKind.UNKNOWN_GENRE, f"token {token!r}")


def test_decode_rating_takes_first_entry_only():
	rating = decode_rating(valid_document())
	assert_equal(rating, Rating(source="Rotten Tomatoes", value="7.2/10"), "first rating")


def test_decode_rating_keeps_value_verbatim():
	document = {"Ratings": [{"Source": "Rotten Tomatoes", "Value": "85%"}]}
	assert_equal(decode_rating(document).value, "85%", "percent value kept as text")


@pytest.mark.parametrize("ratings", [None, [], "not a list", ["not an object"], [{"Value": "8.1"}], [{"Source": 3, "Value": "8.1"}]])
def test_decode_rating_missing_source(ratings):
	document = {} if ratings is None else {"Ratings": ratings}
	error_type, kind = decode_error_kind(decode_rating, document)
	assert_equal((error_type, kind), (RatingDecodeError, RatingErrorKind.MISSING_SOURCE), f"ratings={ratings!r}")


def test_decode_rating_missing_value():
	for entry in [{"Source": "IMDb"}, {"Source": "IMDb", "Value": None}, {"Source": "IMDb", "Value": 8.1}]:
		error_type, kind = decode_error_kind(decode_rating, {"Ratings": [entry]})
		assert_equal(kind, RatingErrorKind.MISSING_VALUE, f"entry={entry!r}")


def test_runtime_with_and_without_suffix():
	document = valid_document()
	assert_equal(decode_extra_details(document).runtime, 124, "124 min")
	document["Runtime"] = "124"
	assert_equal(decode_extra_details(document).runtime, 124, "bare 124")


@pytest.mark.parametrize("runtime", ["N/A", "", "   ", "min 124", "-5 min", "12.5 min", 124])
def test_malformed_runtime_reports_missing_runtime(runtime):
	document = valid_document()
	document["Runtime"] = runtime
	error_type, kind = decode_error_kind(decode_extra_details, document)
	assert_equal(kind, ExtraDetailsErrorKind.MISSING_RUNTIME, f"runtime={runtime!r}")


def test_extra_details_propagates_rating_error_unchanged():
	document = valid_document()
	document["Ratings"] = [{"Source": "IMDb"}]
	with pytest.raises(RatingDecodeError) as info:
		decode_extra_details(document)
	assert_equal(info.value.kind, RatingErrorKind.MISSING_VALUE, "rating kind surfaces as-is")


def test_extra_details_first_failure_wins():
	document = valid_document()
	del document["Writer"]
	del document["Poster"]
	error_type, kind = decode_error_kind(decode_extra_details, document)
	assert_equal(kind, ExtraDetailsErrorKind.MISSING_WRITER, "writer is checked before poster")


def test_decode_movie_round_trips_scalar_fields():
	document = valid_document()
	movie = decode_movie(document)
	assert_equal(movie.title, "Shooter", "title")
	assert_equal(movie.year, 2007, "year")
	assert_equal(movie.rated, "R", "rated")
	assert_equal(movie.plot, document["Plot"], "plot")
	assert_equal(movie.genre, (Genre.ACTION, Genre.CRIME, Genre.DRAMA), "genres")
	assert_equal(movie.details.runtime, 124, "runtime")
	assert_equal(movie.details.writer, document["Writer"], "writer")
	assert_equal(movie.details.actors, document["Actors"], "actors")
	assert_equal(movie.details.poster_url, document["Poster"], "poster")
	assert_equal(movie.details.ratings, (Rating("Rotten Tomatoes", "7.2/10"),), "ratings")
	assert_equal(movie.short_info, "Shooter, 2007", "short info")


@pytest.mark.parametrize("key,error_type,kind", MISSING_KEY_ERRORS)
def test_removing_one_key_gives_its_error(key, error_type, kind):
	document = valid_document()
	del document[key]
	actual = decode_error_kind(decode_movie, document)
	assert_equal(actual, (error_type, kind), f"without {key}")


@pytest.mark.parametrize("key,error_type,kind", MISSING_KEY_ERRORS)
def test_null_value_counts_as_missing(key, error_type, kind):
	document = valid_document()
	document[key] = None
	actual = decode_error_kind(decode_movie, document)
	assert_equal(actual, (error_type, kind), f"{key} = null")


def test_non_text_year_is_missing_year():
	document = valid_document()
	document["Year"] = 2007
	assert_equal(decode_error_kind(decode_movie, document)[1], MovieErrorKind.MISSING_YEAR, "numeric year")


def test_empty_title_is_missing_title():
	document = valid_document()
	document["Title"] = ""
	assert_equal(decode_error_kind(decode_movie, document)[1], MovieErrorKind.MISSING_TITLE, "empty title")


def test_non_numeric_year_is_a_fatal_fault():
	document = valid_document()
	document["Year"] = "2011–2019"
	with pytest.raises(YearParseFault) as info:
		decode_movie(document)
	assert_true(not isinstance(info.value, DecodeError), "year fault is outside the decode taxonomy")
	assert_equal(info.value.raw_year, "2011–2019", "offending text kept")


def test_genre_filtering():
	assert_equal(decode_genres("Action, Crime, Drama"), (Genre.ACTION, Genre.CRIME, Genre.DRAMA), "all known")
	assert_equal(decode_genres("Action, Bogus, Drama"), (Genre.ACTION, Genre.DRAMA), "unknown dropped, order kept")
	assert_equal(decode_genres(""), (), "empty string")
	assert_equal(decode_genres("Bogus, Nope"), (), "only unknown")
	assert_equal(decode_genres("Action,Drama"), (), "delimiter must be comma plus space")


def test_movie_with_only_unknown_genres_still_decodes():
	document = valid_document()
	document["Genre"] = "Bogus, Nope"
	movie = decode_movie(document)
	assert_equal(movie.genre, (), "empty genre list")


def test_decode_is_idempotent_and_does_not_mutate_input():
	document = valid_document()
	snapshot = copy.deepcopy(document)
	first = decode_movie(document)
	second = decode_movie(document)
	assert_equal(first, second, "same document decodes to equal movies")
	assert_equal(document, snapshot, "input unchanged")


def test_non_object_document_reports_first_field():
	assert_equal(decode_error_kind(decode_movie, []), (MovieDecodeError, MovieErrorKind.MISSING_TITLE), "list document")


@pytest.mark.parametrize("key,value,kind", [
	("Genre", ["Action", "Crime"], MovieErrorKind.MISSING_GENRE),  # an array, not the comma-separated text
	("Genre", {"name": "Action"}, MovieErrorKind.MISSING_GENRE),
	("Title", 42, MovieErrorKind.MISSING_TITLE),
	("Rated", True, MovieErrorKind.MISSING_AGE_RATING),
	("Plot", 1.5, MovieErrorKind.MISSING_PLOT),
])
def test_non_text_field_is_missing(key, value, kind):
	document = valid_document()
	document[key] = value
	actual = decode_error_kind(decode_movie, document)
	assert_equal(actual, (MovieDecodeError, kind), f"{key} = {value!r}")


def test_decoded_movie_is_hashable_and_frozen():
	movie = decode_movie(valid_document())
	assert_equal(hash(movie), hash(decode_movie(valid_document())), "equal movies hash equally")
	assert_true(isinstance(movie.genre, tuple), "genres are a tuple")
	assert_true(isinstance(movie.details.ratings, tuple), "ratings are a tuple")
	with pytest.raises(AttributeError):
		movie.genre.append(Genre.WAR)
	with pytest.raises(AttributeError):
		movie.details.ratings.clear()
	with pytest.raises(AttributeError):
		movie.title = "Other"  # FrozenInstanceError subclasses AttributeError


def main():
	print("Running decoder tests...")
	sys.exit(pytest.main([__file__, "-q"]))


if __name__ == '__main__':
	main()
