"""
Fetch a movie from OMDb (or decode a local OMDb JSON file) and print it.

Usage:
    python -m scripts.fetch_movie "Shooter" --year 2007
    python -m scripts.fetch_movie --imdb-id tt0822854
    python -m scripts.fetch_movie --file data/shooter.json

Needs OMDB_API_KEY in the environment (or .env) unless --file is used.
"""

import argparse  # command-line options
import sys

from loguru import logger  # console logging

from movie_decoder.errors import DecodeError
from movie_decoder.formatting import display_movie
from movie_decoder.loader import MovieLoader
from movie_decoder.omdb_client import OMDbClient, OMDbError


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description="Fetch and decode an OMDb movie.")
	parser.add_argument('title', nargs='?', help="movie title to look up")
	parser.add_argument('--year', type=int, help="release year to disambiguate")
	parser.add_argument('--imdb-id', help="look up by IMDb id instead of title")
	parser.add_argument('--file', help="decode a local OMDb JSON document instead of fetching")
	return parser


def main(argv=None) -> int:
	args = build_parser().parse_args(argv)
	if not (args.title or args.imdb_id or args.file):
		logger.error("[CLI] Provide a title, --imdb-id or --file")
		return 2

	try:
		if args.file:
			movie = MovieLoader().load_movie_from_json(args.file)
		else:
			movie = OMDbClient().fetch_movie(title=args.title, imdb_id=args.imdb_id, year=args.year)
	except OMDbError as e:
		logger.error(f"[CLI] OMDb lookup failed: {e}")
		return 1
	except DecodeError as e:
		logger.error(f"[CLI] Could not decode movie: {e}")
		return 1

	display_movie(movie)
	return 0


if __name__ == '__main__':
	sys.exit(main())
