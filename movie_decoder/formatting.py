"""
Console rendering of decoded movies.
"""

from .models import Movie


def format_movie(movie: Movie) -> str:
	"""Return a multi-line, human-readable summary of a movie."""
	details = movie.details
	genres = ', '.join(g.value for g in movie.genre) or '-'  # recognised genres only
	lines = [
		movie.short_info,
		f"Rated:   {movie.rated}",
		f"Genre:   {genres}",
		f"Runtime: {details.runtime} min",
		f"Writer:  {details.writer}",
		f"Actors:  {details.actors}",
	]
	for rating in details.ratings:
		lines.append(f"Rating:  {rating.source}: {rating.value}")
	lines.append(f"Plot:    {movie.plot}")
	lines.append(f"Poster:  {details.poster_url}")
	return '\n'.join(lines)


def display_movie(movie: Movie) -> None:
	print(format_movie(movie))
