"""
FastAPI server exposing decoded OMDb movies.
Endpoints:
- GET /health: basic health check
- GET /movie?title=...&imdb_id=...&year=...: fetch from OMDb and return the decoded movie
- POST /decode: decode an OMDb document sent in the request body (no network)

Run: uvicorn api:app --reload
"""

# Import standard libraries for timing
import time  # measure request latencies
from typing import Any, Dict, List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import Body, FastAPI, HTTPException, Query  # FastAPI primitives
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for fetching and decoding
from movie_decoder.decoders import decode_movie  # dict -> Movie
from movie_decoder.errors import DecodeError, YearParseFault  # decode failures
from movie_decoder.models import Movie  # decoded record
from movie_decoder.omdb_client import OMDbClient, OMDbConfigError, OMDbError, OMDbNotFoundError  # OMDb access

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Instantiate the FastAPI application with metadata
app = FastAPI(title="Movie Decoder API", version="1.0.0")  # web app

# Global OMDb client, created on startup when an API key is configured
CLIENT: Optional[OMDbClient] = None


class RatingOut(BaseModel):
	source: str  # review provider
	value: str  # score as published


# Pydantic model that describes the shape of a single movie in responses
class MovieOut(BaseModel):
	title: str
	year: int
	rated: str
	genres: List[str]  # genre tags
	plot: str
	runtime: int  # minutes
	writer: str
	actors: str
	poster_url: str
	ratings: List[RatingOut]
	short_info: str  # "Title, Year"


def to_movie_out(movie: Movie) -> MovieOut:
	"""Convert the domain record to its response schema."""
	details = movie.details
	return MovieOut(
		title=movie.title,
		year=movie.year,
		rated=movie.rated,
		genres=[g.value for g in movie.genre],
		plot=movie.plot,
		runtime=details.runtime,
		writer=details.writer,
		actors=details.actors,
		poster_url=details.poster_url,
		ratings=[RatingOut(source=r.source, value=r.value) for r in details.ratings],
		short_info=movie.short_info,
	)


def _decode_failure(exc: DecodeError) -> HTTPException:
	logger.warning(f"[API] Decode failed: {exc}")
	return HTTPException(status_code=422, detail={"entity": exc.entity, "kind": exc.kind.value})


def _year_fault(exc: YearParseFault) -> HTTPException:
	logger.error(f"[API] Fatal year fault: {exc}")
	return HTTPException(status_code=500, detail=str(exc))


# FastAPI startup hook to create the OMDb client once
@app.on_event("startup")
async def startup_event():
	"""Create the OMDb client, or run decode-only if no key is configured."""
	global CLIENT  # refer to module-level global
	try:
		CLIENT = OMDbClient()
		logger.info("[API] Startup complete. OMDb client ready.")
	except OMDbConfigError as e:
		CLIENT = None
		logger.warning(f"[API] Startup without OMDb client: {e}")


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"omdb_ready": CLIENT is not None,  # True if the client could be created
	}


@app.get("/movie", response_model=MovieOut)
def movie(
	title: Optional[str] = Query(None, description="Movie title to look up"),
	imdb_id: Optional[str] = Query(None, description="IMDb id, e.g. tt0822854"),
	year: Optional[int] = Query(None, description="Release year to disambiguate"),
):
	"""Fetch one movie from OMDb and return it decoded."""
	if not title and not imdb_id:
		raise HTTPException(status_code=400, detail="Provide title or imdb_id")
	if CLIENT is None:
		logger.warning("[API] /movie requested but OMDb client not configured")
		raise HTTPException(status_code=503, detail="OMDb client not configured")

	start = time.time()  # start timer
	logger.debug(f"[API] /movie title={title!r} imdb_id={imdb_id!r} year={year!r}")
	try:
		result = CLIENT.fetch_movie(title=title, imdb_id=imdb_id, year=year)
	except OMDbNotFoundError as e:
		raise HTTPException(status_code=404, detail=str(e))
	except OMDbError as e:
		raise HTTPException(status_code=502, detail=str(e))
	except DecodeError as e:
		raise _decode_failure(e)
	except YearParseFault as e:
		raise _year_fault(e)

	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /movie served '{result.short_info}' in {elapsed_ms:.2f} ms")
	return to_movie_out(result)


@app.post("/decode", response_model=MovieOut)
def decode(document: Dict[str, Any] = Body(..., description="Raw OMDb movie document")):
	"""Decode a document supplied by the caller."""
	try:
		result = decode_movie(document)
	except DecodeError as e:
		raise _decode_failure(e)
	except YearParseFault as e:
		raise _year_fault(e)
	return to_movie_out(result)
