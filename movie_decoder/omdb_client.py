"""
Thin HTTP wrapper around the OMDb API.
Fetches one raw JSON document per call and hands it to the decoders.
"""

from typing import Any, Dict, Optional  # type hints

import requests  # HTTP GET + query-string encoding
from loguru import logger  # console logger

from . import config  # env-driven settings
from .decoders import decode_movie  # dict -> Movie
from .models import Movie  # decoded record


class OMDbError(RuntimeError):
	"""Transport failure, bad HTTP status, or an OMDb error payload."""


class OMDbNotFoundError(OMDbError):
	"""OMDb answered but has no movie for the query."""


class OMDbConfigError(OMDbError):
	"""No API key was configured."""


class OMDbClient:
	"""
	Fetches movie documents from omdbapi.com.
	The session can be injected so tests never touch the network.
	"""

	def __init__(
		self,
		api_key: Optional[str] = None,  # falls back to OMDB_API_KEY
		base_url: str = config.OMDB_URL,  # API endpoint
		timeout: float = config.OMDB_TIMEOUT_S,  # seconds per request
		plot: str = config.OMDB_PLOT,  # "short" or "full"
		session: Optional[requests.Session] = None,  # shared connection pool
	):
		self.api_key = api_key or config.OMDB_API_KEY
		if not self.api_key:
			raise OMDbConfigError("OMDB_API_KEY not set and no api_key passed")
		self.base_url = base_url
		self.timeout = timeout
		self.plot = plot
		self.session = session or requests.Session()

	def fetch_document(
		self,
		title: Optional[str] = None,
		imdb_id: Optional[str] = None,
		year: Optional[int] = None,
	) -> Dict[str, Any]:
		"""Return the raw OMDb JSON object for a title or IMDb id."""
		if not imdb_id and not title:
			raise ValueError("Provide imdb_id or title")

		params = {"apikey": self.api_key, "plot": self.plot}
		params["i" if imdb_id else "t"] = imdb_id or title  # id wins when both are given
		if year is not None:
			params["y"] = str(year)

		logger.debug(f"[OMDb] GET {self.base_url} t={title!r} i={imdb_id!r} y={year!r}")
		try:
			resp = self.session.get(self.base_url, params=params, timeout=self.timeout)
			resp.raise_for_status()
			data = resp.json()
		except requests.HTTPError as exc:
			# OMDb answers a bad key with 401 plus {"Response": "False", "Error": ...}
			message = self._error_message(exc.response)
			logger.warning(f"[OMDb] HTTP error: {message or exc}")
			if message:
				raise self._error_for(message) from exc
			raise OMDbError(f"OMDb request failed: {exc}") from exc
		except requests.RequestException as exc:
			logger.warning(f"[OMDb] Request failed: {exc}")
			raise OMDbError(f"OMDb request failed: {exc}") from exc
		except ValueError as exc:
			# body was not JSON
			raise OMDbError(f"OMDb returned invalid JSON: {exc}") from exc

		if not isinstance(data, dict):
			raise OMDbError("OMDb returned a non-object JSON document")
		if data.get("Response") == "False":
			message = str(data.get("Error") or "unknown error")
			logger.info(f"[OMDb] Error response: {message}")
			raise self._error_for(message)
		return data

	@staticmethod
	def _error_message(resp) -> Optional[str]:
		"""Pull OMDb's "Error" text out of a failed response, if it has one."""
		if resp is None:
			return None
		try:
			body = resp.json()
		except ValueError:
			return None  # not JSON, e.g. an HTML error page
		message = body.get("Error") if isinstance(body, dict) else None
		return message if isinstance(message, str) and message else None

	@staticmethod
	def _error_for(message: str) -> OMDbError:
		if "not found" in message.lower():
			return OMDbNotFoundError(message)
		return OMDbError(message)

	def fetch_movie(
		self,
		title: Optional[str] = None,
		imdb_id: Optional[str] = None,
		year: Optional[int] = None,
	) -> Movie:
		"""Fetch and decode. Decode errors propagate to the caller unchanged."""
		document = self.fetch_document(title=title, imdb_id=imdb_id, year=year)
		movie = decode_movie(document)
		logger.info(f"[OMDb] Decoded '{movie.short_info}'")
		return movie
