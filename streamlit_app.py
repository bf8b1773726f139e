"""
Streamlit UI for the Movie Decoder.
Calls the FastAPI server (default http://localhost:8000) to look up a movie by title
and renders the decoded result.

Run API:  uvicorn api:app --reload
Run UI:   streamlit run streamlit_app.py
"""

# HTTP client to call the API
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives

from movie_decoder.config import DEFAULT_API_URL  # default API base URL

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Decoder", layout="wide")

# Main page title
st.title("🎬 Movie Lookup")

# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	api_url = st.text_input("API URL", DEFAULT_API_URL)  # where the API lives

	# Quick probe so the user knows whether lookups can work
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		if h.ok and h.json().get("omdb_ready"):
			st.success("API ready.")
		elif h.ok:
			st.warning("API up, but no OMDb key configured.")
		else:
			st.error(f"API health check returned {h.status_code}.")
	except requests.RequestException:
		st.error("API not reachable.")

# Inputs: title plus optional year
col1, col2 = st.columns([3, 1])  # grid with ratio 3:1
with col1:
	title = st.text_input("Movie title", placeholder="e.g., Shooter")
with col2:
	year = st.text_input("Year (optional)", placeholder="2007")

lookup_btn = st.button("Look up", type="primary")  # triggers a lookup

# When user clicks and the field isn't empty, fetch and render
if lookup_btn and title.strip():
	params = {"title": title.strip()}
	if year.strip().isdigit():
		params["year"] = int(year.strip())

	with st.spinner("Fetching..."):
		try:
			resp = requests.get(f"{api_url}/movie", params=params, timeout=30)
			if resp.status_code == 422:
				# The API found the movie but OMDb left out a required field
				detail = resp.json().get("detail", {})
				st.error(f"Could not decode {detail.get('entity')}: {detail.get('kind')}")
			elif resp.status_code == 404:
				st.info("Movie not found.")
			else:
				resp.raise_for_status()  # raise error if server responded with an error code
				movie = resp.json()  # parse JSON returned by API

				c1, c2 = st.columns([1, 3])  # poster column + details column
				with c1:
					if movie.get('poster_url', '').startswith('http'):
						st.image(movie['poster_url'], width='stretch')  # poster
				with c2:
					st.subheader(movie['short_info'])
					st.caption(f"Rated {movie['rated']} | {movie['runtime']} min")
					st.write(f"Genres: {', '.join(movie['genres']) or '-'}")
					st.write(f"Writer: {movie['writer']}")
					st.write(f"Actors: {movie['actors']}")
					for rating in movie['ratings']:
						st.write(f"{rating['source']}: {rating['value']}")
					st.write(movie['plot'])
		except requests.RequestException as e:  # network/API errors
			st.error(f"API request failed: {e}")
