"""
Configuration loader.
Reads settings from a .env file (if present) and the environment.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# OMDb API settings
OMDB_API_KEY = os.getenv("OMDB_API_KEY")
OMDB_URL = os.getenv("OMDB_URL", "http://www.omdbapi.com/")
OMDB_TIMEOUT_S = float(os.getenv("OMDB_TIMEOUT_S", "8"))
OMDB_PLOT = os.getenv("OMDB_PLOT", "short")  # "short" or "full"

# Where the Streamlit UI expects the FastAPI server
DEFAULT_API_URL = os.getenv("MOVIE_API_URL", "http://localhost:8000")
