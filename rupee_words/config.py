"""
Configuration Module

Settings for the rupee-words service. Values are read from the environment,
with a local .env file loaded first when present.
"""

from dotenv import load_dotenv
import os

# Load environment variables from .env file
load_dotenv()

# How negative currency amounts are split into rupees and paise.
# "signed": strip the sign first and prefix "negative" to the phrase.
# "legacy": floor the raw amount, so -1.50 becomes "fifty paise".
NEGATIVE_CURRENCY_MODE = os.getenv("NEGATIVE_CURRENCY_MODE", "signed").strip().lower()
NEGATIVE_CURRENCY_MODES = ("signed", "legacy")

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").strip().lower() in ("1", "true", "yes")

# Comma separated list of origins allowed to call the API
CORS_ALLOWED_ORIGINS = os.getenv(
    "CORS_ALLOWED_ORIGINS",
    "http://localhost:5173,http://127.0.0.1:5173"
)
