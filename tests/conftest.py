import os

# Keep test runs from writing log files; must be set before rupee_words.config is imported
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("NEGATIVE_CURRENCY_MODE", "signed")
