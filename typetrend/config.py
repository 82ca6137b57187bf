import os
from pathlib import Path

APP_NAME = "TypeTrend"
DATA_DIR = Path(os.environ.get("TYPETREND_HOME", Path.home() / ".typetrend"))

# Persistence slot holding the full session log
SESSIONS_KEY = "typingSessions"

# Session defaults
WORDS_PER_SESSION = 60
WORD_LENGTH = 5  # characters per "word" in WPM figures
SAMPLE_INTERVAL_MS = 1000

# Aggregate windows
HOUR_MS = 3_600_000
DAY_MS = 86_400_000

# Redraw cadence for the history panel while idle
AGGREGATE_REFRESH_MS = 30_000
