from pathlib import Path

# --- CONFIGURATION ---

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Static, already geolocated dataset loaded once per session.
DATA_PATH = PROJECT_ROOT / 'data' / 'ip_locations.csv'

# Seed for the group assignment. The assignment depends on the seed, the
# number of records and their order: changing any of them reshuffles groups.
RANDOM_SEED = 42

# Strict: a non-numeric coordinate aborts the load.
# Lenient: the row is dropped and the dropped count is reported.
STRICT_COORDINATES = False

# Popup values are interpolated as-is unless this is set.
ESCAPE_POPUPS = False

# --- MAP / TABLE ---

MAP_TILES = 'CartoDB positron'
MAP_ZOOM = 2
MAP_HEIGHT = 650
PAGE_SIZE = 25

# --- LOGGING ---

LOG_LEVEL = 'INFO'
