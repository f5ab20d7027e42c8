"""
Purpose: Configs for the grid service, client retries and terrain.
Dependencies: os.
Ext Hooks: Add terrain types, per-deployment limits.
"""

import os

SERVER_URL = os.environ.get("HEXGRID_SERVER_URL", "http://localhost:5000")
LOG_LEVEL = os.environ.get("HEXGRID_LOG_LEVEL", "INFO")

# Client retry policy
MAX_RETRIES = 3
RETRY_DELAY = 1.0
BACKOFF_FACTOR = 2.0
REQUEST_TIMEOUT = 5.0

# Largest grid the server will build from a request body
MAX_GRID_CELLS = 100 * 100

# Terrain type: (cost to enter, blocked)
TERRAIN = {
    'plain': (1.0, False),
    'forest': (2.0, False),
    'hill': (3.0, False),
    'road': (0.5, False),
    'water': (None, True),
    'wall': (None, True),
}
DEFAULT_TERRAIN = 'plain'
