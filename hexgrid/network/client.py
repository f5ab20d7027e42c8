"""
Purpose: Query the grid server, wrapping calls with retry/back-off.
Dependencies: requests, time, logging, hexgrid/config.py, hexgrid/hex/coord.py.
Ext Hooks: Add authentication, caching of repeated queries.
Client Only: HTTP client with resilience.
"""

import logging
import time
from typing import Any, Dict, List, Optional

import requests

from hexgrid.config import BACKOFF_FACTOR, MAX_RETRIES, REQUEST_TIMEOUT, RETRY_DELAY, SERVER_URL
from hexgrid.hex.coord import Coord
from hexgrid.pathfinding.find_in_range import RangeResult
from hexgrid.pathfinding.find_path import PathResult

logger = logging.getLogger(__name__)


class NetworkClient:
    def __init__(self, base_url: str = SERVER_URL, max_retries: int = MAX_RETRIES,
                 retry_delay: float = RETRY_DELAY, backoff_factor: float = BACKOFF_FACTOR):
        self.base_url = base_url.rstrip('/')
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.backoff_factor = backoff_factor

    def backoff_delays(self):
        """Sleep durations between attempts: retry_delay, then scaled by backoff_factor."""
        return [self.retry_delay * self.backoff_factor ** i for i in range(self.max_retries - 1)]

    def _attempt(self, url: str, data: Dict[str, Any], timeout: float) -> Optional[Dict[str, Any]]:
        try:
            response = requests.post(url, json=data, timeout=timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("Network error posting to %s: %s", url, e)
            return None
        if response.status_code != 200:
            logger.warning("Server error %s from %s", response.status_code, url)
            return None
        return response.json()

    def post_with_retry(self, endpoint: str, data: Dict[str, Any],
                        timeout: float = REQUEST_TIMEOUT) -> Optional[Dict[str, Any]]:
        """Post, retrying with exponential back-off. None once all attempts fail."""
        url = f"{self.base_url}{endpoint}"
        delays = self.backoff_delays()
        for attempt in range(self.max_retries):
            body = self._attempt(url, data, timeout)
            if body is not None:
                return body
            if attempt < len(delays):
                logger.info("Retry %d/%d in %s seconds", attempt + 1, self.max_retries - 1, delays[attempt])
                time.sleep(delays[attempt])
        return None

    def find_path(self, tiles: List[List[str]], start: Coord, goal: Coord) -> Optional[PathResult]:
        """Ask the server for a path. None if unreachable or the server is down."""
        data = {"tiles": tiles, "start": start.to_dict(), "goal": goal.to_dict()}
        result = self.post_with_retry("/api/find_path", data)
        if result is None or 'error' in result:
            return None
        return PathResult(result['cost'], [Coord.from_dict(c) for c in result['path']])

    def find_in_range(self, tiles: List[List[str]], start: Coord, max_range: float,
                      include_src: bool = False) -> Optional[List[RangeResult]]:
        data = {
            "tiles": tiles,
            "start": start.to_dict(),
            "max_range": max_range,
            "include_src": include_src,
        }
        result = self.post_with_retry("/api/find_in_range", data)
        if result is None:
            return None
        return [RangeResult(Coord.from_dict(r['coord']), r['cost']) for r in result['results']]
