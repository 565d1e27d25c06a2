"""
5e Reference: N/A (client/server split).
Purpose: Ask the distance service to measure a scene, with retry/back-off.
Dependencies: requests, time, core/log.py.
Ext Hooks: Add authentication.
Client Only: HTTP client with resilience.
"""

import requests
import time
from typing import Optional, Dict, Any
from core.log import setup_logger

logger = setup_logger("tabletop.network")

DISTANCES_ENDPOINT = "/api/distances"


def scene_payload(grid, sources, targets) -> Dict[str, Any]:
    """Snapshot of what the service needs, in the host's grid naming."""
    return {
        "grid": {"size": grid.cell_size, "distance": grid.unit_distance, "units": grid.unit_label},
        "sources": [token.to_dict() for token in sources],
        "targets": [token.to_dict() for token in targets],
    }


class NetworkClient:
    def __init__(self, base_url: str, max_retries: int = 3, retry_delay: float = 1.0, backoff_factor: float = 2.0):
        self.base_url = base_url.rstrip('/')
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.backoff_factor = backoff_factor

    def request_distances(self, grid, sources, targets, timeout: float = 5.0) -> Optional[Dict[str, Any]]:
        """
        Measure a scene on the server.
        - 5xx and connection errors back off and retry; 4xx answers don't.
        - None once the attempts run out.
        """
        url = f"{self.base_url}{DISTANCES_ENDPOINT}"
        data = scene_payload(grid, sources, targets)
        delay = self.retry_delay
        for attempt in range(1, self.max_retries + 1):
            try:
                response = requests.post(url, json=data, timeout=timeout)
            except requests.exceptions.RequestException as e:
                logger.warning("Distance service unreachable (attempt %d/%d): %s", attempt, self.max_retries, e)
            else:
                if response.status_code == 200:
                    return response.json()
                if response.status_code < 500:
                    logger.error("Distance request rejected (%s): %s", response.status_code, response.text)
                    return None
                logger.warning("Distance service error %s (attempt %d/%d)", response.status_code, attempt, self.max_retries)

            if attempt == self.max_retries:
                break
            logger.info("Retrying distance request in %ss", delay)
            time.sleep(delay)
            delay *= self.backoff_factor
        return None

# Usage: client = NetworkClient(SERVER_URL)
# result = client.request_distances(scene.grid, sources, targets)
