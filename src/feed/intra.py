"""Client for the Epitech intranet planning endpoint.

A single GET per feed request, authenticated by the autologin token embedded
in the path:

    GET {intra_url}/auth-{token}/planning/load?format=json&start=...&end=...

No retries are made; the only timeout is the one passed to requests.
"""

from typing import Any

import requests

from src.feed.errors import UpstreamEmptyError, UpstreamFailureError
from src.feed.logging import get_logger
from src.feed.models import RawScheduleRecord
from src.feed.window import QueryWindow

log = get_logger(__name__)


def _upstream_message(payload: Any) -> str | None:
    """Pull the intranet's own error text out of a JSON object, if any."""
    if isinstance(payload, dict):
        for key in ("message", "error"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    return None


class IntraClient:
    """Fetches a user's planning from the intranet.

    The requests.Session only pools connections; it carries no per-user
    state, so one client can serve concurrent feed requests.
    """

    PLANNING_PATH = "/auth-{token}/planning/load"

    def __init__(
        self,
        base_url: str = "https://intra.epitech.eu",
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def fetch_planning(self, token: str, window: QueryWindow) -> list[RawScheduleRecord]:
        """Fetch the activities of the user owning token within window.

        Args:
            token: Validated autologin token.
            window: Date bounds of the query.

        Returns:
            Records in the order the intranet returned them (possibly empty).

        Raises:
            UpstreamEmptyError: The intranet returned no data at all.
            UpstreamFailureError: Transport error, bad status or bad payload.
        """
        url = self.base_url + self.PLANNING_PATH.format(token=token)
        params = {"format": "json", **window.as_params()}

        try:
            response = self._session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            # str(e) may embed the URL, and with it the token
            log.warning("planning_request_failed", error_type=type(e).__name__)
            raise UpstreamFailureError(
                f"could not reach the intranet: {type(e).__name__}"
            ) from e

        payload: Any = None
        if response.content.strip():
            try:
                payload = response.json()
            except ValueError as e:
                if response.ok:
                    log.warning("planning_payload_invalid", status=response.status_code)
                    raise UpstreamFailureError(
                        "intranet returned an invalid planning payload"
                    ) from e

        if not response.ok:
            log.warning("planning_request_rejected", status=response.status_code)
            message = _upstream_message(payload)
            raise UpstreamFailureError(
                message or f"intranet returned HTTP {response.status_code}"
            )

        if payload is None or payload == {}:
            log.info("planning_empty", **window.as_params())
            raise UpstreamEmptyError()

        if not isinstance(payload, list):
            log.warning("planning_payload_unexpected", type=type(payload).__name__)
            raise UpstreamFailureError(
                _upstream_message(payload) or "intranet returned an unexpected planning payload"
            )

        records = [
            RawScheduleRecord.model_validate(item if isinstance(item, dict) else {})
            for item in payload
        ]
        log.info("planning_fetched", records=len(records), **window.as_params())
        return records

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()
