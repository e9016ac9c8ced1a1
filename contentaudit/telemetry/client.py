from typing import Any

import httpx

from contentaudit.logging.logger import Log


class Telemetry:
    """Posts usage events to the configured metrics endpoint."""

    def __init__(
        self,
        *,
        disabled: bool,
        endpoint: str = "",
        timeout_seconds: int = 5,
    ) -> None:
        self._disabled = disabled
        self._endpoint = endpoint
        self._timeout_seconds = timeout_seconds

    @property
    def enabled(self) -> bool:
        return not self._disabled and bool(self._endpoint)

    def submit_record(self, event: dict[str, Any]) -> None:
        """Send one event. Delivery failures are logged, never raised."""
        if not self.enabled:
            Log.debug(f"Telemetry disabled, not sending {event.get('name')}")
            return
        try:
            response = httpx.post(
                self._endpoint,
                json={"event": event},
                timeout=self._timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            Log.warning(f"Telemetry submission failed: {exc}")
