"""HTTP client for the Godspeed REST API."""

import logging

import httpx
from pydantic import ValidationError

from ..config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Settings
from ..exceptions import RemoteError
from ..models.reference import LabelsResponse, ListsResponse
from ..models.task import TaskRequest

logger = logging.getLogger(__name__)


class GodspeedClient:
    """Blocking client for the endpoints the CLI needs."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            api_key: Bearer token for the Godspeed API
            base_url: API root, without trailing slash
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._api_key = api_key
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "GodspeedClient":
        return cls(
            api_key=settings.require_api_key(),
            base_url=settings.api_base_url,
            timeout=settings.request_timeout,
        )

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={"Authorization": f"Bearer {self._api_key}"},
            transport=self._transport,
        )

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            with self._client() as client:
                response = client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise RemoteError(f"{method} {path} failed: {e}") from e

        if not response.is_success:
            raise RemoteError(
                f"API error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )
        return response

    def fetch_lists(self) -> dict[str, str]:
        """Fetch all lists as a lowercased name -> id mapping."""
        response = self._request("GET", "/lists")
        try:
            return ListsResponse.model_validate_json(response.content).to_mapping()
        except ValidationError as e:
            raise RemoteError(f"Failed to decode lists response: {e}") from e

    def fetch_labels(self) -> dict[str, str]:
        """Fetch all labels as a lowercased name -> id mapping."""
        response = self._request("GET", "/labels")
        try:
            return LabelsResponse.model_validate_json(response.content).to_mapping()
        except ValidationError as e:
            raise RemoteError(f"Failed to decode labels response: {e}") from e

    def submit_task(self, task: TaskRequest) -> None:
        """Create a task.

        Raises:
            RemoteError: On transport failure or a non-success status
        """
        self._request("POST", "/tasks", json=task.to_payload())
        logger.info(f"Task sent to Godspeed: {task.title}")
