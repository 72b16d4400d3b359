import logging
from typing import List, Optional

import httpx

from ..config import API_URL
from ..schemas.task import TaskRead

logger = logging.getLogger(__name__)


class TaskApiClient:
    """HTTP client for the task endpoints.

    Non-2xx responses raise ``httpx.HTTPStatusError``; transport failures
    raise the corresponding ``httpx.HTTPError`` subclass.
    """

    def __init__(
        self,
        base_url: str = API_URL,
        http: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ):
        self._owns_http = http is None
        self.http = http or httpx.Client(base_url=base_url, timeout=timeout)

    def __enter__(self) -> "TaskApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def get_tasks(self) -> List[TaskRead]:
        result = self._send("GET", "/task")
        return [TaskRead.model_validate(item) for item in result["data"]]

    def create_task(self, title: str, description: str) -> TaskRead:
        result = self._send("POST", "/task", json={"Title": title, "Description": description})
        return TaskRead.model_validate(result["data"])

    def complete_task(self, task_id: int) -> TaskRead:
        result = self._send("PATCH", f"/task/{task_id}/complete")
        return TaskRead.model_validate(result["data"])

    def _send(self, method: str, path: str, **kwargs) -> dict:
        response = self.http.request(method, path, **kwargs)
        if response.is_error:
            logger.warning("%s %s failed with %s: %s", method, path, response.status_code, response.text)
        response.raise_for_status()
        return response.json()
