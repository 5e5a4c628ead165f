from abc import ABC, abstractmethod
from typing import Any


class UpstreamClient(ABC):
    """One call to a generative-content endpoint, given a fully-formed payload."""

    @abstractmethod
    async def generate_content(self, model: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Return the decoded success body or raise ``UpstreamCallError``."""

    async def close(self) -> None:
        return None
