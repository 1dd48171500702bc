from typing import Any, Dict, List, Optional, Protocol


class LLM(Protocol):
    """Chat-completion LLM protocol"""

    @property
    def model_name(self) -> str:
        ...

    async def invoke(
        self,
        messages: List[Dict[str, Any]],
        response_format: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Send messages and return the assistant message as a dict"""
        ...
