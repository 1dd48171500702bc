from typing import Any, Dict, List, Optional, Protocol, Union


class JSONParser(Protocol):
    """Lenient JSON parser for model output"""

    async def invoke(
        self, text: str, default_value: Optional[Any] = None
    ) -> Union[Dict, List, Any]:
        """Parse ``text``; return ``default_value`` for empty input when given"""
        ...
