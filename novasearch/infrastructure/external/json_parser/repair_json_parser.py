import logging
from typing import Any, Dict, List, Optional, Union

import json_repair

from novasearch.domain.external.json_parser import JSONParser

logger = logging.getLogger(__name__)


class RepairJSONParser(JSONParser):
    """JSON parser that repairs truncated or fenced model output before loading"""

    async def invoke(
        self, text: str, default_value: Optional[Any] = None
    ) -> Union[Dict, List, Any]:
        logger.debug(f"Parsing JSON text: {text[:200] if text else text!r}")
        if not text or not text.strip():
            if default_value is not None:
                return default_value
            raise ValueError("Empty JSON text and no default value")

        return json_repair.repair_json(text, ensure_ascii=False, return_objects=True)
