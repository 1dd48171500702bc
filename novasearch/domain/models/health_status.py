from typing import Literal, Optional

from pydantic import BaseModel


class HealthStatus(BaseModel):
    """Health of one backing service"""

    service: str
    status: Literal["ok", "error"] = "ok"
    details: Optional[str] = None
