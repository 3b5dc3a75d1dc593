"""
Status response model.
Fixed service status and version returned from the root path.
"""
from pydantic import BaseModel

from status_service.config import STATUS, VERSION


class StatusResponse(BaseModel):
    status: str = STATUS
    version: str = VERSION

    class Config:
        frozen = True
