from .activity import (
    ActivityReportRead,
    ActivityReportResponse,
    ActivitySessionRead,
    ActivityViewCreate,
    SuccessResponse,
)
from .auth import Token

__all__ = [
    "ActivityReportRead",
    "ActivityReportResponse",
    "ActivitySessionRead",
    "ActivityViewCreate",
    "SuccessResponse",
    "Token",
]
