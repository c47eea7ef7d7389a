"""Pydantic schemas to validate the title service payload.

The schema acts as a contract at the ingress point so we fail fast when
the service's payload changes shape.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict


class RequestVariant(str, Enum):
    """Which title endpoint a request goes to."""

    NORMAL = "normal"
    SLOW = "slow"


class TitleRecord(BaseModel):
    """A generated job title as returned by the service.

    Fields are taken as received: empty strings pass, extra keys are ignored.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    seniority: str
    field: str
    role: str
