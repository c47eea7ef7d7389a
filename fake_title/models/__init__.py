"""Data schemas and validation."""
from .schemas import RequestVariant, TitleRecord

__all__ = [
    "RequestVariant",
    "TitleRecord",
]
