"""Public models for the Nexmo SDK."""

from nexmo_sdk.models.entity import Entity

__all__ = ["Entity"]
