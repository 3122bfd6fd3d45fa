"""Chat notification types."""

from dataclasses import dataclass


@dataclass
class ChannelPayload:
    """Represents the HTTP request payload for a notification channel."""
    method: str
    url: str
    headers: dict[str, str]
    body: str  # JSON string
