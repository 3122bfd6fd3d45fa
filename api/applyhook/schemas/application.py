import json
from typing import Any

from pydantic import BaseModel, Field, field_validator

from applyhook.channels.format_value import format_value

# Order in which the trial form posts its answers as a JSON array.
SHEET_LAYOUT = (
    "account",
    "discord",
    "guild",
    "api_key",
    "killproof",
    "requirements",
    "power_builds",
    "condi_builds",
    "track",
    "static_logs",
    "static_altars",
    "solo_logs",
    "solo_times",
    "solo_teammates",
    "experience",
    "motivation",
)

# The open (CORS) form has no track selector and no static-only questions.
CORS_LAYOUT = (
    "account",
    "discord",
    "guild",
    "api_key",
    "killproof",
    "requirements",
    "power_builds",
    "condi_builds",
    "solo_logs",
    "solo_times",
    "solo_teammates",
    "experience",
    "motivation",
)

LAYOUTS = {"sheet": SHEET_LAYOUT, "cors": CORS_LAYOUT}


class SubmissionShapeError(ValueError):
    """The normalized body cannot be read as an application."""


class Submission(BaseModel):
    account: str = Field("", description="Game account name (Name.1234)")
    discord: str = Field("", description="Discord handle")
    guild: str = Field("", description="Main guild")
    api_key: str = Field("", description="Game API key")
    killproof: str = Field("", description="Link to a killproof.me profile")
    requirements: str = Field("", description="Requirements acknowledgment")
    power_builds: str = Field("", description="Comma-separated power builds")
    condi_builds: str = Field("", description="Comma-separated condition builds")
    track: str = Field("", description="Trial track selector ('Solo' or static)")
    static_logs: str = ""
    static_altars: str = ""
    solo_logs: str = ""
    solo_times: str = ""
    solo_teammates: str = ""
    experience: str = ""
    motivation: str = ""

    model_config = {"extra": "ignore"}

    @field_validator("*", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> str:
        return format_value(value)

    @property
    def is_solo(self) -> bool:
        return self.track == "Solo"

    @classmethod
    def from_values(cls, values: list, variant: str) -> "Submission":
        """Map a positional answer list onto named fields."""
        layout = LAYOUTS[variant]
        if len(values) != len(layout):
            raise SubmissionShapeError(
                f"Expected {len(layout)} answers for the {variant} form, got {len(values)}"
            )
        return cls.model_validate(dict(zip(layout, values)))

    @classmethod
    def from_body(cls, body: str, variant: str) -> "Submission":
        """Decode a normalized body: keyed object, or positional array."""
        try:
            data = json.loads(body)
        except ValueError as exc:
            raise SubmissionShapeError(f"Body is not JSON: {exc}") from exc

        if isinstance(data, dict):
            return cls.model_validate(data)
        if isinstance(data, list):
            return cls.from_values(data, variant)
        raise SubmissionShapeError(f"Unsupported body type: {type(data).__name__}")
