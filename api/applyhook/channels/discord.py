"""Discord embed for a new guild application."""

import datetime
import json

from applyhook.channels import ChannelPayload
from applyhook.channels.format_value import BLANK, field_value, spaced_list
from applyhook.config import Settings
from applyhook.schemas.application import Submission

# Vertical space between inline rows
SPACER = {"name": BLANK, "value": BLANK}


def _field(name: str, value: str, inline: bool = False) -> dict:
    field = {"name": name, "value": field_value(value)}
    if inline:
        field["inline"] = True
    return field


def _track_fields(submission: Submission, settings: Settings) -> list[dict]:
    if settings.handler_variant == "cors" or submission.is_solo:
        return [
            _field("Logs", submission.solo_logs),
            _field("Playtimes", submission.solo_times),
            _field("Who do you play with?", spaced_list(submission.solo_teammates), inline=True),
        ]
    return [
        _field("Logs", submission.static_logs),
        _field("Altar Strategy", submission.static_altars),
    ]


def _title(submission: Submission, settings: Settings) -> str:
    if settings.handler_variant == "cors":
        return "New Application!"
    track = "Non-Static" if submission.is_solo else "Static"
    return f"New Application! ({track} Trial)"


def build_application_embed(submission: Submission, settings: Settings) -> dict:
    """
    Build the webhook body announcing *submission*.

    Consecutive inline fields share a row; the spacer fields force a break
    between identity, links and builds.
    """
    fields = [
        _field("Account", submission.account, inline=True),
        _field("Discord", submission.discord, inline=True),
        _field("Main Guild", submission.guild, inline=True),
        SPACER,
        _field("API Key", f"[{submission.api_key}]({settings.api_key_url})", inline=True),
        _field(
            "Killproof.me",
            f"[Click me]({settings.killproof_url}{submission.account})",
            inline=True,
        ),
        SPACER,
        _field("Power Builds", spaced_list(submission.power_builds), inline=True),
        _field("Condi Builds", spaced_list(submission.condi_builds), inline=True),
    ]
    fields.extend(_track_fields(submission, settings))
    fields.append(_field("Experience?", submission.experience))
    fields.append(_field("Why do you want to join us?", submission.motivation))

    return {
        "content": settings.mention_content,
        "embeds": [
            {
                "title": _title(submission, settings),
                "thumbnail": {"url": settings.thumbnail_url},
                "fields": fields,
                "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
                "footer": {"text": settings.footer_text},
            }
        ],
    }


def format_application(submission: Submission, settings: Settings) -> ChannelPayload:
    return ChannelPayload(
        method="POST",
        url=settings.discord_webhook_url,
        headers={"Content-Type": "application/json"},
        body=json.dumps(build_application_embed(submission, settings)),
    )
