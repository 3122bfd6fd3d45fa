from typing import Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "ApplyHook"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    # "sheet": store in the spreadsheet API, then notify (16-field form)
    # "cors": origin-gated, notify only (13-field form)
    handler_variant: Literal["sheet", "cors"] = "sheet"

    # Outbound endpoints
    storage_url: str = ""
    discord_webhook_url: str = ""

    # CORS gate (cors variant only), exact Origin match
    allowed_origin: str = ""
    cors_max_age: int = 86400

    # Declared Content-Length above this is answered with 413
    max_body_size: int = 2 * 1024 * 1024

    # Seconds; unset means outbound calls never time out
    outbound_timeout: Optional[float] = None

    # Use 502/500 instead of 200 on storage and internal failures
    strict_status_codes: bool = False

    # Discord embed
    mention_content: str = "<@&730372255758155837> <:dTpepedFeelsamazingman:549285673899786251>"
    thumbnail_url: str = (
        "https://cdn.discordapp.com/attachments/765177472836435979/831614589909205042/logo.png"
    )
    footer_text: str = "I made this :)"
    api_key_url: str = "https://gw2efficiency.com/user/api-keys"
    killproof_url: str = "https://killproof.me/proof/"

    model_config = {"env_file": ".env", "extra": "ignore"}

    def missing_endpoints(self) -> list[str]:
        """Names of endpoint settings the selected variant needs but lacks."""
        missing = []
        if self.handler_variant == "sheet" and not self.storage_url:
            missing.append("STORAGE_URL")
        if not self.discord_webhook_url:
            missing.append("DISCORD_WEBHOOK_URL")
        if self.handler_variant == "cors" and not self.allowed_origin:
            missing.append("ALLOWED_ORIGIN")
        return missing


settings = Settings()
