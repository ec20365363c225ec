"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Ed25519 public key of the application, hex encoded
    public_key: str = ""

    # Reject signatures whose timestamp is older than this (disabled when None)
    signature_max_age_seconds: int | None = None

    # Log sink
    log_sink: str = "better_stack"
    better_stack_token: str = ""
    better_stack_url: str = "https://in.logs.betterstack.com"
    sink_timeout_seconds: float = 10.0

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "HERALD_",
    }

    @property
    def effective_log_sink(self) -> str:
        """Return the null sink when Better Stack has no token configured."""
        if self.log_sink == "better_stack" and not self.better_stack_token:
            return "null"
        return self.log_sink


settings = Settings()
