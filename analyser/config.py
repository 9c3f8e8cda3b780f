from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = "sentiment-analyser/0.1 (+https://pypi.org/project/sentiment-analyser/)"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='ANALYSER_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    # HTTP fetch configuration
    user_agent: str = DEFAULT_USER_AGENT
    # Seconds; None waits indefinitely
    request_timeout: Optional[float] = 30.0

    # Logging configuration
    log_level: str = "WARNING"
    log_format: str = "text"
