from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    # Static assistant data
    knowledge_base_path: Path = DATA_DIR / "knowledge_base.json"
    intents_path: Path = DATA_DIR / "intents.json"
    abbreviations_path: Path = DATA_DIR / "abbreviations.json"

    # Intent replies are random; set a seed for reproducible answers
    intent_random_seed: Optional[int] = None

    # Document acquisition
    fetch_timeout: float = 15.0
    max_upload_bytes: int = 10 * 1024 * 1024

    # Chat
    max_messages_per_session: int = 200
    summary_card_delay_ms: int = 200

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BOTHN_",
        extra="ignore"
    )

settings = Settings()
