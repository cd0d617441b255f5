import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    data_path: Path
    log_level: str = "INFO"
    currency: str = "$"


def get_settings() -> Settings:
    data_path = os.getenv("TXN_SUMMARY_DATA")
    return Settings(
        data_path=Path(data_path) if data_path else Path.cwd() / "transactions.json",
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        currency=os.getenv("TXN_SUMMARY_CURRENCY", "$"),
    )
