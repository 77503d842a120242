from dataclasses import dataclass
from typing import Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_MAX_BYTES = 200_000
LOG_BACKUP_COUNT = 3


@dataclass(frozen=True)
class AppConfig:
    reversed: bool = False          # initial move list order (newest first)
    clear_screen: bool = True
    log_file: Optional[str] = None  # None disables logging output
    log_level: str = "INFO"
    prompt: str = "> "

    def __post_init__(self):
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
