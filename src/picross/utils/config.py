import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    # Demo board
    DEFAULT_ROWS: int = int(os.getenv("PICROSS_DEFAULT_ROWS", "5"))
    DEFAULT_COLS: int = int(os.getenv("PICROSS_DEFAULT_COLS", "5"))

    # Text rendering
    GROUP_SIZE: int = int(os.getenv("PICROSS_GROUP_SIZE", "4"))

    # CLI output
    PLAIN_OUTPUT: bool = _env_flag("PICROSS_PLAIN_OUTPUT")

settings = Settings()
