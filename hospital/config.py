import os


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./hospital.db")
SQL_ECHO = _flag("SQL_ECHO")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))


def page_size_limits(default: int, maximum: int):
    """
    Check the list endpoint page sizes: 1 <= default <= maximum.
    """
    if maximum < 1 or not 1 <= default <= maximum:
        raise ValueError(
            f"DEFAULT_PAGE_SIZE ({default}) must be between 1 and MAX_PAGE_SIZE ({maximum})"
        )
    return default, maximum


DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE = page_size_limits(
    int(os.getenv("DEFAULT_PAGE_SIZE", "10")),
    int(os.getenv("MAX_PAGE_SIZE", "100")),
)
