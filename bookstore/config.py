import os
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

_this_year = str(datetime.now().year)


@dataclass
class Settings:
    # Record validation settings
    current_year: int = int(os.getenv("BOOKSTORE_CURRENT_YEAR", _this_year))
    min_book_year: int = int(os.getenv("BOOKSTORE_MIN_YEAR", "1450"))

    # Catalog query settings
    # find_by_year treats anything above this as not applicable.
    # None means the latest publication year a Book accepts (current_year + 1).
    max_supported_year: Optional[int] = (
        int(os.environ["BOOKSTORE_MAX_SUPPORTED_YEAR"]) if os.getenv("BOOKSTORE_MAX_SUPPORTED_YEAR") else None
    )

    # Application settings
    app_name: str = os.getenv("APP_NAME", "Bookstore Catalog")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")
    log_level: str = os.getenv("BOOKSTORE_LOG_LEVEL", "WARNING").upper()

    # CLI output mode: plain | json | rich
    output_mode: str = os.getenv("BOOKSTORE_OUTPUT", "plain").lower()


settings = Settings()
