import os
from dotenv import load_dotenv
import json
from pathlib import Path

# Load environment variables from .env file in project root
_project_root = Path(__file__).resolve().parent.parent
load_dotenv(_project_root / ".env")


def _resolve(path: str) -> Path:
    """Resolve database paths relative to the project root."""
    p = Path(path)
    return p if p.is_absolute() else _project_root / p


class Config:
    """Configuration management for the rental service."""

    # Formatting
    RENTAL_LOCALE = os.getenv("RENTAL_LOCALE", "pt_BR")
    RENTAL_CURRENCY = os.getenv("RENTAL_CURRENCY", "BRL")

    # Data files
    CARS_DATABASE = _resolve(os.getenv("CARS_DATABASE", "database/cars.json"))
    CATEGORIES_DATABASE = _resolve(os.getenv("CATEGORIES_DATABASE", "database/categories.json"))
    TAX_TABLE_FILE = _resolve(os.environ["TAX_TABLE_FILE"]) if os.getenv("TAX_TABLE_FILE") else None

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls):
        """Check that the configured data files exist."""
        import logging

        missing = []
        for name in ("CARS_DATABASE", "CATEGORIES_DATABASE", "TAX_TABLE_FILE"):
            path = getattr(cls, name)
            if path is not None and not Path(path).is_file():
                missing.append(f"{name} ({path})")

        if missing:
            logging.getLogger(__name__).warning(f"Missing data files: {', '.join(missing)}")
            return False
        return True


def setup_logging(level="INFO"):
    """Configure structured JSON logging."""
    import logging
    import sys

    # Create a handler that writes to stdout
    handler = logging.StreamHandler(sys.stdout)

    # Use a custom formatter for JSON output
    class JsonFormatter(logging.Formatter):
        EXTRA_FIELDS = ("request_id", "customer_id", "car_id")

        def format(self, record):
            log_record = {
                "timestamp": self.formatTime(record, self.datefmt),
                "level": record.levelname,
                "message": record.getMessage(),
                "module": record.module,
                "function": record.funcName,
            }
            for field in self.EXTRA_FIELDS:
                if hasattr(record, field):
                    log_record[field] = getattr(record, field)
            if record.exc_info:
                log_record["exception"] = self.formatException(record.exc_info)
            return json.dumps(log_record)

    handler.setFormatter(JsonFormatter())

    # Configure root logger
    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplication
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
