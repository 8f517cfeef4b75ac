"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from account_tracker.domain.constants import DEFAULT_TIMEZONE, MAX_WINDOW_DAYS
from account_tracker.utils.utils import get_project_root


def default_database_url() -> str:
    """Return the SQLite URL of the bundled data directory."""
    path = get_project_root() / "data" / "account-tracker.db"
    return f"sqlite:///{path}"


@dataclass(frozen=True)
class TrackerSettings:
    """Runtime settings of the account tracker.

    Attributes:
        db_url: SQLAlchemy URL of the transaction store.
        default_timezone: Timezone written into a freshly seeded config.
        max_window_days: Largest projection window accepted from callers.
    """

    db_url: str
    default_timezone: str = DEFAULT_TIMEZONE
    max_window_days: int = MAX_WINDOW_DAYS

    @classmethod
    def from_env(cls) -> "TrackerSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            TrackerSettings: Settings sourced from the environment.

        Raises:
            RuntimeError: If ``TRACKER_MAX_WINDOW_DAYS`` is not a positive
                integer.
        """
        dotenv.load_dotenv()
        db_url = os.getenv("TRACKER_DB_URL", "").strip()
        if not db_url:
            db_url = default_database_url()
        timezone = (
            os.getenv("TRACKER_DEFAULT_TIMEZONE", "").strip()
            or DEFAULT_TIMEZONE
        )
        max_window_days = cls._parse_positive_int(
            "TRACKER_MAX_WINDOW_DAYS",
            os.getenv("TRACKER_MAX_WINDOW_DAYS"),
            MAX_WINDOW_DAYS,
        )
        return cls(
            db_url=db_url,
            default_timezone=timezone,
            max_window_days=max_window_days,
        )

    @staticmethod
    def _parse_positive_int(name: str, raw: str | None, default: int) -> int:
        """Read a positive integer setting.

        Args:
            name: Environment variable name, used in messages.
            raw: Raw value, None when unset.
            default: Value used when unset or blank.

        Returns:
            int: Parsed value.
        """
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError as exc:
            raise RuntimeError(
                f"{name} must be a positive integer, got {raw!r}"
            ) from exc
        if value <= 0:
            raise RuntimeError(
                f"{name} must be a positive integer, got {raw!r}"
            )
        return value


__all__ = ["TrackerSettings", "default_database_url"]
