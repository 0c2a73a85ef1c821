"""File-backed persistence for the user's rate table.

The whole table is kept as one JSON blob named after the key
``furnitureCalculatorRates``. A missing or unusable blob is never fatal:
``load`` logs the problem and returns the built-in defaults.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from furniture_estimator.application.config import (
    ConfigError,
    apply_rate_overrides,
    load_rates_from_dict,
    rate_table_to_schema,
)
from furniture_estimator.domain import RateTable, validate_rate_table

logger = logging.getLogger(__name__)

RATES_KEY = "furnitureCalculatorRates"
HOME_ENV_VAR = "FURNITURE_ESTIMATOR_HOME"
DEFAULT_HOME = Path("~/.furniture_estimator")


def default_rates_dir() -> Path:
    """Directory for persisted state: ``$FURNITURE_ESTIMATOR_HOME`` or ``~/.furniture_estimator``."""
    configured = os.environ.get(HOME_ENV_VAR)
    if configured:
        return Path(configured).expanduser()
    return DEFAULT_HOME.expanduser()


class RateTableStore:
    """Loads and saves the rate table under a directory.

    Example:
        store = RateTableStore(tmp_dir)
        rates = store.load()
        store.save(rates.with_rate("markup_percentage", 25))
    """

    def __init__(self, directory: Path | None = None) -> None:
        self.directory = directory if directory is not None else default_rates_dir()

    @property
    def path(self) -> Path:
        return self.directory / f"{RATES_KEY}.json"

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> RateTable:
        """Load the stored table, or the defaults if there is none usable.

        Stored blobs may be partial; missing entries keep their default.
        """
        defaults = RateTable.defaults()
        if not self.exists():
            logger.debug(f"No stored rates at {self.path}, using defaults")
            return defaults

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read stored rates at {self.path}: {e}; using defaults")
            return defaults

        try:
            overrides = load_rates_from_dict(data)
        except ConfigError as e:
            logger.warning(f"Stored rates at {self.path} are invalid; using defaults\n{e}")
            return defaults

        rates = apply_rate_overrides(defaults, overrides)
        result = validate_rate_table(rates)
        if not result.is_valid:
            problems = ", ".join(f"{err.path}: {err.message}" for err in result.errors)
            logger.warning(f"Stored rates at {self.path} are out of range ({problems}); using defaults")
            return defaults

        return rates

    def save(self, rates: RateTable) -> Path:
        """Write the full table, replacing any stored blob.

        Raises:
            OSError: If the directory or file cannot be written.
        """
        data = rate_table_to_schema(rates).model_dump(exclude_none=True)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning(f"Failed to save rates to {self.path}: {e}")
            raise
        logger.debug(f"Saved rates to {self.path}")
        return self.path

    def reset(self) -> RateTable:
        """Remove the stored blob and return the defaults."""
        if self.exists():
            self.path.unlink()
            logger.debug(f"Removed stored rates at {self.path}")
        return RateTable.defaults()
