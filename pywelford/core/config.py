import logging
import yaml
from pathlib import Path
from typing import Any, Dict, Optional

from pywelford.core.domain.precision import Precision

logger = logging.getLogger(__name__)


DEFAULT_INPUT_FILENAME: Optional[str] = None
DEFAULT_PRECISION = Precision.F64
DEFAULT_ROLLING_WINDOW: Optional[int] = None


class Config:
    def __init__(self, path: str):
        """
        Load YAML configuration from the given path.

        Args:
            path: Path to config.yaml, e.g. 'configs/config.yaml' in project root.
        """
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"Config file not found: {self.path}")

        with open(self.path, "r") as f:
            self._data: Dict[str, Any] = yaml.safe_load(f) or {}

    def get(self, key: str, default=None):
        """Get a config value by key."""
        return self._data.get(key, default)

    @property
    def input_filename(self) -> Optional[str]:
        input_props = self._data.get("input", {})
        return input_props.get("filename", DEFAULT_INPUT_FILENAME)

    @property
    def precision(self) -> Precision:
        aggregator_props = self._data.get("aggregator", {})
        raw = aggregator_props.get("precision", DEFAULT_PRECISION.to_str())
        try:
            return Precision.from_str(str(raw))
        except ValueError:
            logger.warning(
                "Unknown precision %r, using %s", raw, DEFAULT_PRECISION.to_str()
            )
            return DEFAULT_PRECISION

    @property
    def rolling_window(self) -> Optional[int]:
        rolling_props = self._data.get("rolling", {})
        window = rolling_props.get("window_size", DEFAULT_ROLLING_WINDOW)

        if window is None:
            return None
        if isinstance(window, bool) or not isinstance(window, int):
            raise TypeError(
                f"window_size must be an integer, got {type(window).__name__}"
            )
        return window
