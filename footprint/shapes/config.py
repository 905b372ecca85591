# footprint/shapes/config.py
"""
Key-value view over a shape record:

    {"type": "rectangle", "parameters": {"dimX": 2.0, "dimY": 1.0}}

Keys are dotted paths into the nested mapping. Missing floats come back as
NaN so callers can decide whether the value was optional.
"""
import json
import logging
import math

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """A shape record is missing a required value or names an unknown type."""


class ShapeConfig:
    def __init__(self, record: dict):
        self.record = dict(record)

    @classmethod
    def from_json(cls, path) -> "ShapeConfig":
        with open(path, "r") as f:
            record = json.load(f)
        logger.debug("loaded shape record from %s", path)
        return cls(record)

    def _lookup(self, key: str):
        node = self.record
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node

    def get_string(self, key: str, default: str = "") -> str:
        value = self._lookup(key)
        return default if value is None else str(value)

    def get_float(self, key: str, default: float = math.nan) -> float:
        value = self._lookup(key)
        if value is None:
            return default
        try:
            return float(value)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"field {key} is not a number: {value!r}") from exc

    def require_float(self, key: str) -> float:
        value = self.get_float(key)
        if math.isnan(value):
            raise ConfigurationError(f"required field {key} is empty")
        return value

    @property
    def type_tag(self) -> str:
        # "class" is accepted for records written against the older key
        tag = self.get_string("type") or self.get_string("class")
        return tag.strip()
