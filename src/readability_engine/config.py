from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

# camelCase spellings accepted from callers that speak the report's JSON shape.
_ALIASES = {
    "sampleLimit": "sample_limit",
    "wordsPerSecond": "words_per_second",
}


@dataclass(slots=True)
class EngineConfig:
    """Configuration options for a readability scoring call."""

    # Leading words considered by every measurement; 0 disables the cap.
    sample_limit: int = 1000
    words_per_second: float = 4.17

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))

    def validate(self) -> "EngineConfig":
        """Check option values; a fractional sample limit is truncated."""
        sample_limit = _as_number("sample_limit", self.sample_limit)
        words_per_second = _as_number("words_per_second", self.words_per_second)
        if sample_limit < 0:
            raise ValueError(
                f"sample_limit must be zero or positive, got {self.sample_limit}."
            )
        if words_per_second <= 0:
            raise ValueError(
                f"words_per_second must be positive, got {self.words_per_second}."
            )
        if isinstance(sample_limit, float):
            return replace(self, sample_limit=int(sample_limit))
        return self


def _as_number(name: str, value: Any) -> int | float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}.")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}.")
    return value


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(EngineConfig)}
    kwargs: dict[str, Any] = {}
    for key in data:
        name = _ALIASES.get(key, key)
        if name in allowed:
            kwargs[name] = data[key]
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> EngineConfig:
    """Build an EngineConfig from a dictionary-like input."""
    if data is None:
        return EngineConfig()
    return EngineConfig(**_build_kwargs(data)).validate()


def config_from_yaml(path: str | Path) -> EngineConfig:
    """Read options from a YAML mapping; an empty file yields the defaults."""
    source = Path(path)
    try:
        parsed = yaml.safe_load(source.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"{source} is not valid YAML: {exc}") from exc
    if parsed is None:
        return EngineConfig()
    if not isinstance(parsed, Mapping):
        raise ValueError(
            f"{source} must hold a mapping of options, got {type(parsed).__name__}."
        )
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> EngineConfig:
    return EngineConfig() if path is None else config_from_yaml(path)


def resolve_options(
    options: EngineConfig | Mapping[str, Any] | None,
) -> EngineConfig:
    """Normalize the ``options`` argument accepted by ``score``."""
    if isinstance(options, EngineConfig):
        return options.validate()
    return config_from_dict(options)
