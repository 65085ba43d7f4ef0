from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

from .errors import InvalidArgumentError

# Report order; also the set of names accepted in ``metrics``.
AVAILABLE_METRICS = ("ttr", "rttr", "cttr", "herdan", "maas", "msttr", "mattr")


@dataclass(slots=True)
class RichnessConfig:
    """Parameters controlling which richness measures are reported and how."""

    segment_window: int = 100
    discard: bool = True
    window_size: int = 100
    metrics: List[str] = field(default_factory=lambda: list(AVAILABLE_METRICS))

    def __post_init__(self) -> None:
        for name in ("segment_window", "window_size"):
            value = getattr(self, name)
            # bool is an int subclass; reject it explicitly.
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(
                    f"{name} must be an integer, got {value!r}."
                )
        if not isinstance(self.discard, bool):
            raise InvalidArgumentError(
                f"discard must be true or false, got {self.discard!r}."
            )
        if not isinstance(self.metrics, (list, tuple)) or not all(
            isinstance(name, str) for name in self.metrics
        ):
            raise InvalidArgumentError(
                f"metrics must be a list of metric names, got {self.metrics!r}."
            )
        self.metrics = list(self.metrics)
        unknown = [name for name in self.metrics if name not in AVAILABLE_METRICS]
        if unknown:
            raise InvalidArgumentError(
                f"Unknown metric(s): {', '.join(unknown)}. "
                f"Choose from: {', '.join(AVAILABLE_METRICS)}."
            )

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def config_from_dict(data: Mapping[str, Any] | None) -> RichnessConfig:
    """Build a RichnessConfig from a dictionary-like input, ignoring unknown keys."""
    if data is None:
        return RichnessConfig()
    allowed = {item.name for item in fields(RichnessConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    metrics = kwargs.get("metrics")
    if isinstance(metrics, (list, tuple)):
        kwargs["metrics"] = [
            name.lower().strip() if isinstance(name, str) else name
            for name in metrics
        ]
    return RichnessConfig(**kwargs)


def config_from_yaml(path: str | Path) -> RichnessConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> RichnessConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return RichnessConfig()
    return config_from_yaml(path)
