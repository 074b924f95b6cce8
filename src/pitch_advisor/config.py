from __future__ import annotations

from dataclasses import dataclass

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

_DEFAULTS: dict[str, object] = {
    "engine": {
        "data_weight": 0.8,
        "randomness": 0.15,
        "variety_boost": 1.5,
        "similarity_threshold": 0.4,
        "max_similar_records": 100,
        "min_data_points": 2,
        "top_half_penalty": 10,
    },
}


@dataclass(frozen=True)
class EngineSettings:
    """Tunable constants for the recommendation pipeline.

    Attributes:
        data_weight: Share of the merged score taken from historical data (0-1).
        randomness: Relative size of the random perturbation applied to merged scores.
        variety_boost: Boost given to the least-used recent types and locations.
        similarity_threshold: Minimum similarity for a historical record to count.
        max_similar_records: Cap on retained historical records, most similar first.
        min_data_points: Observations a type or location needs before it is scored.
        top_half_penalty: Subtracted from top-half locations when an off-speed pitch is headed there.
    """

    data_weight: float = 0.8
    randomness: float = 0.15
    variety_boost: float = 1.5
    similarity_threshold: float = 0.4
    max_similar_records: int = 100
    min_data_points: int = 2
    top_half_penalty: float = 10.0


def create_config(
    yaml_path: str = "pitch_advisor.yaml",
    env_prefix: str = "PITCH_ADVISOR",
    defaults: dict[str, object] | None = None,
    overrides: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file.
        env_prefix: Prefix for environment variables.
        defaults: Default configuration values.
        overrides: Values that win over every other layer (e.g. CLI options).
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def load_engine_settings(cfg: ConfigurationSet | None = None) -> EngineSettings:
    if cfg is None:
        cfg = create_config()
    return EngineSettings(
        data_weight=float(str(cfg["engine.data_weight"])),
        randomness=float(str(cfg["engine.randomness"])),
        variety_boost=float(str(cfg["engine.variety_boost"])),
        similarity_threshold=float(str(cfg["engine.similarity_threshold"])),
        max_similar_records=int(str(cfg["engine.max_similar_records"])),
        min_data_points=int(str(cfg["engine.min_data_points"])),
        top_half_penalty=float(str(cfg["engine.top_half_penalty"])),
    )
