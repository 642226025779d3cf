"""Configuration loading and management for proto-modularizer.

Configuration sources are merged in priority order:
    1. Defaults (defined in ModularizerConfig)
    2. Global config (~/.proto-modularizer.toml)
    3. Project config (./proto-modularizer.toml)
    4. Explicit config file
    5. Environment variables (PROTO_MODULARIZER_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(naming_policy="full")
    >>> config.naming_policy
    'full'
    >>> config.scoring.granularity_weight
    0.35
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
NamingPolicyName = Literal["standard", "full"]

CONFIG_FILENAME = "proto-modularizer.toml"
ENV_PREFIX = "PROTO_MODULARIZER_"

# Paths under these prefixes are provided by the protobuf runtime or Wire itself
DEFAULT_BUILTIN_PREFIXES: tuple[str, ...] = ("google/", "wire/")
DEFAULT_STRIP_PREFIXES: tuple[str, ...] = ("com.", "org.", "io.")


@dataclass(frozen=True)
class ScoringConfig:
    """Weights and thresholds for the composite quality score.

    The constants are heuristics, not derived values. Each term is scored on
    0-100 and the weighted sum is clamped to [0, 100].

    Attributes:
        granularity_weight: Weight of the balance / module-size term
        cohesion_weight: Weight of the namespaces-per-module term
        coupling_weight: Weight of the dependency count / depth term
        build_weight: Weight of the parallel-build term
        sweet_spot_min: Smallest mean module size that earns the size bonus
        sweet_spot_max: Largest mean module size that earns the size bonus
        dependency_saturation: Average dependency count at which the
            coupling penalty is maximal
        depth_saturation: Dependency depth at which the depth penalty is maximal
    """

    granularity_weight: float = 0.35
    cohesion_weight: float = 0.30
    coupling_weight: float = 0.25
    build_weight: float = 0.10

    sweet_spot_min: float = 3.0
    sweet_spot_max: float = 10.0

    dependency_saturation: float = 10.0
    depth_saturation: float = 10.0

    def __post_init__(self) -> None:
        """Validate scoring configuration."""
        for name in ("granularity_weight", "cohesion_weight", "coupling_weight", "build_weight"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise InvalidConfigError(name, value, "must be between 0.0 and 1.0")

        weight_sum = (
            self.granularity_weight
            + self.cohesion_weight
            + self.coupling_weight
            + self.build_weight
        )
        if not 0.99 <= weight_sum <= 1.01:
            raise InvalidConfigError(
                "scoring weights", f"{weight_sum:.3f}", "weights must sum to 1.0"
            )

        if self.sweet_spot_min < 0 or self.sweet_spot_min > self.sweet_spot_max:
            raise InvalidConfigError(
                "sweet_spot_min",
                self.sweet_spot_min,
                "must be non-negative and not exceed sweet_spot_max",
            )

        if self.dependency_saturation <= 0:
            raise InvalidConfigError(
                "dependency_saturation", self.dependency_saturation, "must be positive"
            )
        if self.depth_saturation <= 0:
            raise InvalidConfigError("depth_saturation", self.depth_saturation, "must be positive")


@dataclass(frozen=True)
class ModularizerConfig:
    """Configuration for graph construction, partitioning and reporting.

    Attributes:
        Graph construction:
            builtin_prefixes: Path prefixes of runtime-provided schemas that
                never enter the graph
            report_unresolved_imports: Surface non-builtin imports that match
                no known file as validation warnings

        Partitioning:
            naming_policy: "standard" (strip a conventional prefix) or "full"
            strip_prefixes: Ordered prefixes tried by the standard policy

        Scanning:
            proto_extensions: File suffixes treated as schema files
            exclude_patterns: Glob patterns (relative paths) to skip
            max_files: Maximum number of schema files to scan

        Output control:
            verbosity: Logging verbosity level

        scoring: Composite quality score weights and thresholds
    """

    builtin_prefixes: tuple[str, ...] = DEFAULT_BUILTIN_PREFIXES
    report_unresolved_imports: bool = True

    naming_policy: NamingPolicyName = "standard"
    strip_prefixes: tuple[str, ...] = DEFAULT_STRIP_PREFIXES

    proto_extensions: tuple[str, ...] = (".proto",)
    exclude_patterns: tuple[str, ...] = field(
        default_factory=lambda: ("build/*", ".git/*", "node_modules/*")
    )
    max_files: int = 10000

    verbosity: Verbosity = "normal"

    scoring: ScoringConfig = field(default_factory=ScoringConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.naming_policy not in ("standard", "full"):
            raise InvalidConfigError(
                "naming_policy", self.naming_policy, "expected 'standard' or 'full'"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected 'quiet', 'normal' or 'verbose'"
            )
        if self.max_files < 1:
            raise InvalidConfigError("max_files", self.max_files, "must be at least 1")
        if not self.proto_extensions:
            raise InvalidConfigError("proto_extensions", self.proto_extensions, "must not be empty")


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> ModularizerConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``verbose``
            and ``quiet`` booleans are folded into ``verbosity``.

    Returns:
        Validated ModularizerConfig instance

    Raises:
        ConfigurationError: If a config file is unreadable or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    scoring = merged.pop("scoring", None)
    if isinstance(scoring, dict):
        try:
            merged["scoring"] = ScoringConfig(**scoring)
        except TypeError as e:
            raise ConfigurationError(f"Invalid [scoring] config: {e}")
    elif isinstance(scoring, ScoringConfig):
        merged["scoring"] = scoring

    # TOML arrays arrive as lists
    for key, value in list(merged.items()):
        if isinstance(value, list):
            merged[key] = tuple(value)

    try:
        return ModularizerConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from PROTO_MODULARIZER_* environment variables.

    Tuple-valued fields accept comma-separated lists, e.g.
    ``PROTO_MODULARIZER_BUILTIN_PREFIXES=google/,wire/,vendor/``.
    """
    type_hints = get_type_hints(ModularizerConfig)
    result: dict[str, Any] = {}

    for config_field in fields(ModularizerConfig):
        if config_field.name == "scoring":
            continue
        env_key = f"{ENV_PREFIX}{config_field.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hints[config_field.name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[config_field.name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    origin = getattr(type_hint, "__origin__", None)

    if origin is tuple:
        return tuple(part.strip() for part in value.split(",") if part.strip())

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return the parsed dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")


default_config = ModularizerConfig()
