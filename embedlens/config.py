"""
Configuration Schemas
=====================

Pydantic models holding the named options of the two entry points, with
their defaults and range checks.

Classes
-------
EmbeddingPlotConfig
    Options of :func:`embedlens.viz.render_embedding`.
RecallConfig
    Options of :func:`embedlens.evaluation.compute_neighbor_recall`.

Functions
---------
resolve_config
    Merge a config instance with keyword overrides and validate.
load_config
    Read a config from a YAML file.
"""

from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Tuple, Type, TypeVar, Union

import yaml
from matplotlib.colors import is_color_like
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, StrictInt, ValidationError, field_validator

from .exceptions import InvalidParameterError

ColorLike = Union[str, Tuple[float, ...]]


class EmbeddingPlotConfig(BaseModel):
    """Options for rendering a 2D embedding with an optional edge overlay."""

    model_config = ConfigDict(extra="forbid")

    cmap: Optional[Union[str, List[ColorLike]]] = Field(
        None, description="Palette name or list of colors. None picks distinguishable colors."
    )
    resolution: Tuple[PositiveInt, PositiveInt] = Field((800, 800), description="Figure size in pixels.")
    dpi: PositiveInt = 100
    lwd_in: float = Field(0.5, ge=0, description="Line width of intra-cluster edges.")
    lwd_out: float = Field(0.3, ge=0, description="Line width of inter-cluster edges.")
    edge_alpha: float = Field(0.2, ge=0, le=1, description="Alpha of palette-colored intra-cluster edges.")
    clr_in: Optional[ColorLike] = Field(
        None, description="Single color for all intra-cluster edges. None colors them by cluster."
    )
    clr_out: ColorLike = Field("#aabbbbbb", description="Color of inter-cluster edges.")
    marker_size: float = Field(4.0, gt=0, description="Scatter marker diameter in points.")
    legend_marker_size: float = Field(10.0, gt=0)
    size_label: float = Field(24, gt=0, description="Legend label font size.")
    legend_orientation: Literal["horizontal", "vertical"] = "horizontal"
    title: Optional[str] = None

    @field_validator("clr_in", "clr_out")
    @classmethod
    def _check_color(cls, value):
        if value is not None and not is_color_like(value):
            raise ValueError(f"{value!r} is not a valid color")
        return value


class RecallConfig(BaseModel):
    """Options for the neighborhood recall statistic and its histogram."""

    model_config = ConfigDict(extra="forbid")

    k: StrictInt = Field(10, gt=0, description="Number of nearest neighbors.")
    include_self: bool = Field(True, description="Count each point among its own neighbors.")
    n_jobs: Optional[int] = Field(None, description="Parallel jobs for the neighbor search.")
    resolution: Tuple[PositiveInt, PositiveInt] = Field((800, 600), description="Figure size in pixels.")
    dpi: PositiveInt = 100
    bins: PositiveInt = 15
    color: Optional[ColorLike] = None
    title: Optional[str] = None

    @field_validator("color")
    @classmethod
    def _check_color(cls, value):
        if value is not None and not is_color_like(value):
            raise ValueError(f"{value!r} is not a valid color")
        return value


ConfigT = TypeVar("ConfigT", EmbeddingPlotConfig, RecallConfig)

CONFIGS: Dict[str, Type[BaseModel]] = {
    "embedding": EmbeddingPlotConfig,
    "recall": RecallConfig,
}


def resolve_config(config_cls: Type[ConfigT],
                   config: Optional[ConfigT] = None,
                   options: Optional[Dict[str, Any]] = None) -> ConfigT:
    """
    Build a validated config from an optional instance plus keyword overrides.

    Parameters
    ----------
    config_cls : type
        EmbeddingPlotConfig or RecallConfig.
    config : BaseModel, optional
        Base configuration. Defaults are used when None.
    options : dict, optional
        Flat overrides, applied on top of `config`.

    Returns
    -------
    BaseModel
        A new, validated instance of `config_cls`.

    Raises
    ------
    InvalidParameterError
        If `config` has the wrong type, an option is unknown or out of range.
    """
    values: Dict[str, Any] = {}
    if config is not None:
        if not isinstance(config, config_cls):
            raise InvalidParameterError(
                f"Expected a {config_cls.__name__}, got {type(config).__name__}."
            )
        values = config.model_dump()
    values.update(options or {})

    try:
        return config_cls(**values)
    except ValidationError as e:
        raise InvalidParameterError(f"Invalid {config_cls.__name__} options: {e}") from e


def load_config(path: Union[str, Path], kind: Literal["embedding", "recall"] = "embedding") -> BaseModel:
    """
    Load options from a YAML file.

    The file holds either a flat mapping of options or a mapping with an
    ``embedding:`` / ``recall:`` section, in which case only the section
    matching `kind` is read.

    Examples
    --------
    >>> cfg = load_config("plot.yaml", kind="recall")
    >>> values, fig = compute_neighbor_recall(X, Y, config=cfg)
    """
    if kind not in CONFIGS:
        raise InvalidParameterError(f"Unknown config kind '{kind}'. Valid options are: {', '.join(CONFIGS)}")

    raw = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(raw, dict):
        raise InvalidParameterError(f"Config file {path} must contain a mapping.")

    if any(key in raw for key in CONFIGS):
        section = raw.get(kind) or {}
    else:
        section = raw
    return resolve_config(CONFIGS[kind], options=section)
