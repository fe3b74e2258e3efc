# Gradeshape: Grade- and Unit-Checked Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Canonical text formatting of positions, distances, angles and times.

:class:`CanonicalOutput` renders numbers with fixed per-kind precision so that
transcripts from different runs compare byte for byte. It owns no global
state: construct one with an explicit :class:`OutputConfig` (from a Hydra
config, the environment, or defaults) and pass it where it is needed.
"""

import os
import sys
from dataclasses import dataclass, fields
from typing import Optional, TextIO

from omegaconf import DictConfig

from units.angle import TAU

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ[name])
    except (KeyError, ValueError):
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.environ[name])
    except (KeyError, ValueError):
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    return default


@dataclass(frozen=True)
class OutputConfig:
    """Precision and convention settings for :class:`CanonicalOutput`."""

    position_precision: int = 1
    angle_precision: int = 2
    distance_precision: int = 1
    time_precision: int = 1
    speed_precision: int = 2
    scientific_threshold: float = 100.0
    use_tau_convention: bool = True

    @classmethod
    def from_env(cls) -> "OutputConfig":
        """Read ``GRADESHAPE_*`` overrides; unparsable values fall back to defaults."""
        d = cls()
        return cls(
            position_precision=_env_int("GRADESHAPE_POSITION_PRECISION", d.position_precision),
            angle_precision=_env_int("GRADESHAPE_ANGLE_PRECISION", d.angle_precision),
            distance_precision=_env_int("GRADESHAPE_DISTANCE_PRECISION", d.distance_precision),
            time_precision=_env_int("GRADESHAPE_TIME_PRECISION", d.time_precision),
            speed_precision=_env_int("GRADESHAPE_SPEED_PRECISION", d.speed_precision),
            scientific_threshold=_env_float("GRADESHAPE_SCIENTIFIC_THRESHOLD",
                                            d.scientific_threshold),
            use_tau_convention=_env_bool("GRADESHAPE_USE_TAU", d.use_tau_convention),
        )

    @classmethod
    def from_cfg(cls, cfg: Optional[DictConfig]) -> "OutputConfig":
        """Build from the ``output`` block of a Hydra config; missing keys keep defaults."""
        if cfg is None:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in cfg.items() if k in known})


def _scientific(value: float, precision: int) -> str:
    """``1.5e3`` style: no ``+`` sign and no zero padding in the exponent."""
    mantissa, exponent = f"{value:.{precision}e}".split("e")
    return f"{mantissa}e{int(exponent)}"


class CanonicalOutput:
    """Formatter with fixed per-kind precision.

    Args:
        config (OutputConfig, optional): Settings. Defaults to ``OutputConfig()``.
        stream (TextIO, optional): Destination of the ``print_*`` family.
            Defaults to ``sys.stdout`` at call time.
    """

    TAU = TAU

    def __init__(self, config: Optional[OutputConfig] = None, stream: Optional[TextIO] = None):
        self.config = config or OutputConfig()
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def position(self, x: float, y: float, z: float) -> str:
        p = self.config.position_precision
        return f"({x:.{p}f}, {y:.{p}f}, {z:.{p}f})"

    def distance(self, value: float, unit: str) -> str:
        p = self.config.distance_precision
        if abs(value) >= self.config.scientific_threshold:
            return f"{_scientific(value, p)} {unit}"
        return f"{value:.{p}f} {unit}"

    def angle_degrees(self, degrees: float) -> str:
        return f"{degrees:.{self.config.angle_precision}f}°"

    def angle_tau(self, tau_fraction: float) -> str:
        return f"{tau_fraction:.{self.config.angle_precision}f}τ"

    def angle_combined(self, degrees: float, tau_fraction: float) -> str:
        return f"{self.angle_degrees(degrees)} ({self.angle_tau(tau_fraction)})"

    def time(self, value: float, unit: str) -> str:
        return f"{value:.{self.config.time_precision}f} {unit}"

    def speed(self, value: float, unit: str) -> str:
        return f"{value:.{self.config.speed_precision}f} {unit}"

    def scientific(self, value: float, precision: int) -> str:
        return _scientific(value, precision)

    def section_header(self, title: str) -> str:
        return f"\n{title}\n{'=' * len(title)}"

    def list_item(self, index: int, content: str) -> str:
        return f"  {index}. {content}"

    def degrees_to_tau(self, degrees: float) -> float:
        """Fraction of a full turn."""
        return degrees / 360.0

    def tau_to_degrees(self, tau_fraction: float) -> float:
        return tau_fraction * 360.0

    def tau_constant(self) -> str:
        return f"τ (tau = 2π) = {self.TAU:.5f}"

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def _emit(self, line: str) -> None:
        print(line, file=self.stream)

    def print_position(self, label: str, x: float, y: float, z: float,
                       frame: Optional[str] = None) -> None:
        line = f"✓ {label}: {self.position(x, y, z)}"
        if frame:
            line += f" [{frame} frame]"
        self._emit(line)

    def print_distance(self, label: str, value: float, unit: str = "m") -> None:
        self._emit(f"✓ {label}: {self.distance(value, unit)}")

    def print_angle(self, label: str, degrees: float) -> None:
        if self.config.use_tau_convention:
            text = self.angle_combined(degrees, self.degrees_to_tau(degrees))
        else:
            text = self.angle_degrees(degrees)
        self._emit(f"✓ {label}: {text}")

    def print_speed(self, label: str, value: float) -> None:
        self._emit(f"✓ {label}: {self.speed(value, 'm/s')}")

    def print_time(self, label: str, value: float) -> None:
        self._emit(f"✓ {label}: {self.time(value, 's')}")

    def print_success(self, message: str) -> None:
        self._emit(f"✅ {message}")

    def print_error(self, message: str) -> None:
        self._emit(f"❌ {message}")

    def print_warning(self, message: str) -> None:
        self._emit(f"🚫 {message}")
