"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class EnvironmentConfig:
    build_output_dir: Path | None
    debug_symbols_enabled: bool
    optimizations_enabled: bool

    def as_dict(self) -> dict:
        return {
            "build_output_dir": str(self.build_output_dir) if self.build_output_dir else None,
            "debug_symbols_enabled": self.debug_symbols_enabled,
            "optimizations_enabled": self.optimizations_enabled,
        }
