"""
Validator Settings — Runtime knobs for validation runs.

Configuration via environment:
- JSONGUARD_MAX_DEPTH: Maximum nesting depth (default 64)
- JSONGUARD_MODE: collect_all (default) or fail_fast
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

DEFAULT_MAX_DEPTH = 64


class ValidationMode(str, Enum):
    """How many violations a run reports."""
    COLLECT_ALL = "collect_all"   # Every violation, depth-first order
    FAIL_FAST = "fail_fast"       # Stop at the first violation


@dataclass(frozen=True)
class ValidatorSettings:
    """Validation settings."""
    max_depth: int = DEFAULT_MAX_DEPTH
    mode: ValidationMode = ValidationMode.COLLECT_ALL

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ValueError(f"max_depth must be an integer, got {self.max_depth!r}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        object.__setattr__(self, "mode", ValidationMode(self.mode))

    @property
    def fail_fast(self) -> bool:
        return self.mode == ValidationMode.FAIL_FAST

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        max_depth: Optional[int] = None,
        mode: Optional[ValidationMode] = None,
    ) -> "ValidatorSettings":
        """
        Build settings from the environment.

        Explicit arguments win over environment variables.

        Raises:
            ValueError: If an environment value is malformed
        """
        env = os.environ if environ is None else environ

        if max_depth is None:
            raw_depth = env.get("JSONGUARD_MAX_DEPTH")
            if raw_depth:
                try:
                    max_depth = int(raw_depth)
                except ValueError as e:
                    raise ValueError(f"JSONGUARD_MAX_DEPTH must be an integer: {raw_depth!r}") from e
            else:
                max_depth = DEFAULT_MAX_DEPTH

        if mode is None:
            raw_mode = env.get("JSONGUARD_MODE")
            if raw_mode:
                try:
                    mode = ValidationMode(raw_mode.strip().lower())
                except ValueError as e:
                    raise ValueError(f"JSONGUARD_MODE must be collect_all or fail_fast: {raw_mode!r}") from e
            else:
                mode = ValidationMode.COLLECT_ALL

        return cls(max_depth=max_depth, mode=mode)
