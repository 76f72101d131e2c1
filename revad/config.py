# revad/config.py
"""
Global configuration flags.

`config` is read at call time, so tweaking its fields affects every later
evaluation:

    from revad import config
    config.fp_errors = "raise"   # log(0) now raises FloatingPointError
"""

import os
from dataclasses import dataclass

# Modes understood by numpy.errstate
FP_ERROR_MODES = ("ignore", "warn", "raise", "call", "print", "log")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() not in ("", "0", "false", "no")


@dataclass
class ADConfig:
    debug: bool = False          # validate every node pushed onto a tape
    fp_errors: str = "ignore"    # numpy error mode while evaluating/propagating

    def __post_init__(self) -> None:
        if self.fp_errors not in FP_ERROR_MODES:
            raise ValueError(
                f"fp_errors must be one of {FP_ERROR_MODES}, got {self.fp_errors!r}"
            )


config = ADConfig(debug=_env_flag("REVAD_DEBUG"))
