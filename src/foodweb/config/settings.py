from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------
# Session modes
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class ModeConfig:
    """
    Controls how a session interacts with the web.

    basic: read-only, the modification menu is disabled
    debug: print a snapshot of the web after every mutation
    quiet: suppress prompts (program output is still printed)
    """

    basic: bool = False
    debug: bool = False
    quiet: bool = False


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class FoodWebConfig:
    """
    Root configuration object for foodweb.

    Constructed explicitly and passed to the session and the mutator.
    """

    modes: ModeConfig = ModeConfig()
    max_name_length: int = 19
    log_level: str = "WARNING"
