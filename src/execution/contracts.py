from __future__ import annotations

from enum import Enum


class Request(str, Enum):
    """What to do with each part: only check samples, or check and then run."""

    CHECK_ONLY = "check"
    CHECK_AND_RUN = "run"
