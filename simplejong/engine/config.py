"""Round configuration."""

import os
from typing import Optional

DEFAULT_LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(
    os.path.abspath(__file__)))), "logs")


class RoundConfig:
    """Settings shared by the session, engine and logger."""

    def __init__(
        self,
        seed: Optional[int] = None,
        log_dir: Optional[str] = None,
        record_log: bool = False,
        auto_tsumo: bool = True,  # Automated seats declare tsumo when they can
    ):
        self.seed = seed
        self.log_dir = log_dir or DEFAULT_LOG_DIR
        self.record_log = record_log
        self.auto_tsumo = auto_tsumo

    def to_dict(self) -> dict:
        return {
            "seed": self.seed,
            "record_log": self.record_log,
            "auto_tsumo": self.auto_tsumo,
        }
