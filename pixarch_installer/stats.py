from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .logging_utils import ErrorCounter


@dataclass
class RunStats:
    packages_installed: int = 0
    packages_skipped: int = 0
    configs_linked: int = 0
    error_counter: Optional[ErrorCounter] = None

    @property
    def errors(self) -> int:
        """Number of error records logged so far in this run."""
        if self.error_counter is None:
            return 0
        return self.error_counter.count
