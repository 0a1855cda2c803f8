"""
Progress reporting for long write sessions.

Purely observational: nothing in the write pipeline depends on whether a bar
is shown.
"""

from typing import Optional

from tqdm import tqdm

from modkit.config import settings


class ProgressCounter:
    """A labeled, bounded counter rendered as a tqdm bar."""

    def __init__(self, label: str, total: int, enabled: Optional[bool] = None):
        if enabled is None:
            enabled = settings.SHOW_PROGRESS

        self.label = label
        self.total = total
        self.count = 0
        self._bar = tqdm(total=total, desc=label, disable=not enabled, leave=False)

    def increment(self, annotation: Optional[str] = None):
        self.count += 1
        if annotation is not None:
            self._bar.set_postfix_str(annotation, refresh=False)
        self._bar.update(1)

    def close(self):
        self._bar.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
