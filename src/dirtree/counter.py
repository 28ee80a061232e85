"""Running tally of the entries printed by a tree listing."""

from typing import Tuple


class Counter:
    """Counts directories and files as they are printed.

    The root of the listing is never tallied.

    Example:
        >>> counter = Counter()
        >>> counter.tally(True)
        >>> counter.tally(False)
        >>> counter.tally(False)
        >>> counter.summary()
        (1, 2)
    """

    def __init__(self) -> None:
        self._directories = 0
        self._files = 0

    @property
    def directories(self) -> int:
        return self._directories

    @property
    def files(self) -> int:
        return self._files

    def tally(self, is_directory: bool) -> None:
        if is_directory:
            self._directories += 1
        else:
            self._files += 1

    def summary(self) -> Tuple[int, int]:
        """Snapshot of the counts as ``(directories, files)``."""
        return self._directories, self._files
