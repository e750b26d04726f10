"""
Persistence of the best score, the only value that outlives a game session.
"""

import json
import logging
from os import fdopen, makedirs, remove, replace
from os.path import dirname, exists
from tempfile import mkstemp
from typing import Protocol

# ##>: Module logger.
_logger = logging.getLogger(__name__)

DEFAULT_KEY = '2048-best-score'


class ScoreStore(Protocol):
    """
    Key-value backend holding the best score.
    """

    def load(self) -> int:
        """Return the stored best score, 0 when none was stored."""

    def save(self, value: int) -> None:
        """Store a new best score."""


class MemoryScoreStore:
    """
    Process-local store, forgotten when the process ends.
    """

    def __init__(self, initial: int = 0):
        self._value = int(initial)

    def load(self) -> int:
        return self._value

    def save(self, value: int) -> None:
        self._value = int(value)


class JsonScoreStore:
    """
    Store keeping the best score in a JSON object on disk.

    The file holds a JSON object so it can be shared with other settings, the best score living under ``key``.
    """

    def __init__(self, path: str, key: str = DEFAULT_KEY):
        """
        Initialize the store.

        Parameters
        ----------
        path : str
            Location of the JSON file. It is created on the first save.
        key : str, optional
            Entry of the JSON object holding the best score.
        """
        self.path = path
        self.key = key

    def _read(self) -> dict:
        if not exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as file_h:
                data = json.load(file_h)
        except (OSError, ValueError) as error:
            _logger.warning('Cannot read best score file %s: %s', self.path, error)
            return {}
        if not isinstance(data, dict):
            _logger.warning('Ignoring best score file %s: expected a JSON object', self.path)
            return {}
        return data

    def load(self) -> int:
        """
        Read the best score.

        Returns
        -------
        int
            The stored value, or 0 when the file or the key is missing or unreadable.
        """
        value = self._read().get(self.key, 0)
        try:
            return max(int(value), 0)
        except (TypeError, ValueError):
            _logger.warning('Ignoring invalid best score %r in %s', value, self.path)
            return 0

    def save(self, value: int) -> None:
        """
        Write the best score, keeping the other entries of the file.

        Raises
        ------
        OSError
            If the file cannot be written.
        """
        data = self._read()
        data[self.key] = int(value)

        directory = dirname(self.path)
        if directory:
            makedirs(directory, exist_ok=True)

        # ##>: The file is only ever swapped whole, from a sibling temporary file.
        file_d, tmp_path = mkstemp(dir=directory or '.', prefix='.best-score-', suffix='.json')
        try:
            with fdopen(file_d, 'w', encoding='utf-8') as file_h:
                json.dump(data, file_h)
            replace(tmp_path, self.path)
        except BaseException:
            remove(tmp_path)
            raise
