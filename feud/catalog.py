"""Level catalog: the ordered set of questions a game can play."""

import logging
from pathlib import Path
from typing import Any, Iterator, Optional

from .constants import DEFAULT_LEVELS
from .models import Answer, Level
from .schemas import CatalogFile, LevelEntry
from .utils import load_json

logger = logging.getLogger('feud.catalog')


class LevelNotFoundError(KeyError):
    """Raised when a level id is not in the catalog."""

    def __init__(self, level_id: str):
        super().__init__(level_id)
        self.level_id = level_id

    def __str__(self) -> str:
        return f'No level with id {self.level_id!r}'


def level_from_entry(entry: LevelEntry) -> Level:
    """Convert a validated catalog entry into a Level."""
    return Level(
        id=entry.id,
        question=entry.question,
        answers=tuple(Answer(a.text, a.points) for a in entry.answers),
    )


class LevelCatalog:
    """
    Ordered, read-only collection of levels.

    Order is play order for next(); lookup is by level id.
    """

    def __init__(self, levels: list[Level]):
        if not levels:
            raise ValueError('Level catalog must contain at least one level')
        self._levels = list(levels)
        self._index = {level.id: i for i, level in enumerate(self._levels)}
        if len(self._index) != len(self._levels):
            raise ValueError('Level ids must be unique')

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> 'LevelCatalog':
        """Build a catalog from a levels.json-shaped dict."""
        validated = CatalogFile.model_validate(data)
        return cls([level_from_entry(entry) for entry in validated.levels])

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self) -> Iterator[Level]:
        return iter(self._levels)

    def __contains__(self, level_id: object) -> bool:
        return level_id in self._index

    @property
    def ids(self) -> list[str]:
        return [level.id for level in self._levels]

    def first(self) -> Level:
        return self._levels[0]

    def get(self, level_id: str) -> Level:
        """
        Look up a level by id.

        Raises:
            LevelNotFoundError: If no level carries that id
        """
        try:
            return self._levels[self._index[level_id]]
        except KeyError:
            raise LevelNotFoundError(level_id) from None

    def next_id(self, level_id: str) -> str:
        """Id of the level after ``level_id``, wrapping to the first."""
        position = self._index.get(level_id)
        if position is None:
            raise LevelNotFoundError(level_id)
        return self._levels[(position + 1) % len(self._levels)].id


def default_catalog() -> LevelCatalog:
    """The built-in three-question catalog."""
    return LevelCatalog.from_data({'levels': DEFAULT_LEVELS})


def load_catalog(path: Optional[Path | str] = None) -> LevelCatalog:
    """
    Load a level catalog from a levels.json file.

    Args:
        path: Path to the catalog file; None loads the built-in levels

    Returns:
        LevelCatalog in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        ValueError: If the file fails schema validation or has no levels
    """
    if path is None:
        return default_catalog()

    catalog_file = load_json(path, schema=CatalogFile)
    catalog = LevelCatalog([level_from_entry(entry) for entry in catalog_file.levels])
    logger.info(f'Loaded {len(catalog)} levels from {path}')
    return catalog
