"""In-memory tip catalog: immutable entries held in ordinal order."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Iterable, Iterator

from tipcat.exit_codes import NotFoundError, ValidationError

log = logging.getLogger(__name__)

REQUIRED_FIELDS = ("ordinal", "title", "explanation", "sample")
DEFAULT_LANGUAGE = "csharp"


@dataclass(frozen=True)
class TipEntry:
    """One numbered tip. ``sample`` is opaque text, never parsed."""

    ordinal: int
    title: str
    explanation: str
    sample: str
    language: str = DEFAULT_LANGUAGE

    def __post_init__(self):
        ordinal = self.ordinal
        # bool is an int subclass; True must not become tip 1
        if isinstance(ordinal, bool) or not isinstance(ordinal, int) or ordinal < 1:
            raise ValidationError(f"tip ordinal must be a positive integer, got {ordinal!r}")
        for name in ("title", "explanation", "sample", "language"):
            if not isinstance(getattr(self, name), str):
                raise ValidationError(f"tip {ordinal}: {name} must be a string")

    @classmethod
    def from_record(cls, record: dict) -> "TipEntry":
        """Build an entry from a plain record.

        A missing or null ``language`` takes the default; an empty string
        is kept as given.
        """
        if not isinstance(record, dict):
            raise ValidationError(f"tip record must be an object, got {type(record).__name__}")
        missing = [f for f in REQUIRED_FIELDS if f not in record]
        if missing:
            label = record.get("ordinal", "?")
            raise ValidationError(f"tip {label}: missing field(s): {', '.join(missing)}")

        language = record.get("language")
        if language is None:
            language = DEFAULT_LANGUAGE
        return cls(
            ordinal=record["ordinal"],
            title=record["title"],
            explanation=record["explanation"],
            sample=record["sample"],
            language=language,
        )

    def to_record(self) -> dict:
        return asdict(self)


class CatalogStore:
    """Read-only, ordinal-ordered collection of :class:`TipEntry` values.

    Build one with :meth:`load`; there is no way to add, replace or remove
    entries afterwards, so a store can be shared between threads freely.
    """

    __slots__ = ("_entries", "_by_ordinal")

    def __init__(self, entries: tuple[TipEntry, ...]):
        self._entries = entries
        self._by_ordinal = {e.ordinal: e for e in entries}

    @classmethod
    def load(cls, entries: Iterable[TipEntry | dict]) -> "CatalogStore":
        """Validate *entries* and return a new store.

        Raises ValidationError for empty input, duplicate ordinals or a
        malformed record. Ordinals are kept as given, never renumbered.
        """
        items = []
        for item in entries:
            if not isinstance(item, TipEntry):
                item = TipEntry.from_record(item)
            items.append(item)

        if not items:
            raise ValidationError("catalog is empty: at least one tip is required")

        seen: set[int] = set()
        dupes: list[int] = []
        for e in items:
            if e.ordinal in seen:
                dupes.append(e.ordinal)
            seen.add(e.ordinal)
        if dupes:
            listed = ", ".join(str(o) for o in sorted(set(dupes)))
            raise ValidationError(f"duplicate tip ordinal(s): {listed}")

        items.sort(key=lambda e: e.ordinal)
        log.debug("Loaded %d tips (ordinals %d..%d)",
                  len(items), items[0].ordinal, items[-1].ordinal)
        return cls(tuple(items))

    def all(self) -> tuple[TipEntry, ...]:
        """Every entry in strictly increasing ordinal order."""
        return self._entries

    def get(self, ordinal: int) -> TipEntry:
        try:
            return self._by_ordinal[ordinal]
        except KeyError:
            raise NotFoundError(f"no tip with ordinal {ordinal}") from None

    def ordinals(self) -> list[int]:
        return [e.ordinal for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TipEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"CatalogStore({len(self._entries)} tips)"
