"""Immutable request headers.

Names and values are held as decoded strings in arrival order. A name
matches without regard to case; a value is returned exactly as received.
"""

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Read-only view of the headers on an inbound request.

    Repeated names keep every pair, but lookups return the first value,
    as the router only ever compares a single value per header.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[tuple[str, str]] = ()) -> None:
        object.__setattr__(self, "_items", tuple(items))

    @classmethod
    def from_mapping(cls, headers: Mapping[str, str]) -> "Headers":
        """Build headers from a plain ``{name: value}`` mapping."""
        return cls(headers.items())

    @classmethod
    def from_asgi(cls, raw: Iterable[tuple[bytes, bytes]]) -> "Headers":
        """Decode the ``(name, value)`` byte pairs of an ASGI scope."""
        return cls((name.decode("latin-1"), value.decode("latin-1")) for name, value in raw)

    def _first(self, key: str) -> str | None:
        wanted = key.casefold()
        for name, value in self._items:
            if name.casefold() == wanted:
                return value
        return None

    def __getitem__(self, key: str) -> str:
        value = self._first(key)
        if value is None:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._first(key) is not None

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._items:
            folded = name.casefold()
            if folded not in seen:
                seen.add(folded)
                yield folded

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"Headers({list(self._items)!r})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing.

        Never raises: a name no header can carry is simply absent.
        """
        value = self._first(key)
        return default if value is None else value
