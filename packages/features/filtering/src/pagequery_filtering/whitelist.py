"""FieldWhitelist — per-resource sortable fields and their public names."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .exceptions import FieldNotAllowedError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class FieldWhitelist:
    """
    Maps the names an API exposes to field paths, and limits sorting to them.

    Example::

        whitelist = FieldWhitelist(
            sortable_fields={"member.age", "member.username", "team.name"},
            aliases={"age": "member.age", "username": "member.username",
                     "teamName": "team.name"},
        )
        whitelist.resolve_sort("age")   # -> "member.age"
    """

    def __init__(
        self,
        *,
        sortable_fields: Iterable[str] | None = None,
        aliases: Mapping[str, str] | None = None,
    ) -> None:
        self.sortable_fields = frozenset(sortable_fields or ())
        self.aliases = dict(aliases or {})

    def resolve(self, name: str) -> str:
        """Return the field path for a public name (paths pass through)."""
        return self.aliases.get(name, name)

    def resolve_sort(self, name: str) -> str:
        """Resolve ``name`` and raise FieldNotAllowedError unless sortable."""
        path = self.resolve(name)
        if path not in self.sortable_fields:
            raise FieldNotAllowedError(name, self.public_names(), usage="sortable")
        return path

    def public_names(self) -> set[str]:
        names = {alias for alias, path in self.aliases.items() if path in self.sortable_fields}
        return names | set(self.sortable_fields)
