"""Fixed set of team members that cards can be assigned to."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

UNKNOWN_MEMBER = "Unknown"


@dataclass(frozen=True)
class TeamMember:
    id: int
    name: str

    def __str__(self) -> str:
        return f"{self.name} (ID: {self.id})"


class Roster:
    """Read-only lookup over the team, kept in seed order."""

    def __init__(self, members: Iterable[TeamMember]) -> None:
        self._members: dict[int, TeamMember] = {}
        for member in members:
            if member.id in self._members:
                raise ValueError(f"duplicate team member id {member.id}")
            self._members[member.id] = member

    def __iter__(self) -> Iterator[TeamMember]:
        return iter(self._members.values())

    def __len__(self) -> int:
        return len(self._members)

    def find_by_id(self, member_id: int) -> TeamMember | None:
        """Return the member with this id, or None."""
        return self._members.get(member_id)

    def exists(self, member_id: int) -> bool:
        return member_id in self._members

    def name_or_unknown(self, member_id: int) -> str:
        """Display name for an id, falling back to "Unknown"."""
        member = self.find_by_id(member_id)
        if member is None:
            return UNKNOWN_MEMBER
        return member.name
