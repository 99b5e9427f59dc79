"""
Roster of person records.

Holds built records keyed by identity and links them as friends.
"""

import logging
from typing import Iterator, Optional

from roster.models import BasePerson, UserId

logger = logging.getLogger(__name__)


class Roster:
    """
    Ordered collection of person records.

    Records are immutable, so operations that change a person (such as
    befriend) replace the stored record with an updated copy.

    Example:
        roster = Roster()
        roster.add(build_developer())
        roster.add(build_architect())
        print(roster.summary())
    """

    def __init__(self, records: Optional[list[BasePerson]] = None) -> None:
        self._records: dict[UserId, BasePerson] = {}
        for record in records or []:
            self.add(record)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[BasePerson]:
        return iter(self._records.values())

    def __contains__(self, user_id: UserId) -> bool:
        return user_id in self._records

    @property
    def records(self) -> list[BasePerson]:
        """Records in insertion order."""
        return list(self._records.values())

    def add(self, record: BasePerson) -> BasePerson:
        """Add a record, replacing any record with the same identity."""
        self._records[record.id] = record
        logger.debug(f"Added {record.name} ({record.id}) to roster")
        return record

    def get(self, user_id: UserId) -> BasePerson:
        """
        Look up a record by identity.

        Raises:
            KeyError: If no record has this identity
        """
        try:
            return self._records[user_id]
        except KeyError:
            raise KeyError(f"No person with id {user_id}") from None

    def befriend(self, first: UserId, second: UserId) -> tuple[BasePerson, BasePerson]:
        """
        Make two people list each other as friends.

        Args:
            first: Identity of the first person
            second: Identity of the second person

        Returns:
            The two updated records
        """
        if first == second:
            raise ValueError("A person cannot befriend themselves")

        a = self.get(first).with_friends(second)
        b = self.get(second).with_friends(first)
        self._records[first] = a
        self._records[second] = b
        logger.info(f"{a.name} and {b.name} are now friends")
        return a, b

    def oldest(self) -> Optional[BasePerson]:
        """
        Find the person with the greatest known age.

        People without an age are ignored. On ties the earliest added wins.
        """
        aged = [record for record in self._records.values() if record.age is not None]
        if not aged:
            return None
        return max(aged, key=lambda record: record.age)

    def summary(self) -> str:
        """Generate a human-readable summary."""
        lines = [f"Roster Summary ({len(self)} people):"]
        for record in self:
            lines.append(f"  {record.name} [{record.kind}]")
            for kind, values in record.traits().items():
                lines.append(f"    {kind.value}s: {', '.join(values) or 'none'}")
            if record.friends:
                names = [
                    self._records[f].name if f in self._records else str(f)
                    for f in record.friends
                ]
                lines.append(f"    friends: {', '.join(names)}")

        oldest = self.oldest()
        if oldest:
            lines.append(f"\nOldest: {oldest.name} ({oldest.age})")
        return "\n".join(lines)
