"""Calendar instants with an explicit zone kind.

An Instant is a wall-clock value plus a zone. The zone is one of two variants:

    - UniversalZone: the instant floats; it has no real-world offset
    - NamedZone: an IANA time zone such as "Europe/Paris"

Formatting dispatches on the variant with a match statement, so the two cases
are handled exhaustively rather than by probing a flag.

Python 3.13+. Uses Babel's zoneinfo-backed get_timezone() for zone lookup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, tzinfo

from babel.dates import get_timezone

__all__ = [
    "Instant",
    "NamedZone",
    "UniversalZone",
    "Zone",
    "as_if_utc",
]


@dataclass(frozen=True, slots=True)
class UniversalZone:
    """Zone of a floating instant (no real-world offset)."""

    def is_universal(self) -> bool:
        return True

    def name(self) -> str | None:
        return None


@dataclass(frozen=True, slots=True)
class NamedZone:
    """IANA time zone.

    The name is validated on construction; an unknown name raises
    LookupError from Babel.
    """

    zone_name: str
    _tzinfo: tzinfo = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_tzinfo", get_timezone(self.zone_name))

    @property
    def tzinfo(self) -> tzinfo:
        return self._tzinfo

    def is_universal(self) -> bool:
        return False

    def name(self) -> str:
        return self.zone_name


type Zone = UniversalZone | NamedZone


@dataclass(frozen=True, slots=True)
class Instant:
    """A wall-clock datetime attached to a zone.

    Attributes:
        wall: Naive datetime holding the wall-clock fields
        zone: UniversalZone or NamedZone
    """

    wall: datetime
    zone: Zone = field(default_factory=UniversalZone)

    def __post_init__(self) -> None:
        if self.wall.tzinfo is not None:
            msg = "Instant.wall must be a naive datetime; use Instant.from_datetime()"
            raise ValueError(msg)

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        zone: str | None = None,
        universal: bool = True,
    ) -> Instant:
        """Build an instant from calendar fields.

        Args:
            year, month, day, hour, minute, second: Wall-clock fields
            zone: IANA zone name; when given, the instant is zoned
            universal: Ignored when ``zone`` is given; otherwise the instant
                is floating (the only option without a zone)

        Example:
            >>> Instant.from_fields(2016, 11, 14).zone
            UniversalZone()
            >>> Instant.from_fields(2016, 1, 1, zone="Europe/Paris").zone.name()
            'Europe/Paris'
        """
        wall = datetime(year, month, day, hour, minute, second)  # noqa: DTZ001
        if zone is not None:
            return cls(wall, NamedZone(zone))
        if not universal:
            msg = "A non-universal instant needs a zone name"
            raise ValueError(msg)
        return cls(wall, UniversalZone())

    @classmethod
    def from_datetime(cls, value: datetime) -> Instant:
        """Wrap a datetime: naive values float, aware values keep their zone.

        Aware datetimes must carry a zoneinfo-style tzinfo exposing ``key``
        (or be UTC), since the zone is stored by name.
        """
        if value.tzinfo is None:
            return cls(value, UniversalZone())
        key = getattr(value.tzinfo, "key", None)
        if key is None:
            if value.utcoffset() != UTC.utcoffset(None):
                msg = f"Cannot derive a zone name from tzinfo {value.tzinfo!r}"
                raise ValueError(msg)
            key = "UTC"
        return cls(value.replace(tzinfo=None), NamedZone(key))

    def to_datetime(self) -> datetime:
        """Return the aware datetime for a zoned instant.

        Raises:
            ValueError: For a floating instant, which has no real-world
                position; use as_if_utc() instead.
        """
        match self.zone:
            case NamedZone() as zone:
                return self.wall.replace(tzinfo=zone.tzinfo)
            case UniversalZone():
                msg = "A floating instant has no absolute time; use as_if_utc()"
                raise ValueError(msg)


def as_if_utc(instant: Instant) -> datetime:
    """Reinterpret the instant's wall-clock fields as UTC.

    Example:
        >>> as_if_utc(Instant.from_fields(2016, 11, 14, 9))
        datetime.datetime(2016, 11, 14, 9, 0, tzinfo=datetime.timezone.utc)
    """
    return instant.wall.replace(tzinfo=UTC)
