from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import Any


def from_epoch_millis(value: int | None) -> datetime | None:
    if value is None:
        return None
    return datetime.fromtimestamp(value / 1000, tz=UTC)


@dataclass
class LogGroup:
    name: str
    stored_bytes: int = 0
    retention_days: int | None = None

    @classmethod
    def from_response(cls, group: dict[str, Any]) -> "LogGroup":
        return cls(
            name=group["logGroupName"],
            stored_bytes=group.get("storedBytes", 0),
            retention_days=group.get("retentionInDays"),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class LogStream:
    name: str
    last_event: datetime | None = None

    @classmethod
    def from_response(cls, stream: dict[str, Any]) -> "LogStream":
        return cls(
            name=stream["logStreamName"],
            last_event=from_epoch_millis(stream.get("lastEventTimestamp")),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
