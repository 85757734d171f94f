from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any


@dataclass
class Bucket:
    name: str
    creation_date: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
