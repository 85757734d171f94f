from dataclasses import asdict, dataclass
from typing import Any

UNKNOWN_INSTANCE_ID = "i-?????????????????"
NO_NAME = "<no-name>"
UNKNOWN_STATE = "unknown"


def get_instance_name(instance: dict[str, Any]) -> str | None:
    """
    Returns the value of the instance's Name tag, if it has one.
    """
    for tag in instance.get("Tags", []):
        if tag.get("Key") == "Name" and tag.get("Value") is not None:
            return tag["Value"]
    return None


@dataclass
class InstanceSummary:
    instance_id: str
    name: str
    state: str

    @classmethod
    def from_response(cls, instance: dict[str, Any]) -> "InstanceSummary":
        return cls(
            instance_id=instance.get("InstanceId") or UNKNOWN_INSTANCE_ID,
            name=get_instance_name(instance) or NO_NAME,
            state=instance.get("State", {}).get("Name") or UNKNOWN_STATE,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class InstanceAddresses:
    instance_id: str
    private_ip: str = ""
    public_ip: str = ""

    @classmethod
    def from_response(cls, instance: dict[str, Any]) -> "InstanceAddresses":
        return cls(
            instance_id=instance.get("InstanceId") or UNKNOWN_INSTANCE_ID,
            private_ip=instance.get("PrivateIpAddress", ""),
            public_ip=instance.get("PublicIpAddress", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class StateChange:
    """A single entry of a Start/Stop/TerminateInstances response."""

    instance_id: str
    previous_state: str
    current_state: str

    @classmethod
    def from_response(cls, change: dict[str, Any]) -> "StateChange":
        previous = change.get("PreviousState", {})
        current = change.get("CurrentState", {})
        return cls(
            instance_id=change.get("InstanceId") or UNKNOWN_INSTANCE_ID,
            previous_state=previous.get("Name") or UNKNOWN_STATE,
            current_state=current.get("Name") or UNKNOWN_STATE,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
