from cirrus.services.ec2.models import InstanceAddresses, InstanceSummary, StateChange

INSTANCE_ID_WIDTH = 19


class InstanceListView:
    @classmethod
    def format_lines(cls, records: list[InstanceSummary]) -> list[str]:
        """
        Sorts by name and aligns the id and state columns.
        """
        rows = sorted(records, key=lambda row: row.name)
        state_width = max((len(row.state) for row in rows), default=0)
        return [
            f"{row.instance_id:{INSTANCE_ID_WIDTH}} "
            f"{row.state:{state_width}} {row.name}"
            for row in rows
        ]


class AddressView:
    @classmethod
    def format_lines(cls, records: list[InstanceAddresses]) -> list[str]:
        lines = []
        for record in records:
            lines.append(f"private IP: {record.private_ip}")
            lines.append(f"public IP: {record.public_ip}")
        return lines


class StateChangeView:
    @classmethod
    def format_lines(cls, records: list[StateChange]) -> list[str]:
        return [
            f"{change.instance_id} {change.previous_state} -> {change.current_state}"
            for change in records
        ]
