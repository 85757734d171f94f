from cirrus.services.logs.models import LogGroup, LogStream


class LogGroupView:
    @classmethod
    def format_lines(cls, records: list[LogGroup]) -> list[str]:
        return [group.name for group in records]


class LogStreamView:
    @classmethod
    def format_lines(cls, records: list[LogStream]) -> list[str]:
        lines = []
        for stream in records:
            last_event = (
                stream.last_event.isoformat(timespec="seconds")
                if stream.last_event
                else "-"
            )
            lines.append(f"{last_event}\t{stream.name}")
        return lines
