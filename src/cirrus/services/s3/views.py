from cirrus.services.s3.models import Bucket


class BucketView:
    @classmethod
    def format_lines(cls, records: list[Bucket]) -> list[str]:
        return [bucket.name for bucket in records]
