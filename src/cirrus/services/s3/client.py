import logging

import boto3

from cirrus.core.session import CLIENT_CONFIG
from cirrus.services.s3.models import Bucket

logger = logging.getLogger(__name__)


class S3Client:
    """
    Wrapper for Boto3 S3 interactions.
    """

    def __init__(self, session: boto3.Session | None = None):
        self.session = session or boto3.Session()
        self._client = self.session.client("s3", config=CLIENT_CONFIG)

    def list_buckets(self) -> list[Bucket]:
        logger.debug("Calling ListBuckets")
        response = self._client.list_buckets()
        return [
            Bucket(name=bucket["Name"], creation_date=bucket.get("CreationDate"))
            for bucket in response.get("Buckets", [])
        ]
