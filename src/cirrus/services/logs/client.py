import logging

import boto3

from cirrus.core.session import CLIENT_CONFIG
from cirrus.services.logs.models import LogGroup, LogStream

logger = logging.getLogger(__name__)

MAX_STREAMS_PER_REQUEST = 50


class LogsClient:
    """
    Wrapper for Boto3 CloudWatch Logs interactions.
    """

    def __init__(self, session: boto3.Session | None = None):
        self.session = session or boto3.Session()
        self._client = self.session.client("logs", config=CLIENT_CONFIG)

    def list_log_groups(self, prefix: str | None = None) -> list[LogGroup]:
        """
        Pages through log groups, optionally restricted to a name prefix.
        """
        params = {}
        if prefix is not None:
            params["logGroupNamePrefix"] = prefix

        logger.debug("Calling DescribeLogGroups with %s", params)
        paginator = self._client.get_paginator("describe_log_groups")
        groups = []
        for page in paginator.paginate(**params):
            groups.extend(
                LogGroup.from_response(group) for group in page.get("logGroups", [])
            )
        return groups

    def recent_streams(self, group_name: str, limit: int) -> list[LogStream]:
        """
        Returns at most `limit` streams, most recently written first.
        """
        logger.debug("Calling DescribeLogStreams for %s (limit=%s)", group_name, limit)
        response = self._client.describe_log_streams(
            logGroupName=group_name,
            orderBy="LastEventTime",
            descending=True,
            limit=limit,
        )
        streams = response.get("logStreams", [])[:limit]
        return [LogStream.from_response(stream) for stream in streams]
