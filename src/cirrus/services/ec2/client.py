import logging

import boto3

from cirrus.core.session import CLIENT_CONFIG
from cirrus.services.ec2.models import InstanceAddresses, InstanceSummary, StateChange

logger = logging.getLogger(__name__)


class EC2Client:
    """
    Wrapper for Boto3 EC2 interactions.

    SDK errors are not handled here; they propagate to the command.
    """

    def __init__(self, session: boto3.Session | None = None):
        self.session = session or boto3.Session()
        self._client = self.session.client("ec2", config=CLIENT_CONFIG)

    def list_instances(self) -> list[InstanceSummary]:
        """
        Pages through all EC2 instances in the region.
        """
        logger.debug("Calling DescribeInstances")
        paginator = self._client.get_paginator("describe_instances")
        instances = []
        for page in paginator.paginate():
            for reservation in page.get("Reservations", []):
                for instance in reservation.get("Instances", []):
                    instances.append(InstanceSummary.from_response(instance))
        return instances

    def get_addresses(self, instance_id: str) -> list[InstanceAddresses]:
        logger.debug("Calling DescribeInstances for %s", instance_id)
        response = self._client.describe_instances(InstanceIds=[instance_id])
        return [
            InstanceAddresses.from_response(instance)
            for reservation in response.get("Reservations", [])
            for instance in reservation.get("Instances", [])
        ]

    def start_instance(self, instance_id: str) -> list[StateChange]:
        logger.debug("Calling StartInstances for %s", instance_id)
        response = self._client.start_instances(InstanceIds=[instance_id])
        return self._state_changes(response.get("StartingInstances", []))

    def stop_instance(self, instance_id: str) -> list[StateChange]:
        logger.debug("Calling StopInstances for %s", instance_id)
        response = self._client.stop_instances(InstanceIds=[instance_id])
        return self._state_changes(response.get("StoppingInstances", []))

    def terminate_instance(self, instance_id: str) -> list[StateChange]:
        logger.debug("Calling TerminateInstances for %s", instance_id)
        response = self._client.terminate_instances(InstanceIds=[instance_id])
        return self._state_changes(response.get("TerminatingInstances", []))

    def reboot_instance(self, instance_id: str) -> None:
        """
        RebootInstances returns no payload; success is the absence of an error.
        """
        logger.debug("Calling RebootInstances for %s", instance_id)
        self._client.reboot_instances(InstanceIds=[instance_id])

    @staticmethod
    def _state_changes(changes: list[dict]) -> list[StateChange]:
        return [StateChange.from_response(change) for change in changes]
