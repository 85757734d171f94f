import logging
import sys

import boto3
from botocore.config import Config

logger = logging.getLogger(__name__)

CLIENT_CONFIG = Config(
    retries={"mode": "standard"},
    user_agent_extra="cirrus",
)


def setup_logging(verbose: bool):
    log_level = logging.DEBUG if verbose else logging.ERROR
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def build_session(
    region: str | None = None, profile: str | None = None
) -> boto3.Session:
    """
    Creates the boto3 session for a single invocation.

    Anything not given explicitly falls back to the standard AWS environment
    variables and shared config files.
    """
    session = boto3.Session(region_name=region, profile_name=profile)
    logger.debug(
        "Using AWS session (profile=%s, region=%s)",
        session.profile_name,
        session.region_name,
    )
    return session
