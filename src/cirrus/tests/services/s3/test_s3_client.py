from datetime import datetime

import boto3
import pytest
from botocore.exceptions import ClientError

from cirrus.services.s3.client import S3Client


@pytest.fixture
def s3_client_wrapper(mocker):
    mocker.patch("boto3.Session")
    return S3Client()


def test_list_buckets(s3_client_wrapper):
    created = datetime(2024, 1, 1)
    s3_client_wrapper._client.list_buckets.return_value = {
        "Buckets": [
            {"Name": "logs", "CreationDate": created},
            {"Name": "assets"},
        ]
    }

    buckets = s3_client_wrapper.list_buckets()

    assert [b.name for b in buckets] == ["logs", "assets"]
    assert buckets[0].creation_date == created
    assert buckets[1].creation_date is None


def test_list_buckets_error_propagates(s3_client_wrapper):
    s3_client_wrapper._client.list_buckets.side_effect = ClientError(
        {"Error": {"Code": "AccessDenied"}}, "ListBuckets"
    )

    with pytest.raises(ClientError):
        s3_client_wrapper.list_buckets()


def test_list_buckets_against_moto(s3_mock):
    s3_mock.create_bucket(Bucket="alpha")
    s3_mock.create_bucket(Bucket="beta")

    client = S3Client(boto3.Session(region_name="us-east-1"))

    assert sorted(b.name for b in client.list_buckets()) == ["alpha", "beta"]
