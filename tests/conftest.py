import copy

import boto3
import pytest
from botocore.stub import Stubber

from tests.fixtures import TASK_DEF


@pytest.fixture
def task_def():
    return copy.deepcopy(TASK_DEF)


@pytest.fixture
def ecs_stub():
    client = boto3.client(
        "ecs",
        region_name="eu-west-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    with Stubber(client) as stubber:
        yield client, stubber


@pytest.fixture
def secrets_stub():
    client = boto3.client(
        "secretsmanager",
        region_name="eu-west-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    with Stubber(client) as stubber:
        yield client, stubber
