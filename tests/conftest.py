from unittest import mock

import pytest
from botocore.stub import Stubber
from common.data import REGION, create_client

from cbuild.container_registry import AmazonElasticContainerRegistry
from cbuild.containerizer import Docker
from cbuild.secret_store import AWSParameterStore


@pytest.fixture
def ecr():
    client = create_client("ecr")
    provider = AmazonElasticContainerRegistry(region=REGION)
    provider._client = client
    with Stubber(client) as stubber:
        yield provider, stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def ssm():
    client = create_client("ssm")
    provider = AWSParameterStore(region=REGION)
    provider._client = client
    with Stubber(client) as stubber:
        yield provider, stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def docker_client() -> mock.MagicMock:
    return mock.MagicMock()


@pytest.fixture
def containerizer(docker_client: mock.MagicMock) -> Docker:
    provider = Docker()
    provider._client = docker_client
    return provider
