from typing import Any, Dict
from unittest.mock import Mock

import boto3
import pytest
from botocore.stub import Stubber
from moto import mock_aws

from infra_actions.config.schemas.app_schema import AWSConfig
from infra_actions.infrastructure.aws.aws_client import AWSClientFactory

TEST_REGION = "us-east-1"


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Mocked AWS Credentials for moto."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', TEST_REGION)
    monkeypatch.delenv('AWS_PROFILE', raising=False)


@pytest.fixture
def aws_config():
    return AWSConfig(region=TEST_REGION)


@pytest.fixture
def client_factory(aws_config):
    """Client factory whose clients talk to moto."""
    with mock_aws():
        yield AWSClientFactory(aws_config)


@pytest.fixture
def ec2_instances(client_factory):
    """Launch two running instances and return their ids."""
    ec2 = boto3.client('ec2', region_name=TEST_REGION)
    response = ec2.run_instances(
        ImageId='ami-12345678',
        InstanceType='t2.micro',
        MinCount=2,
        MaxCount=2,
    )
    return [i['InstanceId'] for i in response['Instances']]


class StubbedClientFactory(AWSClientFactory):
    """Client factory handing out pre-built, Stubber-wrapped clients."""

    def __init__(self, config: AWSConfig, clients: Dict[str, Any]):
        super().__init__(config)
        self._clients = clients

    def client(self, service_name: str) -> Any:
        return self._clients[service_name]


@pytest.fixture
def stubbed_factory(aws_config):
    """Client factory for ec2, ssm and batch with a Stubber per service.

    The stubbers are reachable as ``stubbed_factory.stubbers[<service>]``.
    """
    clients = {
        name: boto3.client(name, region_name=TEST_REGION)
        for name in ('ec2', 'ssm', 'batch')
    }
    factory = StubbedClientFactory(aws_config, clients)
    factory.stubbers = {name: Stubber(client) for name, client in clients.items()}
    for stubber in factory.stubbers.values():
        stubber.activate()
    yield factory
    for stubber in factory.stubbers.values():
        stubber.deactivate()


@pytest.fixture
def mock_factory():
    """Client factory that records calls and never reaches a provider."""
    return Mock(spec=AWSClientFactory)
