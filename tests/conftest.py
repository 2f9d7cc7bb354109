import pytest

from gateway import QueryGateway
from tests.fakes import FakeExecutor


@pytest.fixture
def executor():
    return FakeExecutor()


@pytest.fixture
def gateway(executor):
    return QueryGateway(executor)
