"""
Fixtures used in the tests
"""
import pytest

from helium.params import ParameterRegistry, main_params, testnet_params


@pytest.fixture
def mainnet():
    return main_params()


@pytest.fixture
def testnet():
    return testnet_params()


@pytest.fixture
def registry():
    """A fresh registry per test, so selections never leak between tests"""
    return ParameterRegistry([main_params(), testnet_params()])
