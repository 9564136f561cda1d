import pytest

from davinci_ballot.ballot import BallotBuilder, BallotConfig
from davinci_ballot.crypto.curve import BASE8, mul_point_scalar, te_to_rte

PRIVATE_KEY = 2236929741219402612758425765733287541213734532467489541211632911282134987
SEED_K = 9582461857293847162539487123059472012384716234
PROCESS_ID_HEX = "0x0a62e32147e9c1ea76da552be6e0636f1984143af00000000000000000000001"
ADDRESS_HEX = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"


@pytest.fixture(scope="session")
def private_key():
    return PRIVATE_KEY


@pytest.fixture(scope="session")
def pub_key_te(private_key):
    return mul_point_scalar(BASE8, private_key)


@pytest.fixture(scope="session")
def pub_key_rte(pub_key_te):
    return te_to_rte(pub_key_te)


@pytest.fixture
def scenario_config():
    return BallotConfig(
        num_fields=2,
        unique_values=False,
        max_value=3,
        min_value=0,
        max_value_sum=6,
        min_value_sum=0,
        cost_exponent=0,
        cost_from_weight=False,
    )


@pytest.fixture
def builder():
    return BallotBuilder()
