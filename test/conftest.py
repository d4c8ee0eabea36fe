import pytest
from hypothesis import HealthCheck, settings

from cryptobn import bn_type, dp_rng
from cryptobn.config import reset_config

settings.register_profile(
    "cryptobn",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
settings.load_profile("cryptobn")


@pytest.fixture(autouse=True)
def clean_state():
    # every test starts from the OS CSPRNG and the environment config
    dp_rng.set_byte_source(None)
    reset_config()
    yield
    dp_rng.set_byte_source(None)
    reset_config()


@pytest.fixture(params=["python", "gmp"])
def B(request):
    """Bn type bound to each backend in turn."""
    return bn_type(request.param)
