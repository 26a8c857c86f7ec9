from hypothesis import settings, HealthCheck, Phase
from weightedsample.uniform import ScriptedUniformSource, StandardUniformSource
import pytest

settings.register_profile(
    'default',
    settings(
        deadline=None,
        suppress_health_check=[HealthCheck.too_slow],
    ))

settings.load_profile('default')

settings.register_profile(
    'coverage', settings(phases=[Phase.explicit]),
)


@pytest.fixture
def alternating_flip():
    # Heads then tails, forever.
    return ScriptedUniformSource([0.2, 0.7])


@pytest.fixture
def standard_source():
    return StandardUniformSource()
