import pytest

from _builders import make_facts


@pytest.fixture
def no_gpu_facts():
    return make_facts()
