import pytest

from lazyseq.config import SequenceConfig


@pytest.fixture(autouse=True)
def reset_config():
    yield
    SequenceConfig.reset()
