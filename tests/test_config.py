import numpy as np
import pytest

from lazyseq.config import Config, ConfigError, SequenceConfig
from lazyseq.sequence import constant, factorial


class Single(SequenceConfig):
    dtype = np.float32


def test_defaults():
    assert SequenceConfig.dtype is np.float64
    assert SequenceConfig.horner_recursive is False
    assert factorial().dtype == np.float64


def test_update_with_dict():
    SequenceConfig.update({"dtype": np.int64})
    assert factorial().dtype == np.int64
    assert constant().dtype == np.int64
    assert constant(1.5).dtype == np.float64


def test_update_with_config():
    SequenceConfig.update(Single)
    assert SequenceConfig.dtype is np.float32
    assert SequenceConfig.horner_recursive is False
    assert factorial().dtype == np.float32


def test_reset():
    SequenceConfig.update({"dtype": np.int8, "horner_recursive": True})
    SequenceConfig.reset()
    assert SequenceConfig.dtype is np.float64
    assert SequenceConfig.horner_recursive is False


def test_update_errors():
    with pytest.raises(ConfigError):
        SequenceConfig.update({"precision": 2})
    with pytest.raises(ConfigError):
        SequenceConfig.update(42)
    with pytest.raises(ConfigError):
        Config.update({"dtype": np.float32})
    with pytest.raises(ConfigError):
        Config.reset()


def test_report():
    SequenceConfig.update(Single)
    report = SequenceConfig.report().plain
    assert "Config = SequenceConfig" in report
    assert "dtype" in report
    assert "float32 (Single)" in report
    assert "horner_recursive : bool = False (SequenceConfig)" in report
