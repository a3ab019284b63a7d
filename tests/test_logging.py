from lazyseq.config import SequenceConfig
from lazyseq.logging import log


def test_log(capsys):
    log.info("info message")
    log.warning("warning message")
    out = capsys.readouterr().out
    assert "info message" in out
    assert "warning message" in out
    assert "[yellow]" not in out


def test_log_config_report(capsys):
    log.info(SequenceConfig.report())
    out = capsys.readouterr().out
    assert "SequenceConfig" in out
    assert "horner_recursive" in out
