import logging
from seqstats.observability import logging as seqstats_logging

def test_setup_logging_is_idempotent(monkeypatch):
    monkeypatch.setattr(seqstats_logging.setup_logging, "_configured", False, raising=False)
    logger = seqstats_logging.setup_logging(level=logging.DEBUG)
    assert logger.name == "seqstats"
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    again = seqstats_logging.setup_logging()
    assert again is logger
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
