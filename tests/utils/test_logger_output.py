import json
import logging

from streamcap.utils import error_dict, log


def test_dev_format(capsys):
    log.is_prod = False
    log.set_level(logging.INFO)
    log.info("Start Capture", {"url": "http://host/live.ts"})
    log.debug("hidden")

    out = capsys.readouterr().out
    assert "INFO  Start Capture" in out
    assert '{"url": "http://host/live.ts"}' in out
    assert "hidden" not in out


def test_prod_format(capsys):
    log.is_prod = True
    try:
        log.set_level("debug")
        log.error("Failed to read from stream", error_dict(ValueError("boom")))
    finally:
        log.is_prod = False
        log.set_level(logging.INFO)

    line = capsys.readouterr().out.strip().splitlines()[-1]
    dct = json.loads(line)
    assert dct["level"] == "error"
    assert dct["message"] == "Failed to read from stream"
    assert dct["error_type"] == "ValueError"
    assert dct["error"] == "boom"
