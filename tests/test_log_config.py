import logging

from aimodel_client.log_config import RedactingFormatter, redact, setup_logging

from .helpers import make_settings


def test_redacts_bearer_tokens():
    assert redact("Authorization: Bearer abc.DEF-123") == "Authorization: Bearer ***"


def test_redacts_api_key_values():
    assert redact('{"api-key": "s3cr3t"}') == '{"api-key": "***"}'
    assert redact("api_key=s3cr3t") == "api_key=***"


def test_formatter_redacts_arguments():
    record = logging.LogRecord("t", logging.ERROR, __file__, 1, "headers: %s", ("Bearer s3cr3t",), None)
    assert RedactingFormatter("%(message)s").format(record) == "headers: Bearer ***"


def test_setup_logging_writes_log_file(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    log_file = tmp_path / "logs" / "client.log"
    try:
        setup_logging(make_settings(log_level="debug", log_path=str(log_file)))
        logging.getLogger("aimodel_client.test").debug("token Bearer s3cr3t")
        for handler in root.handlers:
            handler.flush()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    content = log_file.read_text()
    assert "token Bearer ***" in content
    assert "s3cr3t" not in content


def test_redacts_base64_style_secrets_completely():
    assert redact("Authorization: Bearer ab+cd/ef==") == "Authorization: Bearer ***"
    assert redact('{"api-key": "Zm9v+YmFy/ego="}') == '{"api-key": "***"}'
