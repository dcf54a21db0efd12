import logging
import sys

from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            log_record['timestamp'] = record.created
        if log_record.get('level'):
            log_record['level'] = log_record['level'].upper()
        else:
            log_record['level'] = record.levelname
        log_record['module'] = record.module
        log_record['lineno'] = record.lineno


def setup_logging(log_level_str: str = "INFO", json_format: bool = True) -> None:
    """
    Configures root logging once. JSON lines on stderr by default, plain text otherwise.
    Calling it again only updates the level.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if any(getattr(h, "_speech_profile", False) for h in root_logger.handlers):
        return

    # stderr keeps stdout free for command output
    log_handler = logging.StreamHandler(sys.stderr)
    if json_format:
        formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(module)s %(lineno)d %(message)s')
    else:
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    log_handler.setFormatter(formatter)
    log_handler._speech_profile = True
    root_logger.addHandler(log_handler)
    root_logger.debug(f"Logging configured with level: {logging.getLevelName(log_level)}")
