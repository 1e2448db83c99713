import json
import logging
import sys
from datetime import datetime
from typing import Any


LOGGER_NAME = "streamcap"


class _Formatter(logging.Formatter):
    def __init__(self, owner: "Logger"):
        super().__init__()
        self.owner = owner

    def format(self, record: logging.LogRecord) -> str:
        attr: dict[str, Any] | None = getattr(record, "attr", None)
        now = datetime.fromtimestamp(record.created)
        if self.owner.is_prod:
            dct: dict[str, Any] = {
                "time": now.isoformat(),
                "level": record.levelname.lower(),
                "message": record.getMessage(),
            }
            if attr is not None:
                for k, v in attr.items():
                    dct[k] = v
            return json.dumps(dct, ensure_ascii=False, default=str)

        line = f"{now.strftime('%Y-%m-%d %H:%M:%S')} {record.levelname:<5} {record.getMessage()}"
        if attr is not None and len(attr) > 0:
            line += " " + json.dumps(attr, ensure_ascii=False, default=str)
        return line


class _StdoutHandler(logging.StreamHandler):
    # follows sys.stdout when it is replaced after setup
    @property
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, value):
        pass


class Logger:
    def __init__(self, name: str = LOGGER_NAME, level: int = logging.INFO, is_prod: bool = False):
        self.is_prod = is_prod
        self.__logger = logging.getLogger(name)
        self.__logger.setLevel(level)
        self.__logger.propagate = False
        if len(self.__logger.handlers) == 0:
            handler = _StdoutHandler()
            handler.setFormatter(_Formatter(self))
            self.__logger.addHandler(handler)

    def set_level(self, level: int | str):
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                raise ValueError(f"Invalid log level: {level}")
        self.__logger.setLevel(level)

    def debug(self, message: str, attr: dict | None = None):
        self.__logger.debug(message, extra={"attr": attr})

    def info(self, message: str, attr: dict | None = None):
        self.__logger.info(message, extra={"attr": attr})

    def warn(self, message: str, attr: dict | None = None):
        self.__logger.warning(message, extra={"attr": attr})

    def error(self, message: str, attr: dict | None = None):
        self.__logger.error(message, extra={"attr": attr})


log = Logger()
