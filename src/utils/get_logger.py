import logging
from datetime import UTC, datetime

import pytz

# Tours run on Chicago time, so console timestamps are shown in Central
TIMEZONE = pytz.timezone("America/Chicago")

"""
Console logger setup
Each module asks for its own named logger; loggers are cached by name.
"""

Logger_Cache: dict[str, logging.Logger] = {}
Default_Level = logging.INFO


class LocalTimeFormatter(logging.Formatter):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.local_tz = TIMEZONE

    def format(self, record):
        utc_dt = datetime.fromtimestamp(record.created, UTC)
        local_time = utc_dt.astimezone(self.local_tz)

        record.local_time = local_time.strftime("%I:%M:%S %p")
        record.name = record.name[0:20]
        if record.levelno == logging.WARN:
            self._style._fmt = "%(local_time)-10s %(name)-20s:%(levelname)-8s =====> Warning %(message)s"

        elif record.levelno == logging.ERROR:
            self._style._fmt = "\n%(local_time)-10s %(name)-20s =====> ERROR \n%(message)s\n---END ERROR ---\n"

        else:
            self._style._fmt = "%(local_time)-10s %(name)-20s:%(levelname)-8s %(message)s"

        return super().format(record)


def get_logger(name: str, level=None) -> logging.Logger:
    """Return a logger with the specified name."""
    if name in Logger_Cache:
        return Logger_Cache[name]

    if level is None:
        level = Default_Level
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler, logging.StreamHandler):
            logger.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(LocalTimeFormatter())
    logger.addHandler(ch)

    logger.propagate = False

    Logger_Cache[name] = logger

    return logger


if __name__ == "__main__":
    a = get_logger("test")
    a.info("this is a test")
    a.error("this is an error test")
