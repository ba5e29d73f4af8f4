from datetime import datetime
import functools
import logging


class LoggingDateFormatter(logging.Formatter):
    """Formatter that puts milliseconds in the timestamp.
    """
    converter = datetime.fromtimestamp

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        t = ct.strftime("%H:%M:%S")
        s = "%s.%03d" % (t, record.msecs)
        return s


def setup_logging(tag, level=logging.INFO):
    """Sets up the logging module.
    """
    fmt = "[%s] %%(asctime)s %%(levelname)s: %%(message)s" % tag
    formatter = LoggingDateFormatter(fmt)

    # Console logger
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)

    # Set up logger
    logger = logging.root
    logger.setLevel(level)
    logger.addHandler(handler)


class PromMeasureRequest(object):
    """Decorates request handlers to count and time them.
    """
    def __init__(self, count, time):
        self.count = count
        self.time = time

    def sync(self, name):
        count = self.count.labels(name)
        time = self.time.labels(name)

        def decorator(func):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                count.inc()
                with time.time():
                    return func(*args, **kwargs)

            return wrapper

        return decorator
