from collections import defaultdict
import logging
from typing import DefaultDict


def plural_s(n: int) -> str:
    return "" if n == 1 else "s"


_warning_count: DefaultDict[str, int] = defaultdict(int)


def warn_once(logger, msg: str, *args) -> None:
    """
    Log msg as a warning the first time it is seen and at debug level after
    that. With debug logging enabled, every occurrence is a debug message.
    """
    if _warning_count[msg] == 0 and not logger.isEnabledFor(logging.DEBUG):
        logger.warning(msg + " Hiding further warnings of this type, use --debug to show", *args)
    else:
        logger.debug(msg, *args)
    _warning_count[msg] += 1
