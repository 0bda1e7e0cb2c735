import logging
from typing import Union

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=_FORMAT)
