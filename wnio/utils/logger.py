"""Functions to send wnio log messages to the console and to a log file."""

import logging
logging.getLogger('wnio').addHandler(logging.NullHandler())

_handlers = []


def start_logging(filename='wnio.log', file_level=logging.WARNING, console_level=logging.INFO):
    """
    Start the wnio logger.

    Messages at ``console_level`` and above are printed to the screen, and
    messages at ``file_level`` and above (skipped binary blocks, for example)
    are written to ``filename``. Calling this again while logging is running
    does nothing.

    Parameters
    ----------
    filename : str, optional
        Log file name, by default 'wnio.log'
    file_level : int, optional
        Lowest level written to the log file, by default logging.WARNING
    console_level : int, optional
        Lowest level printed to the screen, by default logging.INFO

    Returns
    -------
    logging.Logger
        The ``wnio`` logger
    """
    logger = logging.getLogger('wnio')
    if _handlers:
        return logger
    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter('%(name)-16s %(levelname)-8s %(message)s')
    fh = logging.FileHandler(filename, mode='w')
    fh.setLevel(file_level)
    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    for handler in (fh, ch):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        _handlers.append(handler)
    return logger


def stop_logging():
    """
    Remove and close the handlers added by :func:`start_logging`.
    """
    logger = logging.getLogger('wnio')
    while _handlers:
        handler = _handlers.pop()
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
