"""
A simple logging module that logs to the console and optionally a logfile,
with a configurable threshold loglevel for each of console and logfile
output.

This module uses the 'borg' pattern - modules are already singletons, so
setting module variables before the first log call configures all users.

Typical usage:

    import gridsample.utilities.log as log

    # configure my logging
    log.console_logging_level = log.INFO
    log.log_logging_level = log.DEBUG
    log.log_filename = './my.log'

    # log away!
    log.debug('A message at DEBUG level')
    log.info('Another message, INFO level')

This module is NOT thread-safe.
"""

import os
import sys
import traceback
import logging


DefaultConsoleLogLevel = logging.CRITICAL
DefaultFileLogLevel = logging.INFO

################################################################################
# Module variables - only one copy of these, ever.
#
# The console logging level is set to a high level, like CRITICAL.  The logfile
# logging is set lower, between DEBUG and CRITICAL.  There is code to ensure
# log <= console levels.
#
# If console logging level is set to CRITICAL+1 then nothing will print on the
# console.
################################################################################

# flag variable to determine if logging set up or not
_setup = False

# name of the logger all gridsample messages go through
logger_name = 'gridsample'

# logging level for the console
console_logging_level = DefaultConsoleLogLevel

# logging level for the logfile
log_logging_level = DefaultFileLogLevel

# The name of the file to log to.  None means console only.
log_filename = None

# set module variables so users don't have to do 'import logging'.
CRITICAL = logging.CRITICAL
ERROR = logging.ERROR
WARNING = logging.WARNING
INFO = logging.INFO
DEBUG = logging.DEBUG
NOTSET = logging.NOTSET


################################################################################
# Module code.
################################################################################

def _get_logger():
    """Set up the gridsample logger on first use and return it."""

    global _setup, log_logging_level

    logger = logging.getLogger(logger_name)

    if not _setup:
        # sanity check the logging levels, require console >= file
        if log_logging_level > console_logging_level:
            log_logging_level = console_logging_level

        logger.setLevel(min(log_logging_level, console_logging_level))

        # define a console handler which writes to sys.stdout
        console = logging.StreamHandler(sys.stdout)
        console.setLevel(console_logging_level)
        console.setFormatter(logging.Formatter('%(message)s'))
        logger.addHandler(console)

        if log_filename is not None:
            fmt = '%(asctime)s %(levelname)-8s %(mname)25s:%(lnum)-4d|%(message)s'
            logfile = logging.FileHandler(log_filename, mode='w')
            logfile.setLevel(log_logging_level)
            logfile.setFormatter(logging.Formatter(fmt))
            logger.addHandler(logfile)

            start_msg = ("Logfile is '%s' with logging level of %s, "
                         "console logging level is %s"
                         % (log_filename,
                            logging.getLevelName(log_logging_level),
                            logging.getLevelName(console_logging_level)))
            logger.log(logging.INFO, start_msg,
                       extra={'mname': __name__, 'lnum': 0})

        # messages stop here, the root logger is the application's business
        logger.propagate = False

        # mark module as *setup*
        _setup = True

    return logger


def reset():
    """Remove handlers so the next log call picks up new module settings."""

    global _setup

    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    _setup = False


def log(msg, level=None):
    """Log a message at a particular loglevel.

    msg:    The message string to log.
    level:  The logging level to log with (defaults to console level).

    The first call to this method (by anybody) initializes logging and
    then logs the message.  Subsequent calls just log the message.
    """

    logger = _get_logger()

    # if logging level not supplied, assume console level
    if level is None:
        level = console_logging_level

    # get caller information - look back for first module != <this module name>
    frames = traceback.extract_stack()
    frames.reverse()
    mod_name = __name__.rsplit('.', 1)[-1]
    fname = mod_name
    lnum = 0
    for (fpath, lnum, _, _) in frames:
        fname = os.path.basename(fpath).rsplit('.', 1)[0]
        if fname != mod_name:
            break

    logger.log(level, msg, extra={'mname': fname, 'lnum': lnum})


def debug(msg=''):
    log(msg, logging.DEBUG)

def info(msg=''):
    log(msg, logging.INFO)

def warning(msg=''):
    log(msg, logging.WARNING)

def error(msg=''):
    log(msg, logging.ERROR)

def critical(msg=''):
    log(msg, logging.CRITICAL)
