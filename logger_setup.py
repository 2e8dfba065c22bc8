# logger_setup.py

import logging
import os
import json

LOGGER_NAME = "starfield"
LOG_FILE_NAME = "starfield.log"


def _read_log_settings(config_path):
    """Returns (run_id, level, format) from config.json. Missing keys raise KeyError."""
    with open(config_path, 'r') as f:
        config = json.load(f)
    log_config = config['logging']
    return config['run_id'], log_config['level'], log_config['format']


def _detach_handlers(logger: logging.Logger):
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(config_path='config.json', log_root='runs'):
    """
    Configures the "starfield" logger for one run.

    Output goes to the console and to <log_root>/<run_id>/starfield.log.
    The logger does not propagate, so pygame and other libraries keep
    their own logging. Handlers from an earlier call are closed and
    replaced.

    Data Contract:
    - Inputs:
        - config_path (str) - config.json with 'run_id' and a 'logging'
          section holding 'level' and 'format'.
        - log_root (str) - Parent directory of the per-run log directories.
    - Outputs: The configured logger.
    - Side Effects: Creates the run directory and opens the log file.
    """
    run_id, level, log_format = _read_log_settings(config_path)

    run_dir = os.path.join(log_root, run_id)
    os.makedirs(run_dir, exist_ok=True)
    log_file = os.path.join(run_dir, LOG_FILE_NAME)

    logger = logging.getLogger(LOGGER_NAME)
    _detach_handlers(logger)
    logger.setLevel(level)
    logger.propagate = False

    formatter = logging.Formatter(log_format)
    for handler in (logging.FileHandler(log_file), logging.StreamHandler()):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging to {log_file} (run '{run_id}', level {level}).")
    return logger
