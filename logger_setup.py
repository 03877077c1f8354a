# logger_setup.py

import logging
import os
import json

LOGGER_NAME = "spiral"


def load_config(config_path='config.json'):
    """Loads the JSON run configuration."""
    logger = logging.getLogger(LOGGER_NAME)
    try:
        with open(config_path, 'r') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"Configuration file not found at {config_path}.")
        raise
    except json.JSONDecodeError:
        logger.error(f"Error decoding JSON from {config_path}.")
        raise


def setup_logging(config, runs_dir='runs'):
    """
    Sets up logging for the application.

    Creates a run-specific log directory and configures a dedicated
    application logger (not the root logger) to output to both the console
    and a log file. This keeps pygame and numba chatter out of our logs.

    Data Contract:
    - Inputs:
        - config (dict) - The loaded run configuration.
        - runs_dir (str) - Parent directory for per-run log folders.
    - Outputs: The configured logger.
    - Side Effects:
        - Configures the "spiral" logger.
        - Creates directories for log files.
    - Invariants: Assumes the config contains 'run_id' and a 'logging' dictionary
      with 'level' and 'format'.
    """
    run_id = config['run_id']
    log_config = config['logging']

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_config['level'])
    # Stay off the root logger so pygame/numba output never mixes in.
    logger.propagate = False

    # One folder per run under runs_dir
    log_dir = os.path.join(runs_dir, run_id)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'simulation.log')

    # Re-running setup replaces handlers rather than stacking them.
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(log_config['format'])
    for handler in (logging.FileHandler(log_file), logging.StreamHandler()):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized. Run ID: {run_id}. Log file: {log_file}")
    return logger
