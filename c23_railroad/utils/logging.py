"""
Logging setup for diagram export runs.
"""

import logging
import re
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


def run_name_for(html_path: Optional[str], default: str = "render") -> str:
    """
    Derive a file-system safe run name from the exported page's path.

    ``build/c23-syntax-diagrams.html`` becomes ``c23-syntax-diagrams``.
    """
    if not html_path:
        return default
    stem = re.sub(r"[^\w.-]+", "_", Path(html_path).stem).strip("._")
    return stem or default


def setup_logging(
    log_dir: str = "logs",
    log_level: str = "INFO",
    log_to_file: bool = True,
    run_name: str = "render"
) -> logging.Logger:
    """
    Configure the root logger for one export run.

    Console output shows only level and message. With ``log_to_file`` a
    ``{run_name}_{timestamp}.log`` file in ``log_dir`` also receives DEBUG
    records, each tagged with the run name.

    Args:
        log_dir: Directory for the run's log file (created on demand)
        log_level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to also write the run's log file
        run_name: Prefix of the log file and tag in its records

    Returns:
        The configured root logger
    """
    level = getattr(logging, log_level.upper())

    logger = logging.getLogger()
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console_handler)

    if not log_to_file:
        logger.setLevel(level)
        return logger

    # The file keeps debug records even when the console is quieter.
    logger.setLevel(min(level, logging.DEBUG))

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_file = log_dir / f"{run_name}_{timestamp}.log"

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s - ' + run_name.replace('%', '%%') + ' - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(file_handler)
    logger.info(f"Logging run '{run_name}' to file: {log_file}")

    return logger
