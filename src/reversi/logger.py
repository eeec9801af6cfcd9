"""
Logging utilities for the Reversi engine.
"""
import os
import logging
from datetime import datetime
from typing import Dict, Any, Optional

from .config import Config

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Logger:
    """Logger for games, matches and search diagnostics."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_dir = os.path.join(self.log_dir, self.run_name)
        level = getattr(logging, config.logging.log_level.upper(), None)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {config.logging.log_level}")

        formatter = logging.Formatter(FORMAT)
        self.handlers = []

        # Set up console logging
        self.console = logging.StreamHandler()
        self.console.setLevel(level)
        self.console.setFormatter(formatter)
        self.handlers.append(self.console)

        # Set up file logging
        self.log_file = None
        if config.logging.log_to_file:
            os.makedirs(self.run_dir, exist_ok=True)
            self.log_file = os.path.join(self.run_dir, 'reversi.log')
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        # Configure root logger
        self.logger = logging.getLogger()
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

        if self.log_file:
            self.save_config()

    def save_config(self):
        """Save the configuration next to the log file."""
        self.config.save(os.path.join(self.run_dir, 'config.json'))

    def log_metrics(self, metrics: Dict[str, Any], step: int, prefix: str = ''):
        """
        Log metrics to the console and the log file.

        Args:
            metrics: Dictionary of metrics to log
            step: Current step (game number, depth, ...)
            prefix: Prefix for metric names (e.g., 'match/')
        """
        log_str = f"Step {step}:"
        for name, value in metrics.items():
            if isinstance(value, float):
                log_str += f" {prefix}{name}={value:.4f}"
            else:
                log_str += f" {prefix}{name}={value}"
        self.logger.info(log_str)

    def close(self):
        """Detach and close the handlers installed by this logger."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
