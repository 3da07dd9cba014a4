#!/usr/bin/env python3
"""Basic usage example"""

import time

from tagged_logger import Logger, LoggerBuilder, LogLevel


def load_config():
    try:
        raise FileNotFoundError("config.toml")
    except FileNotFoundError as exc:
        raise RuntimeError("could not load configuration") from exc


def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_module("example")
        .with_level(LogLevel.DEBUG)
        .build())

    # Log messages
    logger.debug("This is debug")
    logger.info("Application started", {"port": 3000, "workers": 4})
    logger.warn("This is warning")

    try:
        load_config()
    except RuntimeError as exc:
        logger.error("Startup failed:", exc)

    # Timer tags messages with cumulative elapsed time
    timer = logger.timer()
    time.sleep(0.05)
    timer.info("Warm-up finished")

    # Same calls as JSON lines
    json_logger = Logger(module="example", output_format="jsonl")
    json_logger.info("Server started", {"port": 3000})
    json_logger.timer(format="raw").info("Task done", {"ok": True})


if __name__ == "__main__":
    main()
