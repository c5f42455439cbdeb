#!/usr/bin/env python3
"""Basic usage example"""

import logging

from logfacade import Log, LogCategory, LoggerBuilder, LogLevel
from logfacade.handlers import install_bridge

NETWORK = LogCategory("network")


def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_level(LogLevel.INFO)
        .with_category_level(NETWORK, LogLevel.DEBUG)
        .with_format("(%date) [(%level)] (%category) (%filename):(%line) (%message)")
        .with_stderr()
        .with_file("logs/example.jsonl", json=True)
        .with_application_start()
        .build())

    Log.enable_logging(logger)

    # Log messages
    Log.trace("This is trace")
    Log.debug("This is debug")
    Log.debug("Socket opened", NETWORK)
    Log.info("Application started")
    Log.notice("Configuration reloaded")
    Log.warn("This is warning")
    Log.error("This is error")
    Log.critical("This is critical")

    # Records from the standard logging package go through the same handlers
    install_bridge(logger, "example")
    logging.getLogger("example").warning("from stdlib", extra={"category": "bridge"})

    # Flush and shutdown
    logger.flush()
    logger.shutdown()

if __name__ == "__main__":
    main()
