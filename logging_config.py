"""Logging configuration for the rental management backend"""
import logging
import os
import sys


def setup_logging(level: str | None = None) -> None:
     """Configure application-wide logging"""
     log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

     logging.basicConfig(
          level=getattr(logging, log_level, logging.INFO),
          format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
          handlers=[logging.StreamHandler(sys.stdout)],
     )
