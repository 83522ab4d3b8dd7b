"""
Logging configuration for the Sumo roads backend
"""
import logging

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

def setup_logging():
    """Configure root logging once; LOG_LEVEL names a stdlib level"""
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format=LOG_FORMAT)

def get_logger(name: str = "sumo") -> logging.Logger:
    return logging.getLogger(name)

log = get_logger("sumo")
