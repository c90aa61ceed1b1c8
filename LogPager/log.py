"""
Logging setup for host applications

The LogPager modules only create loggers; handlers are left to the host.
"""
import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def configure_logging(level: int = logging.INFO,
                      log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    Attach a handler to the LogPager logger
    
    Args:
        level: Logging level for the package logger and its handler
        log_file: File to write to; logs go to stderr when omitted
        
    Returns:
        The configured "LogPager" logger
    """
    logger = logging.getLogger('LogPager')
    logger.setLevel(level)
    
    # Create handler if not already exists
    if not logger.handlers:
        if log_file is not None:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(log_path)
        else:
            handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    
    return logger
