"""Utilities package"""
from .config import config, Config
from .logger import logger, setup_logger
from .performance import monitor, PerformanceMonitor

__all__ = ["config", "Config", "logger", "setup_logger", "monitor", "PerformanceMonitor"]
