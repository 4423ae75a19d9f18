"""Shared helpers: logging, ids, data folders."""

from courtgrouper.utils.logging import setup_logger
from courtgrouper.utils.utility_functions import app_data_dir, generate_id

__all__ = ["setup_logger", "app_data_dir", "generate_id"]
