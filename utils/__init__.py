from utils.logger import setup_logging, get_logger
from utils.files import unix_style_path, create_directory_recursively, copy_directory_recursively

__all__ = [
    "setup_logging",
    "get_logger",
    "unix_style_path",
    "create_directory_recursively",
    "copy_directory_recursively",
]
