"""
Entry points for the package manager.

The package manager calls post_update_and_install() once the root project was
installed or updated and post_package_update_and_install() for package events.
Both share one InstallerScripts instance for the lifetime of the process, so
each runs at most once per process. Hosts register their package hooks on
get_hook_registry() before the package manager starts firing events.
"""

import os
from pathlib import Path

from hooks.base import get_hook_registry
from models.config import InstallerSettings
from models.schemas import InstallEvent, PackageEvent
from services.installer import InstallerScripts
from utils.logger import setup_logging, get_logger

logger = get_logger("flow_installer")

# Singleton instance
_installer = None

def get_installer() -> InstallerScripts:
    """Get the process-wide installer scripts instance"""
    global _installer
    if _installer is None:
        settings = InstallerSettings.from_env()
        setup_logging(settings.log_level, settings.log_file)
        _installer = InstallerScripts(
            hook_registry=get_hook_registry(),
            working_directory=Path(os.getcwd()),
            settings=settings
        )
    return _installer


def post_update_and_install(event: InstallEvent = None):
    """Root project installed or updated"""
    if event is None:
        event = InstallEvent(working_directory=Path(os.getcwd()))
    get_installer().run_root_install(event)


def post_package_update_and_install(event: PackageEvent):
    """A package was installed or updated"""
    get_installer().run_package_install(event)


if __name__ == "__main__":
    post_update_and_install()
