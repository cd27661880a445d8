"""
Installer configuration.

FlowPaths holds the named application paths derived from the working
directory. InstallerSettings holds everything that can be tuned from the
environment.
"""

import os
from pathlib import Path
from typing import Dict, Optional
from pydantic import BaseModel

from utils.files import unix_style_path


DEFAULT_DISTRIBUTION_PATH = "Packages/Framework/Neos.Flow/Resources/Private/Installer"
DEFAULT_EXECUTABLE_NAME = "flow"
PACKAGE_INFORMATION_CACHE_FILENAME = "PackageInformationCache.yaml"


class FlowPaths(BaseModel):
    """The four named paths every other part of the application relies on"""
    root: Path
    packages: Path
    configuration: Path
    temporary_base: Path

    class Config:
        frozen = True

    @classmethod
    def from_working_directory(cls, working_directory: Path) -> "FlowPaths":
        """
        Derive all named paths from a working directory.

        Args:
            working_directory: Root of the application

        Returns:
            FlowPaths rooted at the given directory
        """
        root = Path(working_directory).resolve()
        return cls(
            root=root,
            packages=root / "Packages",
            configuration=root / "Configuration",
            temporary_base=root / "Data" / "Temporary",
        )

    @property
    def package_information_cache(self) -> Path:
        return self.temporary_base / PACKAGE_INFORMATION_CACHE_FILENAME

    def as_environment(self) -> Dict[str, str]:
        """Render the paths the way FLOW_PATH_* variables are spelled"""
        return {
            "FLOW_PATH_ROOT": unix_style_path(self.root) + "/",
            "FLOW_PATH_PACKAGES": unix_style_path(self.packages) + "/",
            "FLOW_PATH_CONFIGURATION": unix_style_path(self.configuration) + "/",
            "FLOW_PATH_TEMPORARY_BASE": unix_style_path(self.temporary_base),
        }


class InstallerSettings(BaseModel):
    """Tunables for the installer scripts"""
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    # Relative to the working directory; holds Distribution/Essentials and Distribution/Defaults
    distribution_path: str = DEFAULT_DISTRIBUTION_PATH

    executable_name: str = DEFAULT_EXECUTABLE_NAME
    executable_mode: int = 0o755

    @classmethod
    def from_env(cls) -> "InstallerSettings":
        """Build settings from FLOW_INSTALLER_* environment variables"""
        log_file = os.getenv("FLOW_INSTALLER_LOG_FILE")
        return cls(
            log_level=os.getenv("FLOW_INSTALLER_LOG_LEVEL", "INFO").upper(),
            log_file=Path(log_file) if log_file else None,
            distribution_path=os.getenv(
                "FLOW_INSTALLER_DISTRIBUTION_PATH", DEFAULT_DISTRIBUTION_PATH
            ),
            executable_name=os.getenv("FLOW_INSTALLER_EXECUTABLE", DEFAULT_EXECUTABLE_NAME),
        )
