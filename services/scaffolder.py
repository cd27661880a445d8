from pathlib import Path
from utils.files import create_directory_recursively, copy_directory_recursively
from utils.logger import get_logger

logger = get_logger("flow_installer.scaffolder")

ESSENTIALS_PATH = Path("Distribution") / "Essentials"
DEFAULTS_PATH = Path("Distribution") / "Defaults"
BASE_DIRECTORIES = ("Configuration", "Data")


class PathScaffolder:
    """
    Puts directories and distribution files in place inside the application root.

    Distribution trees come in two flavours:
    - Essentials: copied only where the destination file does not exist yet
    - Defaults: copied over whatever is at the destination
    """

    def __init__(self, working_directory: Path):
        self.working_directory = Path(working_directory)

    def ensure_base_directories(self):
        """Ensure Configuration/ and Data/ exist below the working directory"""
        for name in BASE_DIRECTORIES:
            create_directory_recursively(self.working_directory / name)
            logger.info(f"✓ Directory ensured: {name}/")

    def copy_bundled_distribution(self, installer_directory: Path):
        """
        Copy the distribution bundled with the framework itself.

        Both trees must exist; a missing one is an error.

        Args:
            installer_directory: Directory containing Distribution/Essentials and
                Distribution/Defaults, relative to the working directory or absolute

        Raises:
            FileNotFoundError: If either tree is missing
        """
        installer_directory = self.working_directory / installer_directory

        self._copy_essentials(installer_directory / ESSENTIALS_PATH)
        self._copy_defaults(installer_directory / DEFAULTS_PATH)

    def copy_distribution_files(self, resource_directory: Path):
        """
        Copy any distribution files shipped in a package resource folder.

        Missing Essentials or Defaults trees are skipped. Copy errors propagate.

        Args:
            resource_directory: Directory that may contain Distribution/Essentials
                and/or Distribution/Defaults
        """
        resource_directory = Path(resource_directory)

        essentials = resource_directory / ESSENTIALS_PATH
        if essentials.is_dir():
            self._copy_essentials(essentials)

        defaults = resource_directory / DEFAULTS_PATH
        if defaults.is_dir():
            self._copy_defaults(defaults)

    def _copy_essentials(self, source: Path):
        written = copy_directory_recursively(
            source,
            self.working_directory,
            keep_existing_files=True,
            copy_dot_files=True
        )
        logger.info(f"✓ Essentials copied from {source} ({written} new file(s))")

    def _copy_defaults(self, source: Path):
        written = copy_directory_recursively(
            source,
            self.working_directory,
            keep_existing_files=False,
            copy_dot_files=True
        )
        logger.info(f"✓ Defaults copied from {source} ({written} file(s))")
