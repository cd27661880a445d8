import os
from pathlib import Path
from typing import Optional
from models.config import FlowPaths, InstallerSettings
from models.exceptions import InvalidConfigurationError, UnexpectedOperationError
from models.schemas import InstallEvent, PackageEvent, InstallOperation, UpdateOperation
from hooks.base import HookRegistry
from services.package_manager import PackageRegistry, FilesystemPackageManager
from services.scaffolder import PathScaffolder
from utils.logger import get_logger

logger = get_logger("flow_installer.installer")


class InstallerScripts:
    """
    Lifecycle hooks called by the package manager.

    Each entry point runs at most once per instance: the first successful
    call sets its guard and every later call returns immediately. A call that
    raises leaves the guard unset, so the package manager may try again.
    Nothing already written to disk is rolled back.
    """

    def __init__(
        self,
        hook_registry: HookRegistry,
        working_directory: Optional[Path] = None,
        package_registry: Optional[PackageRegistry] = None,
        settings: Optional[InstallerSettings] = None,
        paths: Optional[FlowPaths] = None
    ):
        self.hook_registry = hook_registry
        self.working_directory = Path(working_directory or os.getcwd())
        self.package_registry = package_registry
        self.settings = settings or InstallerSettings()
        self.paths = paths

        self.root_install_done = False
        self.package_install_done = False

    def run_root_install(self, event: InstallEvent):
        """
        Make sure required paths and files are available outside of packages.

        Runs on every install or update of the root project.

        Args:
            event: Root install event

        Raises:
            InvalidConfigurationError: If the named paths were already set up
                for a different working directory
            OSError: If scaffolding fails
        """
        if self.root_install_done:
            logger.debug("Root install already ran, skipping")
            return

        logger.info("=" * 60)
        logger.info(f"Root install in {event.working_directory}")
        logger.info("=" * 60)

        self._define_paths(event.working_directory)

        root = self.paths.root
        scaffolder = PathScaffolder(root)
        scaffolder.ensure_base_directories()
        scaffolder.copy_bundled_distribution(Path(self.settings.distribution_path))

        self._get_package_registry().rescan_packages()

        executable = root / self.settings.executable_name
        os.chmod(executable, self.settings.executable_mode)
        logger.info(f"✓ {self.settings.executable_name} set to {oct(self.settings.executable_mode)}")

        self.root_install_done = True
        logger.info("✓ Root install complete")

    def run_package_install(self, event: PackageEvent):
        """
        Copy distribution files and run hooks provided by an installed or updated package.

        Only the first package event handled by this instance does any work.

        Args:
            event: Package event

        Raises:
            UnexpectedOperationError: If the operation is neither install nor update
            InvalidConfigurationError: If a declared hook cannot be resolved
            OSError: If copying distribution files fails
        """
        if self.package_install_done:
            logger.debug("Package install already ran, skipping")
            return

        operation = event.operation
        if not isinstance(operation, (InstallOperation, UpdateOperation)):
            logger.error(f"Unsupported package operation: {type(operation).__name__}")
            raise UnexpectedOperationError(
                f'Handling of operation of type "{type(operation).__name__}" not supported',
                1348750840
            )

        if isinstance(operation, InstallOperation):
            package = operation.package
        else:
            package = operation.target_package

        logger.info(f"Package {operation.job_type}: {package.name} ({event.install_path})")

        target_root = self.paths.root if self.paths is not None else self.working_directory
        scaffolder = PathScaffolder(target_root)
        for resource_folder in package.installer_resource_folders:
            resource_directory = Path(event.install_path) / resource_folder.lstrip("/")
            scaffolder.copy_distribution_files(resource_directory)

        if isinstance(operation, InstallOperation) and package.post_install_reference is not None:
            self.hook_registry.invoke(package.post_install_reference)

        if isinstance(operation, UpdateOperation) and package.post_update_reference is not None:
            self.hook_registry.invoke(package.post_update_reference)

        self.package_install_done = True
        logger.info(f"✓ Package {operation.job_type} handled for {package.name}")

    def _define_paths(self, working_directory: Path):
        paths = FlowPaths.from_working_directory(working_directory)

        if self.paths is not None and self.paths != paths:
            logger.error(f"Application paths already defined for {self.paths.root}")
            raise InvalidConfigurationError(
                f"Application paths already defined for {self.paths.root}, "
                f"can not redefine them for {paths.root}"
            )

        self.paths = paths
        for name, value in paths.as_environment().items():
            logger.debug(f"{name}={value}")

    def _get_package_registry(self) -> PackageRegistry:
        if self.package_registry is None:
            self.package_registry = FilesystemPackageManager(
                self.paths.packages,
                self.paths.package_information_cache
            )
        return self.package_registry
