from services.scaffolder import PathScaffolder
from services.package_manager import PackageRegistry, FilesystemPackageManager
from services.installer import InstallerScripts

__all__ = ["PathScaffolder", "PackageRegistry", "FilesystemPackageManager", "InstallerScripts"]
