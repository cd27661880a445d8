"""
Package registry used by the root install.

The installer only needs one thing from the package manager: a rescan after
the distribution files are in place. FilesystemPackageManager implements that
by collecting the composer manifests below the packages path into a YAML
information cache.
"""

import json
import yaml
from pathlib import Path
from typing import Any, Dict, Protocol
from utils.files import unix_style_path
from utils.logger import get_logger

logger = get_logger("flow_installer.package_manager")

MANIFEST_FILENAME = "composer.json"


class PackageRegistry(Protocol):
    """Anything that can rebuild its view of the installed packages"""

    def rescan_packages(self) -> Any:
        ...


class FilesystemPackageManager:
    """Scans Packages/<Category>/<Package>/composer.json and caches the result"""

    def __init__(self, packages_path: Path, cache_path: Path):
        self.packages_path = Path(packages_path)
        self.cache_path = Path(cache_path)

    def rescan_packages(self) -> Dict[str, Any]:
        """
        Rebuild the package information cache.

        Returns:
            The package states written to the cache
        """
        logger.info(f"Rescanning packages in {self.packages_path}")

        packages: Dict[str, Dict[str, Any]] = {}
        for manifest_path in self._find_manifests():
            manifest = self._read_manifest(manifest_path)
            if manifest is None:
                continue

            composer_name = manifest.get("name")
            if not composer_name:
                logger.warning(f"Skipping manifest without name: {manifest_path}")
                continue

            package_path = manifest_path.parent.relative_to(self.packages_path)
            packages[composer_name] = {
                "composerName": composer_name,
                "packagePath": unix_style_path(package_path) + "/",
                "type": manifest.get("type"),
                "version": manifest.get("version"),
            }

        states = {"packages": dict(sorted(packages.items()))}

        self.cache_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.cache_path, "w") as f:
            yaml.safe_dump(states, f, default_flow_style=False, sort_keys=False)

        logger.info(f"✓ Package information cache written: {len(packages)} package(s)")
        return states

    def load_package_states(self) -> Dict[str, Any]:
        """
        Read the package information cache.

        Returns:
            The cached package states, or an empty mapping if there is no cache
        """
        if not self.cache_path.exists():
            return {}

        with open(self.cache_path, "r") as f:
            return yaml.safe_load(f) or {}

    def _find_manifests(self):
        if not self.packages_path.is_dir():
            logger.warning(f"Packages directory not found: {self.packages_path}")
            return []

        manifests = list(self.packages_path.glob(f"*/{MANIFEST_FILENAME}"))
        manifests.extend(self.packages_path.glob(f"*/*/{MANIFEST_FILENAME}"))
        return sorted(manifests)

    def _read_manifest(self, manifest_path: Path):
        try:
            with open(manifest_path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Skipping unreadable manifest {manifest_path}: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"Skipping manifest that is not an object: {manifest_path}")
            return None
        return data
