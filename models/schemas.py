from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any, Literal, Union
from pathlib import Path


RESOURCE_FOLDERS_NAMESPACE = "neos"
RESOURCE_FOLDERS_KEY = "installer-resource-folders"
SCRIPTS_NAMESPACE = "neos/flow"
POST_INSTALL_KEY = "post-install"
POST_UPDATE_KEY = "post-update"


class PackageMetadata(BaseModel):
    """
    Package as described by the package manager.

    Owned by the package manager and read-only here. Only the `extra` map is
    interpreted by the installer scripts.
    """
    name: str
    version: Optional[str] = None
    type: Optional[str] = None
    extra: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        frozen = True

    def _namespace(self, namespace: str) -> Dict[str, Any]:
        section = self.extra.get(namespace)
        return section if isinstance(section, dict) else {}

    @property
    def installer_resource_folders(self) -> List[str]:
        """Relative resource folders, in declaration order"""
        folders = self._namespace(RESOURCE_FOLDERS_NAMESPACE).get(RESOURCE_FOLDERS_KEY)
        if not folders:
            return []
        if isinstance(folders, str):
            return [folders]
        if isinstance(folders, dict):
            return list(folders.values())
        return list(folders)

    @property
    def post_install_reference(self) -> Optional[str]:
        return self._namespace(SCRIPTS_NAMESPACE).get(POST_INSTALL_KEY)

    @property
    def post_update_reference(self) -> Optional[str]:
        return self._namespace(SCRIPTS_NAMESPACE).get(POST_UPDATE_KEY)


class InstallOperation(BaseModel):
    """A package is installed for the first time"""
    job_type: Literal["install"] = "install"
    package: PackageMetadata

    class Config:
        frozen = True


class UpdateOperation(BaseModel):
    """A package is replaced by another version of itself"""
    job_type: Literal["update"] = "update"
    initial_package: PackageMetadata
    target_package: PackageMetadata

    class Config:
        frozen = True


class UninstallOperation(BaseModel):
    """A package is removed"""
    job_type: Literal["uninstall"] = "uninstall"
    package: PackageMetadata

    class Config:
        frozen = True


class MarkAliasInstalledOperation(BaseModel):
    """An alias of an already installed package is marked as installed"""
    job_type: Literal["markAliasInstalled"] = "markAliasInstalled"
    package: PackageMetadata

    class Config:
        frozen = True


Operation = Union[
    InstallOperation,
    UpdateOperation,
    UninstallOperation,
    MarkAliasInstalledOperation,
]


class InstallEvent(BaseModel):
    """Root project was installed or updated"""
    working_directory: Path

    class Config:
        frozen = True


class PackageEvent(BaseModel):
    """A single package was installed or updated"""
    operation: Operation = Field(discriminator="job_type")
    install_path: Path

    class Config:
        frozen = True
