"""Shared fixtures for the installer test suite."""

import json
from pathlib import Path

import pytest

from hooks.base import HookRegistry
from models.config import DEFAULT_DISTRIBUTION_PATH
from models.schemas import PackageMetadata


def write_file(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


class Foo:
    """Hook target counting how often its methods run"""

    calls = []

    @staticmethod
    def setup():
        Foo.calls.append("setup")
        return "ignored"

    @staticmethod
    def migrate():
        Foo.calls.append("migrate")

    def needs_instance(self):
        Foo.calls.append("needs_instance")


class FakePackageRegistry:
    """Records rescans together with what the working directory looked like"""

    def __init__(self, working_directory: Path):
        self.working_directory = working_directory
        self.rescans = []

    def rescan_packages(self):
        self.rescans.append({
            "configuration_exists": (self.working_directory / "Configuration").is_dir(),
            "flow_exists": (self.working_directory / "flow").exists(),
        })


@pytest.fixture(autouse=True)
def reset_foo_calls():
    Foo.calls = []
    yield
    Foo.calls = []


@pytest.fixture
def workdir(tmp_path) -> Path:
    directory = tmp_path / "app"
    directory.mkdir()
    return directory


@pytest.fixture
def bundled_distribution(workdir) -> Path:
    """Framework package with its bundled Essentials and Defaults trees"""
    installer = workdir / DEFAULT_DISTRIBUTION_PATH
    essentials = installer / "Distribution" / "Essentials"
    defaults = installer / "Distribution" / "Defaults"

    write_file(essentials / "flow", "#!/usr/bin/env php\n")
    write_file(essentials / "Web" / "index.php", "<?php // essentials\n")
    write_file(essentials / "Web" / ".htaccess", "RewriteEngine On\n")
    write_file(defaults / "Configuration" / "Settings.yaml.example", "Neos: {}\n")

    write_file(
        workdir / "Packages" / "Framework" / "Neos.Flow" / "composer.json",
        json.dumps({"name": "neos/flow", "type": "neos-framework", "version": "8.3.0"})
    )
    return installer


@pytest.fixture
def hook_registry() -> HookRegistry:
    registry = HookRegistry()
    registry.register("Foo", Foo)
    return registry


@pytest.fixture
def fake_package_registry(workdir) -> FakePackageRegistry:
    return FakePackageRegistry(workdir)


@pytest.fixture
def package_dir(tmp_path) -> Path:
    """Installed package with a res/ resource folder"""
    directory = tmp_path / "pkg"
    write_file(directory / "res" / "Distribution" / "Defaults" / "config.yml", "source: package\n")
    write_file(directory / "res" / "Distribution" / "Essentials" / "essential.txt", "from package\n")
    return directory


def make_package(name: str = "acme/foo", **extra) -> PackageMetadata:
    return PackageMetadata(name=name, extra=extra)
