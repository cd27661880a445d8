"""
Package hooks system.

Packages reference their post-install/post-update hooks in their extra config:

    "extra": {
        "neos/flow": {
            "post-install": "Acme\\Setup::postInstall",
            "post-update": "Acme\\Setup::postUpdate"
        }
    }

The host application registers what may be called:
- registry.register("Acme\\Setup", Setup)          -> any public static method
- registry.register_hook("Acme\\Setup::warm", hook) -> one PackageHook or callable

Hooks take no arguments; return values are ignored.
"""

from hooks.base import PackageHook, HookRegistry, get_hook_registry, split_reference

__all__ = ["PackageHook", "HookRegistry", "get_hook_registry", "split_reference"]
