"""
Base classes and the registry for package hooks.

Packages declare post-install/post-update hooks as "Type::method" references
in their extra config. The host application registers the types (or single
hooks) it is willing to run; references are resolved against that registry
only and never imported from disk.
"""

import inspect
from typing import Any, Callable, Dict, List, Optional, Union
from models.exceptions import InvalidConfigurationError
from utils.logger import get_logger

logger = get_logger("flow_installer.hooks")

REFERENCE_SEPARATOR = "::"


class PackageHook:
    """
    Base class for hooks registered under a full reference.

    Subclasses implement run(). It is called without arguments and its
    return value is ignored.
    """

    def run(self) -> None:
        raise NotImplementedError


HookTarget = Union[PackageHook, Callable[[], Any]]


def split_reference(reference: str) -> tuple:
    """
    Split a hook reference into type name and method name.

    Args:
        reference: Reference like "Acme\\Setup::postInstall"

    Returns:
        Tuple of (type_name, method_name), split on the first "::"

    Raises:
        InvalidConfigurationError: If the separator is missing
    """
    type_name, separator, method_name = reference.partition(REFERENCE_SEPARATOR)
    if not separator:
        raise InvalidConfigurationError(
            f'Hook reference "{reference}" is not of the form "Type::method"',
            1348751076
        )
    return type_name, method_name


def _requires_arguments(func: Callable) -> bool:
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return False

    for parameter in sig.parameters.values():
        if parameter.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        if parameter.default is inspect.Parameter.empty:
            return True
    return False


class HookRegistry:
    """
    Resolves and invokes hook references.

    Two kinds of entries are supported:
    - types: a class, module or object registered under a type name; any public
      zero-argument callable on it is addressable as "TypeName::method"
    - hooks: a PackageHook or zero-argument callable registered under a full
      reference, which takes precedence over types
    """

    def __init__(self):
        self._types: Dict[str, Any] = {}
        self._hooks: Dict[str, HookTarget] = {}

    def register(self, type_name: str, target: Any) -> None:
        """
        Register a type whose methods may be referenced by packages.

        Args:
            type_name: Name used on the left of "::"
            target: Class, module or object providing the methods
        """
        if REFERENCE_SEPARATOR in type_name:
            raise InvalidConfigurationError(
                f'Type name "{type_name}" must not contain "{REFERENCE_SEPARATOR}"'
            )
        self._types[type_name] = target
        logger.debug(f"Registered hook type: {type_name}")

    def register_hook(self, reference: str, hook: HookTarget) -> None:
        """
        Register a single hook under a full "Type::method" reference.

        Args:
            reference: Reference as it appears in package metadata
            hook: PackageHook instance or zero-argument callable
        """
        split_reference(reference)

        if not isinstance(hook, PackageHook) and not callable(hook):
            raise InvalidConfigurationError(f'Hook for "{reference}" is not callable')

        self._hooks[reference] = hook
        logger.debug(f"Registered hook: {reference}")

    def known_types(self) -> List[str]:
        """List registered type names, including those of single hooks"""
        names = set(self._types)
        names.update(split_reference(reference)[0] for reference in self._hooks)
        return sorted(names)

    def resolve(self, reference: str) -> Callable[[], Any]:
        """
        Resolve a reference to a zero-argument callable without calling it.

        Args:
            reference: "Type::method" reference

        Returns:
            The callable the reference points to

        Raises:
            InvalidConfigurationError: If the reference is malformed, the type
                is unknown or the method cannot be called without arguments
        """
        type_name, method_name = split_reference(reference)

        hook = self._hooks.get(reference)
        if hook is not None:
            return hook.run if isinstance(hook, PackageHook) else hook

        target = self._types.get(type_name)
        if target is None:
            raise InvalidConfigurationError(
                f'Type "{type_name}" is not registered, can not call "{reference}"',
                1348751076
            )

        method: Optional[Callable] = None
        if method_name and not method_name.startswith("_"):
            method = getattr(target, method_name, None)

        if method is None or not callable(method) or _requires_arguments(method):
            raise InvalidConfigurationError(
                f'Method "{reference}" is not callable',
                1348751082
            )

        return method

    def invoke(self, reference: str) -> None:
        """
        Resolve a reference and call it without arguments.

        The return value of the hook is ignored and exceptions raised by the
        hook propagate unchanged.

        Args:
            reference: "Type::method" reference
        """
        try:
            hook = self.resolve(reference)
        except InvalidConfigurationError as e:
            logger.error(f"Cannot run package hook {reference}: {e}")
            raise

        logger.info(f"Running package hook: {reference}")
        hook()
        logger.info(f"✓ Package hook completed: {reference}")


# Singleton instance
_hook_registry = None

def get_hook_registry() -> HookRegistry:
    """Get the global hook registry instance"""
    global _hook_registry
    if _hook_registry is None:
        _hook_registry = HookRegistry()
    return _hook_registry
