"""Runtime version resolution strategies

The standard path trusts the platform's own structured version. The legacy
path targets the .NET Framework family on Windows, whose description string
carries a build number rather than the product version, so the product
version is looked up from the installer's release key in the registry.
"""
import abc
from typing import Any, Optional, Tuple

from config import Config, ResolverMode
from logging_config import get_logger, log_resolver_selected
from .runtime_platform import InterpreterPlatform, RuntimePlatform
from .semantic_conventions import UNKNOWN

logger = get_logger(__name__)


NDP_SUBKEY = r"SOFTWARE\Microsoft\NET Framework Setup\NDP\v4\Full"
RELEASE_VALUE_NAME = "Release"

# Minimum release key per version, highest first. Checking with >= keeps
# newer, unlisted releases mapped to the newest known version.
RELEASE_KEY_VERSIONS: Tuple[Tuple[int, str], ...] = (
    (533320, "4.8.1"),
    (528040, "4.8"),
    (461808, "4.7.2"),
    (461308, "4.7.1"),
    (460798, "4.7"),
    (394802, "4.6.2"),
    # Deprecated, no longer reported:
    # (394254, "4.6.1"), (393295, "4.6"), (379893, "4.5.2"),
    # (378675, "4.5.1"), (378389, "4.5")
)


def check_for_45_plus_version(release_key: int) -> Optional[str]:
    """Map a .NET Framework release key to its product version

    Returns None when the key is below every known threshold. A present
    release key implies 4.5 or later is installed, so this should not
    happen in practice, but callers must still handle it.
    """
    for threshold, version in RELEASE_KEY_VERSIONS:
        if release_key >= threshold:
            return version
    return None


def read_release_key(subkey: str = NDP_SUBKEY, registry: Any = None) -> Optional[int]:
    """Read the integer release key from HKLM in the 32-bit registry view

    Never raises. Every failure (no registry on this OS, missing key or
    value, access denied, non-integer data) yields None.

    ``registry`` defaults to the ``winreg`` module and may be any object
    exposing the same API.
    """
    try:
        if registry is None:
            import winreg as registry

        access = registry.KEY_READ | registry.KEY_WOW64_32KEY
        with registry.OpenKey(registry.HKEY_LOCAL_MACHINE, subkey.rstrip("\\"), 0, access) as key:
            value, _ = registry.QueryValueEx(key, RELEASE_VALUE_NAME)

        # REG_DWORD comes back as int; anything else is not a release key
        if not isinstance(value, int) or isinstance(value, bool):
            return None
        return value
    except Exception:
        return None


def read_release_version(subkey: str = NDP_SUBKEY, registry: Any = None) -> Optional[str]:
    """Resolve the installed .NET Framework version from the registry, or None"""
    release_key = read_release_key(subkey, registry)
    if release_key is None:
        return None
    return check_for_45_plus_version(release_key)


class VersionResolver(abc.ABC):
    """Strategy producing the final process.runtime.version value"""

    name: str = "base"

    @abc.abstractmethod
    def resolve(self, platform: RuntimePlatform, candidate: str) -> str:
        """Return the runtime version

        ``candidate`` is the version parsed from the description string.
        Implementations never raise and never return an empty value.
        """
        pass


class StandardResolver(VersionResolver):
    """Uses the platform's structured version API, ignoring the description"""

    name = ResolverMode.STANDARD.value

    def resolve(self, platform: RuntimePlatform, candidate: str) -> str:
        return platform.runtime_version() or UNKNOWN


class LegacyRegistryResolver(VersionResolver):
    """Registry release key first, then the parsed candidate, then 'unknown'"""

    name = ResolverMode.LEGACY_REGISTRY.value

    def __init__(self, subkey: str = NDP_SUBKEY, registry: Any = None):
        self.subkey = subkey
        self.registry = registry

    def resolve(self, platform: RuntimePlatform, candidate: str) -> str:
        version = read_release_version(self.subkey, self.registry)
        if version:
            return version
        return candidate or UNKNOWN


def is_legacy_platform(platform: RuntimePlatform) -> bool:
    """Check if the platform is the .NET Framework family on Windows"""
    return platform.is_windows and platform.framework_description().startswith(".NET Framework")


def select_resolver(config: Optional[Config] = None, platform: Optional[RuntimePlatform] = None) -> VersionResolver:
    """Pick the version resolver once, at startup

    Settings come from ``config``, or from the environment when no config
    is given.
    """
    if config is None:
        config = Config()
    configured = ResolverMode(config.runtime_version_resolver)
    mode = configured
    subkey = config.release_key_subkey

    if mode == ResolverMode.AUTO:
        if platform is None:
            platform = InterpreterPlatform()
        mode = ResolverMode.LEGACY_REGISTRY if is_legacy_platform(platform) else ResolverMode.STANDARD

    if mode == ResolverMode.LEGACY_REGISTRY:
        resolver: VersionResolver = LegacyRegistryResolver(subkey=subkey)
    else:
        resolver = StandardResolver()

    log_resolver_selected(logger, resolver.name, configured.value)
    return resolver
