"""Ambient platform probes for the running process runtime"""
import abc
import platform as _platform
import sys
from typing import Optional

from .semantic_conventions import UNKNOWN


class RuntimePlatform(abc.ABC):
    """Source of the raw runtime facts a detector reports on"""

    @abc.abstractmethod
    def framework_description(self) -> str:
        """Free-form runtime description, e.g. '.NET Framework 4.8.9195.0'"""
        pass

    @abc.abstractmethod
    def runtime_version(self) -> str:
        """Structured runtime version reported by the platform itself"""
        pass

    @property
    @abc.abstractmethod
    def family(self) -> str:
        """Operating system family the runtime is hosted on"""
        pass

    @property
    def is_windows(self) -> bool:
        return self.family == "win32"


class InterpreterPlatform(RuntimePlatform):
    """Reports on the Python interpreter running this process"""

    def framework_description(self) -> str:
        return f"{_platform.python_implementation()} {_platform.python_version()}"

    def runtime_version(self) -> str:
        info = sys.version_info
        return f"{info.major}.{info.minor}.{info.micro}"

    @property
    def family(self) -> str:
        return sys.platform


class StaticPlatform(RuntimePlatform):
    """Fixed runtime facts, for hosts that already know what they run on"""

    def __init__(self, description: str, version: Optional[str] = None,
                 family: Optional[str] = None):
        self.description = description
        self.version = version
        self._family = family or sys.platform

    def framework_description(self) -> str:
        return self.description

    def runtime_version(self) -> str:
        # Without an explicit version there is nothing structured to report
        return self.version if self.version is not None else UNKNOWN

    @property
    def family(self) -> str:
        return self._family

    def __repr__(self) -> str:
        return (f"StaticPlatform(description={self.description!r}, "
                f"version={self.version!r}, family={self._family!r})")
