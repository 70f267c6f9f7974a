"""Process runtime resource detector"""
from typing import Optional, Tuple

from opentelemetry.sdk.resources import Resource, ResourceDetector

from config import Config
from .resolvers import VersionResolver, select_resolver
from .runtime_platform import InterpreterPlatform, RuntimePlatform
from .semantic_conventions import UNKNOWN, ProcessRuntimeAttributes


def parse_description(description: str) -> Tuple[str, str]:
    """Split a runtime description into (name, candidate version)

    The expected format is '{Name With Optional Spaces} {Version}', e.g.
    '.NET Framework 4.8.9195.0' -> ('.NET Framework', '4.8.9195.0').
    Without a space both parts are 'unknown'.
    """
    last_space = description.rfind(" ")
    if last_space == -1:
        return UNKNOWN, UNKNOWN
    return description[:last_space], description[last_space + 1:]


class ProcessRuntimeDetector(ResourceDetector):
    """Detect process.runtime.* resource attributes for the current process"""

    def __init__(self, platform: Optional[RuntimePlatform] = None,
                 resolver: Optional[VersionResolver] = None,
                 config: Optional[Config] = None, raise_on_error: bool = False):
        super().__init__(raise_on_error=raise_on_error)
        self.platform = platform or InterpreterPlatform()
        self.resolver = resolver or select_resolver(config, self.platform)

    def detect(self) -> Resource:
        """Build a fresh resource with description, name and version"""
        description = self.platform.framework_description()
        name, candidate = parse_description(description)
        version = self.resolver.resolve(self.platform, candidate)

        attributes = dict(zip(ProcessRuntimeAttributes.ALL, (description, name, version)))
        return Resource(attributes)
