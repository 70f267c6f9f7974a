"""OpenTelemetry semantic conventions for process runtime resource attributes"""
from typing import Tuple


UNKNOWN = "unknown"


class ProcessRuntimeAttributes:
    """Attribute keys reported by the process runtime detector"""

    PROCESS_RUNTIME_DESCRIPTION = "process.runtime.description"
    PROCESS_RUNTIME_NAME = "process.runtime.name"
    PROCESS_RUNTIME_VERSION = "process.runtime.version"

    # Order in which attributes are attached to the resource
    ALL: Tuple[str, str, str] = (
        PROCESS_RUNTIME_DESCRIPTION,
        PROCESS_RUNTIME_NAME,
        PROCESS_RUNTIME_VERSION,
    )
