"""
Contracts shared across pipeline components
"""

from dataclasses import dataclass
from typing import Dict

from contentcraft.core import ProviderError, ProviderErrorKind


@dataclass(frozen=True)
class ProviderSoftFailure:
    """A provider failure absorbed by a component fallback.

    The run continues; the marker travels with the result so the caller
    can tell the user that degraded or placeholder content was used.
    """
    component: str
    kind: ProviderErrorKind
    message: str

    @classmethod
    def from_error(cls, component: str, error: ProviderError) -> "ProviderSoftFailure":
        return cls(component=component, kind=error.kind, message=str(error))

    def describe(self) -> str:
        if self.component == "video_synthesis":
            if self.kind == ProviderErrorKind.QUOTA:
                return "Video provider credits are exhausted; a placeholder video was used."
            return "Video provider was unavailable; a placeholder video was used."
        if self.component == "compliance":
            return "Compliance review service was unavailable; a limited local check was used."
        return f"{self.component} degraded: {self.message}"

    def to_dict(self) -> Dict[str, str]:
        return {"component": self.component, "kind": self.kind.value, "message": self.message}
