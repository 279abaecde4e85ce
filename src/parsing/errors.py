"""
Scene load errors

Every fatal problem with a scene description is raised as a SceneError
subclass. Field-level problems (unknown color, unparsable number) are
never raised - they fall back to black / 0.
"""

from typing import Optional

from models.enums import SceneErrorKind


class SceneError(Exception):
    """Base class for fatal scene description errors"""
    def __init__(
        self,
        kind: SceneErrorKind,
        message: str,
        details: Optional[dict] = None,
    ):
        self.kind = kind
        self.code = kind.name
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def with_details(self, **details) -> 'SceneError':
        """Attach extra context (line number, scene identifier) while propagating"""
        self.details.update(details)
        return self

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({extra})"


class SceneParseError(SceneError):
    """A single figure or animation line could not be turned into a value"""


class SceneFormatError(SceneError):
    """Scene block layout is wrong: bad header or fewer lines than declared"""


class SceneResourceNotFoundError(SceneError):
    """Named scene block does not exist"""
    def __init__(self, identifier: str, location: Optional[str] = None):
        details = {"identifier": identifier}
        if location is not None:
            details["location"] = location
        super().__init__(
            SceneErrorKind.MISSING_RESOURCE,
            f"Scene '{identifier}' not found",
            details,
        )


class SceneResourceUnreadableError(SceneError):
    """Named scene block exists but could not be read as UTF-8 text"""
    def __init__(self, identifier: str, location: str, cause: Exception):
        super().__init__(
            SceneErrorKind.UNREADABLE_RESOURCE,
            f"Scene '{identifier}' could not be read",
            {
                "identifier": identifier,
                "location": location,
                "error_type": type(cause).__name__,
                "error": str(cause),
            },
        )
