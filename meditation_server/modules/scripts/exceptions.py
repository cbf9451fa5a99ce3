"""Script domain specific exceptions."""


class ScriptError(Exception):
    """Base class for meditation script domain errors."""


class UnauthenticatedError(ScriptError):
    """Raised when an operation is attempted without a caller identity."""


class InvalidScriptInputError(ScriptError):
    """Raised when a payload breaks a field or pagination rule."""


class ScriptNotFoundError(ScriptError):
    """Raised when a script does not exist or belongs to another account."""


class SectionNotFoundError(ScriptError):
    """Raised when the requested section cannot be found."""


class SectionForbiddenError(ScriptError):
    """Raised when a section is addressed through a script it does not belong to."""
