"""Translation of domain errors into HTTP responses."""

from fastapi import HTTPException, status

from meditation_server.modules.scripts.exceptions import (
    InvalidScriptInputError,
    ScriptError,
    ScriptNotFoundError,
    SectionForbiddenError,
    SectionNotFoundError,
    UnauthenticatedError,
)

_STATUS_BY_ERROR: dict[type[ScriptError], int] = {
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
    InvalidScriptInputError: status.HTTP_400_BAD_REQUEST,
    ScriptNotFoundError: status.HTTP_404_NOT_FOUND,
    SectionNotFoundError: status.HTTP_404_NOT_FOUND,
    SectionForbiddenError: status.HTTP_403_FORBIDDEN,
}


def script_http_error(exc: ScriptError) -> HTTPException:
    status_code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST)
    return HTTPException(status_code=status_code, detail=str(exc))


__all__ = ["script_http_error"]
