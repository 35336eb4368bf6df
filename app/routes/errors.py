from fastapi import HTTPException, status

from app.logic import errors

_STATUS_CODES = {
    errors.InvalidProjectError: status.HTTP_400_BAD_REQUEST,
    errors.InvalidIssueError: status.HTTP_400_BAD_REQUEST,
    errors.InvalidIDError: status.HTTP_400_BAD_REQUEST,
    errors.ProjectKeyExistsError: status.HTTP_409_CONFLICT,
    errors.InvalidTransitionError: status.HTTP_409_CONFLICT,
    errors.ProjectNotFoundError: status.HTTP_404_NOT_FOUND,
    errors.IssueNotFoundError: status.HTTP_404_NOT_FOUND,
}


def to_http_exception(exc: errors.TrackerError) -> HTTPException:
    """Map a domain error to the HTTP error returned to the client."""
    status_code = _STATUS_CODES.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=status_code, detail=exc.message)
