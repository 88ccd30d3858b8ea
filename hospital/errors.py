from fastapi import HTTPException, status


class ReferenceNotFound(HTTPException):
    """A foreign-key id in the request body does not resolve to a record."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class RecordNotFound(HTTPException):
    def __init__(self, label: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found.")


class RequestInconsistent(HTTPException):
    """The id in the URL path and the id in the body disagree."""

    def __init__(self, detail: str = "Id in path does not match id in body."):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class RecordInUse(HTTPException):
    def __init__(self, label: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=f"{label} is in use.")
