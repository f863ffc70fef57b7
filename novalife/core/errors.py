from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ValidationError(HTTPException):
    status_code_default = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str = "Invalid request"):
        super().__init__(status_code=self.status_code_default, detail=detail)


class DuplicateEmailError(ValidationError):
    def __init__(self, detail: str = "This email is already subscribed"):
        super().__init__(detail)


class WeakPasswordError(ValidationError):
    def __init__(self, detail: str = "New password must be at least 6 characters"):
        super().__init__(detail)


class UnsupportedTypeError(ValidationError):
    status_code_default = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE

    def __init__(self, detail: str = "Unsupported file type, upload a JPEG, PNG, GIF or WebP image"):
        super().__init__(detail)


class TooLargeError(ValidationError):
    status_code_default = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE

    def __init__(self, detail: str = "File too large, images must be under 5MB"):
        super().__init__(detail)


class AuthRequiredError(HTTPException):
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class InvalidCredentialsError(HTTPException):
    def __init__(self, detail: str = "Incorrect username or password", status_code: int = status.HTTP_401_UNAUTHORIZED):
        super().__init__(status_code=status_code, detail=detail)
