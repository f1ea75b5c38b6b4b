from fastapi import status


class QuizServiceError(Exception):
    """Base error raised by the service layer; rendered as {"error": message}."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequest(QuizServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(QuizServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(QuizServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(QuizServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
