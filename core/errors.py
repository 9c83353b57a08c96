from fastapi import status
from core.exceptions import AppException


class ErrorCode:
    FIELDS_REQUIRED = "FIELDS_REQUIRED"
    SERVER_ERROR = "SERVER_ERROR"

    SIGN_REQUIRED = "SIGN_REQUIRED"
    HOROSCOPE_NOT_FOUND = "HOROSCOPE_NOT_FOUND"


class ErrorMessage:
    FIELDS_REQUIRED = "All fields are required."
    SERVER_ERROR = "Server error occurred."

    SIGN_REQUIRED = "Sign is required."
    HOROSCOPE_NOT_FOUND = "Horoscope not found."


# Submission endpoints answer {"success": false, "message": ...}
def submission_error(status_code: int, code: str, message: str):
    return AppException(
        status_code=status_code,
        code=code,
        message=message,
        content={"success": False, "message": message}
    )


# Lookup endpoints answer {"error": ...}
def lookup_error(status_code: int, code: str, message: str):
    return AppException(
        status_code=status_code,
        code=code,
        message=message,
        content={"error": message}
    )


def fields_required():
    return submission_error(
        status.HTTP_400_BAD_REQUEST,
        ErrorCode.FIELDS_REQUIRED,
        ErrorMessage.FIELDS_REQUIRED
    )


def server_error():
    return submission_error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorCode.SERVER_ERROR,
        ErrorMessage.SERVER_ERROR
    )


def sign_required():
    return lookup_error(
        status.HTTP_400_BAD_REQUEST,
        ErrorCode.SIGN_REQUIRED,
        ErrorMessage.SIGN_REQUIRED
    )


def horoscope_not_found():
    return lookup_error(
        status.HTTP_404_NOT_FOUND,
        ErrorCode.HOROSCOPE_NOT_FOUND,
        ErrorMessage.HOROSCOPE_NOT_FOUND
    )
