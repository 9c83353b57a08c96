class AppException(Exception):
    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        content: dict | None = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.content = content if content is not None else {"message": message}
