from pydantic import BaseModel


class SubmissionResponse(BaseModel):
    success: bool
    message: str
