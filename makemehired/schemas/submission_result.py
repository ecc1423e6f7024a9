"""Generation response and the outcome of one submission."""

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class GenerateResponse(BaseModel):
    """JSON body returned by the generation endpoint on success."""

    html: Optional[str] = Field(default=None, description="Rendered CV for preview")
    pdf_base64: Optional[str] = Field(default=None, description="Base64-encoded PDF")
    filename: Optional[str] = Field(default=None, description="Suggested download name")


class SubmissionSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    html: Optional[str] = Field(default=None)
    pdf_bytes: Optional[bytes] = Field(default=None, description="Decoded PDF, if one was returned")
    filename: Optional[str] = Field(default=None)


class SubmissionFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"
    message: str = Field(..., description="User-facing message")


SubmissionResult = Union[SubmissionSuccess, SubmissionFailure]
