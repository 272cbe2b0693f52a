"""
Request body schemas for the HTTP API.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ChatArgs(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(min_length=1, description="User question")
    session_id: Optional[str] = Field(
        default=None,
        alias="sessionId",
        description="Conversation id; generated when omitted",
    )


class AddEntryArgs(BaseModel):
    intent: Optional[str] = Field(default=None, description="Intent label for the new entry")
    question: str = Field(min_length=1, description="Canonical question phrasing")
    answer: str = Field(min_length=1, description="Answer returned to the caller")
