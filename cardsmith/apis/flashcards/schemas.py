from __future__ import annotations

from pydantic import BaseModel, Field

from cardsmith.modules.flashcards.models import Flashcard, PromptKind


class GenerateRequest(BaseModel):
    topic: str = Field(..., description="Topic, block of text, or URL")


class GenerateResponse(BaseModel):
    topic: str
    prompt_kind: PromptKind
    model: str
    flashcards: list[Flashcard] = Field(default_factory=list)
    count: int = 0


class ParseRequest(BaseModel):
    text: str = Field(..., description="Raw model reply")


class ParseResponse(BaseModel):
    flashcards: list[Flashcard] = Field(default_factory=list)
    count: int = 0


class PromptRequest(BaseModel):
    topic: str


class PromptResponse(BaseModel):
    prompt_kind: PromptKind
    prompt: str


class ExportRequest(BaseModel):
    flashcards: list[Flashcard] = Field(default_factory=list)


class ImportResponse(BaseModel):
    filename: str
    text: str
    message: str
