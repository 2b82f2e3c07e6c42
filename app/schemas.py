# app/schemas.py
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class SlideDraft(BaseModel):
    title: str
    bullets: List[str] = Field(default_factory=list)
    notes: Optional[str] = None


class Deck(BaseModel):
    title: Optional[str] = None
    slides: List[SlideDraft] = Field(default_factory=list)


class ParseRequest(BaseModel):
    # Any so a non-string value reaches the handler and gets a 400, not a 422
    text: Any = None


class GenerateSlidesRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: Any = None
    title: Optional[str] = None
    subtitle: Optional[str] = None
    template_id: Optional[str] = Field(None, alias="templateId")


class SlidesPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    subtitle: Optional[str] = None
    template_id: str = Field(..., alias="templateId")
    slides: List[SlideDraft]


class TemplatePreset(BaseModel):
    label: str
    id: str
