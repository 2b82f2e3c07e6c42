# app/main.py
import logging
from datetime import datetime
from typing import Any, List, Optional

from fastapi import FastAPI, HTTPException

from .config import (
    DEFAULT_DECK_TITLE,
    MAX_TEXT_CHARS,
    TEMPLATE_PRESETS,
    WEBHOOK_TIMEOUT_S,
    get_slides_settings,
)
from .parser import parse_outline
from .schemas import (
    Deck,
    GenerateSlidesRequest,
    ParseRequest,
    SlidesPayload,
    TemplatePreset,
)
from .slides_client import SlidesServiceError, build_slides

logger = logging.getLogger(__name__)

app = FastAPI(title="outline-slides", version="1.0.0", docs_url="/docs")


def _require_text(text: Any) -> str:
    if not text or not isinstance(text, str):
        raise HTTPException(status_code=400, detail="Missing text")
    if len(text) > MAX_TEXT_CHARS:
        raise HTTPException(status_code=413, detail=f"Text too long ({len(text)} chars). Max is {MAX_TEXT_CHARS}.")
    return text


@app.get("/healthz")
def healthz():
    return {"ok": True, "ts": datetime.utcnow().isoformat() + "Z"}


@app.get("/api/templates", response_model=List[TemplatePreset])
def list_templates():
    return TEMPLATE_PRESETS


@app.post("/api/parse", response_model=Deck, response_model_exclude_none=True)
def parse(req: Optional[ParseRequest] = None):
    req = req or ParseRequest()
    text = _require_text(req.text)
    return Deck(**parse_outline(text))


@app.post("/api/generate-slides")
def generate_slides(req: Optional[GenerateSlidesRequest] = None):
    # a missing or null body is treated like an empty one
    req = req or GenerateSlidesRequest()
    text = _require_text(req.text)

    deck = Deck(**parse_outline(text))
    title = req.title or deck.title or DEFAULT_DECK_TITLE
    logger.info("Parsed outline into %d slides", len(deck.slides))

    settings = get_slides_settings()
    if not settings["webhook_url"] or not settings["secret"]:
        raise HTTPException(status_code=500, detail="Missing SLIDES_WEBHOOK_URL / SLIDES_API_SECRET")

    template_id = req.template_id or settings["template_id"]
    if not template_id:
        raise HTTPException(status_code=400, detail="No templateId provided and SLIDES_TEMPLATE_ID not set")

    payload = SlidesPayload(
        title=title,
        subtitle=req.subtitle,
        template_id=template_id,
        slides=deck.slides,
    )

    try:
        return build_slides(
            payload,
            webhook_url=settings["webhook_url"],
            secret=settings["secret"],
            timeout=WEBHOOK_TIMEOUT_S,
        )
    except SlidesServiceError as e:
        raise HTTPException(status_code=500, detail=str(e))
