# app/config.py
import os
from typing import Dict, Optional

DEFAULT_SLIDE_TITLE = "Slide"
DEFAULT_DECK_TITLE = "New Deck"

MAX_TEXT_CHARS = 200_000
WEBHOOK_TIMEOUT_S = 60

# Google Slides presentations usable as templates by the slide builder
TEMPLATE_PRESETS = [
    {"label": "Template A", "id": "1NzjvBGLQLb9qPwyilk59uvvfjfkkNkKY"},
    {"label": "Template B", "id": "1Hi_4GdHQw_xk-ul4Ueo42Qvedz28f9a_"},
    {"label": "Template C", "id": "1nP0FRwjKKMNwKba3BSI5QX0fxq5cR5qQ"},
    {"label": "Template D", "id": "1UMsGwC4VaVSx9U4lLZu1eZn17_xzP3lg"},
]


def get_slides_settings() -> Dict[str, Optional[str]]:
    """Read webhook settings from the environment on every call."""
    return {
        "webhook_url": os.getenv("SLIDES_WEBHOOK_URL") or None,
        "secret": os.getenv("SLIDES_API_SECRET") or None,
        "template_id": os.getenv("SLIDES_TEMPLATE_ID") or None,
    }
