from __future__ import annotations

import html
from dataclasses import dataclass

from fastapi import APIRouter
from fastapi import Depends
from fastapi.responses import HTMLResponse

from llmplatform.core.settings import Settings
from llmplatform.core.settings import get_settings
from llmplatform.services.health import utcnow


router = APIRouter(tags=["pages"])

PAGE_TITLE = "LLM Platform - Personal AI Experience Platform"
PAGE_DESCRIPTION = (
    "Organize your AI interactions into topic-based experiences with custom "
    "AI personalities and intelligent agents."
)
TAGLINE = (
    "Organize your AI interactions into topic-based experiences with custom "
    "AI personalities, system prompts, and intelligent agents that optimize "
    "your workspace over time."
)


@dataclass(frozen=True)
class FeatureCard:
    icon: str
    title: str
    body: str


FEATURES: tuple[FeatureCard, ...] = (
    FeatureCard(
        icon="\U0001F680",
        title="Multi-LLM Integration",
        body="Seamlessly integrate ChatGPT, Claude, and Gemini with a unified interface.",
    ),
    FeatureCard(
        icon="\U0001F3AD",
        title="Custom AI Personalities",
        body="Create and customize AI personalities for different contexts and use cases.",
    ),
    FeatureCard(
        icon="\U0001F916",
        title="Intelligent Agents",
        body="AI-powered agents that monitor and optimize your workspace automatically.",
    ),
)

_STYLE = """
body { margin: 0; font-family: system-ui, sans-serif; color: #111827;
       background: linear-gradient(to bottom right, #eff6ff, #e0e7ff); min-height: 100vh; }
.container { max-width: 64rem; margin: 0 auto; padding: 4rem 1rem; text-align: center; }
h1 { font-size: 3.75rem; margin-bottom: 1.5rem; }
.banner { background: #dcfce7; border: 1px solid #4ade80; color: #15803d;
          padding: .75rem 1rem; border-radius: .25rem; margin: 0 auto 1.5rem; max-width: 42rem; }
.tagline { font-size: 1.25rem; color: #4b5563; margin: 0 auto 2rem; max-width: 48rem; }
.actions { display: flex; justify-content: center; gap: 1rem; margin-bottom: 3rem; }
.btn { font-weight: 600; padding: .75rem 1.5rem; border-radius: .5rem; border: 0; cursor: pointer; }
.btn-primary { background: #2563eb; color: #fff; }
.btn-secondary { background: #e5e7eb; color: #1f2937; }
.features { display: grid; grid-template-columns: repeat(auto-fit, minmax(14rem, 1fr)); gap: 2rem; }
.card { background: #fff; padding: 1.5rem; border-radius: .5rem; box-shadow: 0 4px 6px rgba(0,0,0,.1); }
.card .icon { font-size: 2.25rem; margin-bottom: 1rem; }
.card p { color: #4b5563; }
"""


def _render_feature(card: FeatureCard) -> str:
    return (
        '<div class="card">'
        f'<div class="icon">{card.icon}</div>'
        f"<h3>{html.escape(card.title)}</h3>"
        f"<p>{html.escape(card.body)}</p>"
        "</div>"
    )


def render_landing_page(settings: Settings, *, rendered_at: str) -> str:
    features = "\n".join(_render_feature(card) for card in FEATURES)
    banner = (
        f"<strong>{html.escape(settings.app_name)} {html.escape(settings.version)}</strong>"
        f" running in {html.escape(settings.environment)}"
        f'<br><span>Rendered at {html.escape(rendered_at)}</span>'
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{html.escape(PAGE_TITLE)}</title>
<meta name="description" content="{html.escape(PAGE_DESCRIPTION)}">
<meta name="viewport" content="width=device-width, initial-scale=1">
<link rel="icon" href="/favicon.ico">
<style>{_STYLE}</style>
</head>
<body>
<main class="container">
<h1>{html.escape(settings.app_name)}</h1>
<div class="banner">{banner}</div>
<p class="tagline">{html.escape(TAGLINE)}</p>
<div class="actions">
<button class="btn btn-primary">Get Started</button>
<button class="btn btn-secondary">Learn More</button>
</div>
<div class="features">
{features}
</div>
</main>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
def landing_page(settings: Settings = Depends(get_settings)) -> HTMLResponse:
    rendered_at = utcnow().strftime("%Y-%m-%d %H:%M:%S UTC")
    return HTMLResponse(render_landing_page(settings, rendered_at=rendered_at))
