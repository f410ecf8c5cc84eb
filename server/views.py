"""Server-rendered page for the stylist session.

The page shows the criteria form and exactly one of four panels chosen by the
lifecycle state: idle placeholder, loading, result, or error with the idle
placeholder.
"""

from __future__ import annotations

import re
from html import escape
from typing import Iterable, List

from logic.lifecycle import StylistSession
from models.catalog import MOODS, OCCASIONS, WEATHER_PRESETS, category_label
from models.recommendation import Failed, Loading, OutfitRecommendation, StylingCriteria, Success

LOADING_REFRESH_SECONDS = 2
_SAFE_COLOR = re.compile(r"^#?[0-9A-Za-z]{1,32}$")

_STYLE = """
body{margin:0;background:#f5f2ed;color:#1a1a1a;font-family:system-ui,sans-serif}
header,footer{padding:16px 24px;border-bottom:1px solid rgba(0,0,0,.1)}
footer{border-top:1px solid rgba(0,0,0,.1);border-bottom:0;color:rgba(0,0,0,.4)}
main{max-width:1100px;margin:0 auto;padding:32px 24px;display:grid;grid-template-columns:1fr 1fr;gap:48px}
.brand{font-family:Georgia,serif;font-weight:bold;font-size:1.3rem}
fieldset{border:0;padding:0;margin:0 0 24px}
legend{text-transform:uppercase;letter-spacing:.2em;font-size:11px;font-weight:600;margin-bottom:8px}
.chips label{display:inline-block;margin:0 6px 6px 0;padding:6px 14px;border:1px solid rgba(0,0,0,.15);border-radius:999px}
input[type=text]{width:100%;padding:10px;border:1px solid rgba(0,0,0,.15);border-radius:12px;background:#fff}
button{padding:12px 20px;border:0;border-radius:999px;background:#1a1a1a;color:#fff;font-weight:600}
button[disabled]{opacity:.3}
button.secondary{background:transparent;color:#1a1a1a;border:1px solid rgba(0,0,0,.2);margin-left:8px}
.chosen{font-size:12px;color:rgba(0,0,0,.6);margin-right:12px}
.panel{background:#fff;border-radius:32px;padding:32px;min-height:360px}
.swatch{display:inline-block;width:28px;height:28px;border-radius:50%;margin-right:6px;border:1px solid rgba(0,0,0,.1)}
.component h4{text-transform:uppercase;font-size:.85rem;margin:0}
.category{font-size:11px;text-transform:uppercase;letter-spacing:.15em;color:rgba(0,0,0,.4)}
.error{color:#b42318;background:#fef3f2;padding:12px;border-radius:12px}
"""


def _chips(name: str, options: Iterable[str], selected: str) -> str:
    rendered: List[str] = []
    for option in options:
        checked = " checked" if option == selected else ""
        rendered.append(
            f'<label><input type="radio" name="{name}" value="{escape(option)}"{checked}> '
            f"{escape(option)}</label>"
        )
    return "".join(rendered)


_SAVE_BUTTON = (
    '<button type="submit" name="action" value="save" formaction="/criteria" class="secondary">'
    "Save Selections</button>"
)


def _buttons(session: StylistSession) -> str:
    """Form controls; the first enabled one is what the Enter key submits.

    Generate is hidden in ``Success`` and disabled while ``Loading``. A missing
    occasion does not disable it, so a chip picked on the same submit is
    applied before the session checks it.
    """

    if session.is_loading:
        return _SAVE_BUTTON + '<button type="submit" disabled>Curating...</button>'
    if session.accepts_generate:
        return '<button type="submit" name="action" value="generate">Curate My Look</button>' + _SAVE_BUTTON
    return _SAVE_BUTTON


def render_form(session: StylistSession) -> str:
    """Criteria form; inputs stay editable and savable in every state."""

    criteria = session.criteria
    custom_occasion = "" if criteria.occasion in OCCASIONS else criteria.occasion
    presets = "".join(f'<option value="{escape(preset)}">' for preset in WEATHER_PRESETS)
    return (
        '<form method="post" action="/generate" class="criteria">'
        "<fieldset><legend>Occasion</legend>"
        f'<div class="chips">{_chips("occasion", OCCASIONS, criteria.occasion)}</div>'
        f'<input type="text" name="custom_occasion" placeholder="Or describe your own occasion" '
        f'value="{escape(custom_occasion)}">'
        "</fieldset>"
        "<fieldset><legend>Weather</legend>"
        f'<input type="text" name="weather" list="weather-presets" placeholder="e.g. Sunny & Warm" '
        f'value="{escape(criteria.weather)}">'
        f'<datalist id="weather-presets">{presets}</datalist>'
        "</fieldset>"
        "<fieldset><legend>Mood</legend>"
        f'<div class="chips">{_chips("mood", MOODS, criteria.mood)}</div>'
        "</fieldset>"
        f"{_buttons(session)}"
        "</form>"
    )


def _idle_panel() -> str:
    return (
        '<div class="panel idle" data-state="idle">'
        "<h3>Your curated look will appear here</h3>"
        "<p>Select an occasion and let CoutureMind style you head to toe.</p>"
        "</div>"
    )


def _loading_panel() -> str:
    return (
        '<div class="panel loading" data-state="loading">'
        "<h3>Curating your look...</h3>"
        "<p>Our stylist is matching silhouettes, palettes and textures.</p>"
        "</div>"
    )


def _error_panel(message: str) -> str:
    return (
        '<div class="panel failed" data-state="failed">'
        f'<p class="error" role="alert">{escape(message)}</p>'
        "<h3>Your curated look will appear here</h3>"
        "<p>Select an occasion and let CoutureMind style you head to toe.</p>"
        "</div>"
    )


def _swatch(color: str) -> str:
    style = f' style="background:{color}"' if _SAFE_COLOR.match(color.strip()) else ""
    return f'<span class="swatch" title="{escape(color)}"{style}></span>'


def _chosen(criteria: StylingCriteria | None) -> str:
    """Occasion and mood the look was curated for."""

    if criteria is None:
        return ""
    chosen = [criteria.occasion.strip(), criteria.mood.strip()]
    return "".join(f'<span class="chosen">&#10003; {escape(value)}</span>' for value in chosen if value)


def render_recommendation(recommendation: OutfitRecommendation, criteria: StylingCriteria | None = None) -> str:
    palette = recommendation.color_palette
    swatches = "".join(_swatch(color) for color in palette.colors)
    components = "".join(
        '<li class="component">'
        f'<span class="category">{escape(category_label(component.category))}</span>'
        f"<h4>{escape(component.item)}</h4>"
        f"<p>{escape(component.description)}</p>"
        "</li>"
        for component in recommendation.components
    )
    layering = ""
    if recommendation.layering_advice:
        layering = (
            '<section class="layering"><h4>Layering Strategy</h4>'
            f"<p><em>&ldquo;{escape(recommendation.layering_advice)}&rdquo;</em></p></section>"
        )
    return (
        '<div class="panel success" data-state="success">'
        f"<h2>{escape(recommendation.title)}</h2>"
        f'<div class="criteria-used">{_chosen(criteria)}</div>'
        f'<div class="palette"><span>{escape(palette.name)}</span> {swatches}</div>'
        f'<ol class="components">{components}</ol>'
        f"{layering}"
        '<section class="psychology"><h4>Style Psychology</h4>'
        f"<p>{escape(recommendation.style_psychology)}</p></section>"
        '<form method="post" action="/curation/new"><button type="submit">Start New Curation</button></form>'
        "</div>"
    )


def render_panel(session: StylistSession) -> str:
    state = session.state
    if isinstance(state, Loading):
        return _loading_panel()
    if isinstance(state, Success):
        return render_recommendation(state.recommendation, state.criteria)
    if isinstance(state, Failed):
        return _error_panel(state.message)
    return _idle_panel()


def render_page(session: StylistSession) -> str:
    """Full HTML document for the current session."""

    refresh = ""
    if session.is_loading:
        refresh = f'<meta http-equiv="refresh" content="{LOADING_REFRESH_SECONDS}">'
    return (
        "<!doctype html>"
        '<html lang="en"><head><meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        f"{refresh}<title>CoutureMind</title><style>{_STYLE}</style></head>"
        '<body><header><span class="brand">CoutureMind</span></header>'
        "<main>"
        "<section><h1>Dress for the moment.</h1>"
        "<p>Tell us where you are going and how you want to feel.</p>"
        f"{render_form(session)}</section>"
        f"<section>{render_panel(session)}</section>"
        "</main>"
        "<footer>&copy; CoutureMind AI</footer>"
        "</body></html>"
    )


__all__ = ["render_page", "render_panel", "render_form", "render_recommendation"]
