from __future__ import annotations
import os

from flask import Blueprint, render_template, jsonify

from core.models import generator

bp = Blueprint("home", __name__)


@bp.route("/")
def index():
    return render_template("home.html", tones=generator.TONES, word_counts=generator.WORD_COUNTS)


@bp.route("/healthz")
def healthz():
    return "ok", 200, {"Content-Type": "text/plain; charset=utf-8"}


@bp.route("/api/llm/status")
def llm_status():
    """Report whether posts come from the LLM or the mock template."""
    api_key = (os.getenv("OPENAI_API_KEY") or "").strip()
    # Light masking for display
    key_hint = f"...{api_key[-4:]}" if api_key else None
    return jsonify({
        "mode": generator.generation_mode(),
        "model": generator.LLM_MODEL,
        "max_tokens": generator.MAX_TOKENS,
        "openai_key_present": bool(api_key),
        "openai_key_hint": key_hint,
        "openai_base_url": os.getenv("OPENAI_BASE_URL") or None,
    })
