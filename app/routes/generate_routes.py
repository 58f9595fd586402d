from __future__ import annotations
import logging

from flask import Blueprint, request, jsonify

from core.models.generator import generate_document

bp = Blueprint("generate", __name__)
logger = logging.getLogger(__name__)


@bp.route("/api/generate", methods=["POST"])
def generate():
    payload = request.get_json(silent=True)
    doc = generate_document(payload)
    logger.info("[generate] created title=%r", doc["title"])
    return jsonify({"title": doc["title"], "content": doc["content"]})
