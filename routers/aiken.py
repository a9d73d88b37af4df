from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict

from fastapi import APIRouter, Depends

from aiken import AikenParseError, NoValidQuestions, parse_aiken
from deps.auth import require_client
from schemas.aiken import AikenTextRequest, ParseResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/aiken", tags=["aiken"])

DEFAULT_MAX_CHARS = 500_000


def max_chars() -> int:
    raw = os.getenv("AIKEN_MAX_CHARS", "")
    try:
        return int(raw) if raw.strip() else DEFAULT_MAX_CHARS
    except ValueError:
        logger.warning("Ignoring invalid AIKEN_MAX_CHARS=%r", raw)
        return DEFAULT_MAX_CHARS


def run_parser(text: str, parse: Callable[[str], Any]) -> Dict[str, Any]:
    """
    Shared by the import and preview endpoints: call `parse` and fold whole-call
    failures into an ok=False payload that still carries the diagnostics.
    """
    limit = max_chars()
    if len(text) > limit:
        return {
            "ok": False,
            "error": "too_large",
            "message": f"Text too long (> {limit} characters).",
        }

    try:
        outcome = parse(text)
    except NoValidQuestions as e:
        return {
            "ok": False,
            "error": e.code,
            "message": e.message,
            "skipped": e.skipped,
            "global_issues": e.global_issues,
        }
    except AikenParseError as e:
        return {"ok": False, "error": e.code, "message": e.message}

    return {"ok": True, **dict(outcome)}


@router.post("/parse", response_model=ParseResponse, dependencies=[Depends(require_client)])
def parse_text(req: AikenTextRequest):
    return run_parser(req.text, parse_aiken)
