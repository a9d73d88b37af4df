from __future__ import annotations

from fastapi import APIRouter, Depends

from aiken import preview_aiken
from deps.auth import require_admin
from routers.aiken import run_parser
from schemas.aiken import AikenTextRequest, PreviewResponse

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post(
    "/aiken/preview",
    response_model=PreviewResponse,
    dependencies=[Depends(require_admin)],
)
def preview_text(req: AikenTextRequest):
    # Nothing is stored; the editor uses `diagnostics` and `skipped` to
    # highlight lines before the user commits an import.
    return run_parser(req.text, preview_aiken)
