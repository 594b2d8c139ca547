"""Diff API endpoints

Handlers are plain functions so FastAPI runs the table fill in its
threadpool; each request builds its own service and tables.
"""

from __future__ import annotations

from fastapi import APIRouter

from sidediff.models.compare import CompareRequest, TextPair, TokenDiffRequest, TokenDiffResponse
from sidediff.models.diff import DiffResult
from sidediff.services.config_manager import ConfigManager
from sidediff.services.diff_service import DiffService

router = APIRouter()


def get_diff_service() -> DiffService:
    """Build a service with the configured table budget"""
    return DiffService(max_cells=ConfigManager.get_instance().get_max_cells())


@router.post("/compare", response_model=DiffResult)
def compare(request: CompareRequest) -> DiffResult:
    """Compare two texts"""
    options = request.options or ConfigManager.get_instance().get_options()
    return get_diff_service().compare(
        request.left,
        request.right,
        options=options,
        render=request.render,
        context_lines=request.context_lines,
    )


@router.post("/tokens", response_model=TokenDiffResponse)
def tokens(request: TokenDiffRequest) -> TokenDiffResponse:
    """Token-level diff of a single line pair"""
    span_a, span_b = get_diff_service().diff_tokens(request.a, request.b)
    return TokenDiffResponse(span_a=span_a, span_b=span_b)


@router.post("/swap", response_model=TextPair)
def swap(pair: TextPair) -> TextPair:
    """Swap left and right texts"""
    return get_diff_service().swap(pair)


@router.post("/clear", response_model=TextPair)
def clear() -> TextPair:
    """Reset both texts"""
    return get_diff_service().clear()
