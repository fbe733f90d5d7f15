"""
API Routes for historical events.

Endpoints
---------
- `GET /events/{language_tag}`: Rendered event blocks for a language.
- `GET /languages`: Supported language tags.
- `GET /module`: Module metadata.

The `format` query parameter plays the part of the tree's note-format
preference; when omitted, `HISTOCAT_FORMAT_TEXT` is used. Unsupported
languages are not an error: they return 200 with an empty list.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from histocat.api.schemas import EventsResponse, LanguageInfo
from histocat.core.rendering import resolve_mode
from histocat.core.settings import load_settings
from histocat.provider import HistoricEventsProvider, ModuleInfo

router = APIRouter(tags=["Events"])


def get_provider(request: Request) -> HistoricEventsProvider:
    """Return the provider built at application startup."""
    provider: HistoricEventsProvider = request.app.state.provider
    return provider


ProviderDep = Annotated[HistoricEventsProvider, Depends(get_provider)]


@router.get(
    "/events/{language_tag}",
    response_model=EventsResponse,
    summary="List rendered historical events",
)
async def list_events(
    language_tag: str,
    provider: ProviderDep,
    format_text: Annotated[
        str | None,
        Query(alias="format", description="'markdown' or anything else for plain text"),
    ] = None,
) -> EventsResponse:
    """
    Return every event block for `language_tag` in curated order.

    Each element of `events` is one complete `1 EVEN ...` block.
    """
    preference = format_text if format_text is not None else load_settings().format_text
    mode = resolve_mode(preference)
    blocks = provider.list_events(language_tag, mode=mode)
    return EventsResponse(language=language_tag, mode=mode, count=len(blocks), events=blocks)


@router.get("/languages", response_model=list[LanguageInfo], summary="Supported languages")
async def list_languages(provider: ProviderDep) -> list[LanguageInfo]:
    catalog = provider.catalog
    out: list[LanguageInfo] = []
    for tag in catalog.languages():
        ds = catalog.dataset(tag)
        if ds is not None:
            out.append(LanguageInfo(tag=tag, dataset=ds.language, count=len(ds.events)))
    return out


@router.get("/module", response_model=ModuleInfo, summary="Module metadata")
async def module_info(provider: ProviderDep) -> ModuleInfo:
    return provider.info


__all__ = ["get_provider", "router"]
