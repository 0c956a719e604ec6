"""
Miscellaneous routes: health check, settings, translations.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from .. import __version__
from ..config import state, get_settings_repo
from ..database import SettingsRepository
from ..i18n import Translator
from ..schemas import SettingsResponse, SettingsUpdateRequest

router = APIRouter(tags=["misc"])


# ─────────────────────────────────────────────────────────────
# Health Check
# ─────────────────────────────────────────────────────────────

@router.get("/status")
async def health_check() -> dict:
    """API health check."""
    return {
        "status": "ok",
        "version": __version__,
        "has_result": state.publisher is not None and state.publisher.latest is not None,
    }


# ─────────────────────────────────────────────────────────────
# Settings
# ─────────────────────────────────────────────────────────────

@router.get("/settings")
async def get_settings(
    settings: Annotated[SettingsRepository, Depends(get_settings_repo)]
) -> SettingsResponse:
    """Get user settings."""
    values = settings.get_all()
    return SettingsResponse(
        language=values["language"],
        server_ip=values["server_ip"],
        server_port=int(values["server_port"]),
        download_folder=values["download_folder"],
    )


@router.put("/settings")
async def update_settings(
    request: SettingsUpdateRequest,
    settings: Annotated[SettingsRepository, Depends(get_settings_repo)]
) -> SettingsResponse:
    """Update user settings."""
    if request.server_ip is not None:
        settings.set("server_ip", request.server_ip)
    if request.server_port is not None:
        settings.set("server_port", str(request.server_port))
    if request.download_folder is not None:
        settings.set("download_folder", request.download_folder)
    if request.language is not None:
        settings.set("language", request.language)
        # New results get the placeholder in the new language
        if state.translator:
            state.translator.set_language(request.language)
            if state.engine:
                state.engine.placeholder = state.translator.link_placeholder

    return await get_settings(settings)


# ─────────────────────────────────────────────────────────────
# Translations
# ─────────────────────────────────────────────────────────────

@router.get("/translations/{language}")
async def get_translations(language: str) -> dict[str, str]:
    """Message catalog for a language, English filling the gaps."""
    return Translator(language).as_dict()
