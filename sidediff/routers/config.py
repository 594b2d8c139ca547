"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from sidediff.models.compare import DiffOptions
from sidediff.services.config_manager import ConfigManager

router = APIRouter()


class LimitsConfig(BaseModel):
    """Resource limits for the diff engines"""

    max_table_cells: int | None = Field(default=None, ge=0)  # None or 0 = unlimited


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    options: DiffOptions | None = None
    limits: LimitsConfig | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    options: DiffOptions
    limits: LimitsConfig


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        options=DiffOptions(**config.get("options", {})),
        limits=LimitsConfig(**config.get("limits", {})),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    if request.options is not None:
        current_config["options"] = {
            **current_config.get("options", {}),
            **request.options.model_dump(exclude_unset=True),
        }
    if request.limits is not None:
        current_config["limits"] = {
            **current_config.get("limits", {}),
            **request.limits.model_dump(exclude_unset=True),
        }

    config_manager.save_config(current_config)

    return {"status": "success", "message": "Configuration updated"}
