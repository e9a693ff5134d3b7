from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from api.deps import get_config
from simcore.core.config import Config

router = APIRouter(prefix="/config")


@router.get("")
def get_current_config(config: Config = Depends(get_config)) -> dict[str, Any]:
    return config.model_dump(mode="json")
