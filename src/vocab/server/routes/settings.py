"""
Settings routes: /api/settings
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from vocab.core.state import get_namespace, set_namespace
from vocab.server.deps import drop_store, get_redis, get_settings_store, get_store


router = APIRouter(prefix="/api", tags=["settings"])


class UpdateSettingsRequest(BaseModel):
    values: dict[str, str]


class NamespaceRequest(BaseModel):
    namespace: str


@router.get("/settings")
def get_settings(db: int = 0):
    return get_settings_store(db).load().to_dict()


@router.put("/settings")
def update_settings(req: UpdateSettingsRequest, db: int = 0):
    settings_store = get_settings_store(db)
    settings = settings_store.load()
    try:
        for key, value in req.values.items():
            settings.set(key, value)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    settings_store.save(settings)
    get_store(db).pref_kanji = settings.pref_kanji
    return settings.to_dict()


@router.get("/namespace")
def get_current_namespace(db: int = 0):
    return {"namespace": get_namespace(get_redis(db))}


@router.put("/namespace")
def switch_namespace(req: NamespaceRequest, db: int = 0):
    """Switch namespace; the vocables of the new namespace are loaded on next use."""
    if not req.namespace or ":" in req.namespace:
        raise HTTPException(status_code=400, detail="Invalid namespace")
    set_namespace(get_redis(db), req.namespace)
    drop_store(db)
    return {"namespace": req.namespace}
