"""
Vocable routes: /api/vocables, /api/words
"""

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from vocab.core.importer import import_text
from vocab.core.resolver import ScriptedResolver
from vocab.core.vocable import Side
from vocab.server.deps import get_settings_store, get_store, save_store


router = APIRouter(prefix="/api", tags=["vocables"])


class AddRequest(BaseModel):
    native: str | list[str]
    foreign: str | list[str]
    choices: list[int | None] = []


class RemoveRequest(BaseModel):
    word: str
    choices: list[int | None] = []


class RenameRequest(BaseModel):
    old: str
    new: str
    choices: list[int | None] = []


class AnswerRequest(BaseModel):
    correct: bool


class ImportRequest(BaseModel):
    text: str


def _get_vocable(vocable_id: int, db: int):
    vocable = get_store(db).get(vocable_id)
    if vocable is None:
        raise HTTPException(status_code=404, detail="Vocable not found")
    return vocable


def _finish(outcome, db: int) -> dict:
    if outcome.ok:
        save_store(db)
    return outcome.to_dict()


@router.get("/vocables")
def list_vocables(q: list[str] = Query(default=[]), db: int = 0):
    """List all vocables, or those matching any fragment in q."""
    store = get_store(db)
    vocables = store.search(q) if q else store.vocables()
    return {"vocables": [v.to_dict() for v in vocables]}


@router.post("/vocables")
def add_vocable(req: AddRequest, db: int = 0):
    store = get_store(db)
    outcome = store.add(req.native, req.foreign, ScriptedResolver(req.choices))
    return _finish(outcome, db)


@router.post("/vocables/remove")
def remove_word(req: RemoveRequest, db: int = 0):
    store = get_store(db)
    outcome = store.remove(req.word, ScriptedResolver(req.choices))
    return _finish(outcome, db)


@router.post("/vocables/rename")
def rename_word(req: RenameRequest, db: int = 0):
    store = get_store(db)
    outcome = store.rename(req.old, req.new, ScriptedResolver(req.choices))
    return _finish(outcome, db)


@router.post("/vocables/import")
def import_vocables(req: ImportRequest, db: int = 0):
    settings = get_settings_store(db).load()
    try:
        report = import_text(
            get_store(db), req.text, settings.import_delimiter, settings.import_standard_order
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    save_store(db)
    return report.to_dict()


@router.get("/vocables/{vocable_id}")
def get_vocable(vocable_id: int, db: int = 0):
    return _get_vocable(vocable_id, db).to_dict()


@router.get("/vocables/{vocable_id}/label")
def get_label(vocable_id: int, side: Side = Side.NATIVE, db: int = 0):
    """Words that tell this vocable apart from its homonyms."""
    store = get_store(db)
    vocable = _get_vocable(vocable_id, db)
    return {"id": vocable_id, "side": side.value, "words": store.pick_label_words(vocable, side)}


@router.delete("/vocables/{vocable_id}")
def delete_vocable(vocable_id: int, db: int = 0):
    store = get_store(db)
    outcome = store.delete(_get_vocable(vocable_id, db))
    return _finish(outcome, db)


@router.post("/vocables/{vocable_id}/answer")
def record_answer(vocable_id: int, req: AnswerRequest, db: int = 0):
    store = get_store(db)
    vocable = _get_vocable(vocable_id, db)
    store.record_answer(vocable, req.correct)
    save_store(db)
    return vocable.to_dict()


@router.get("/words/{word}")
def lookup_word(word: str, db: int = 0):
    """All vocables containing word on either side."""
    store = get_store(db)
    return {
        "word": word,
        "vocables": [
            {**v.to_dict(), "unique_label": store.label(v)}
            for v in store.lookup(word)
        ],
    }
