"""
Quiz routes: /api/quiz
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from vocab.core.training import LearningMethod, check_answer, make_question, select_vocables
from vocab.core.vocable import Side
from vocab.server.deps import get_settings_store, get_store, save_store


router = APIRouter(prefix="/api/quiz", tags=["quiz"])


class QuizAnswerRequest(BaseModel):
    vocable_id: int
    asked_side: Side
    answer: str


@router.get("")
def draw_questions(count: int | None = None, method: str | None = None, db: int = 0):
    """Draw questions according to the learning method and language settings."""
    settings = get_settings_store(db).load()
    try:
        learning_method = LearningMethod.parse(method) if method else settings.learning_method
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    store = get_store(db)
    chosen = select_vocables(
        store.vocables(),
        learning_method,
        count or settings.number_of_words,
        store.rng,
        settings.pref_kanji,
    )
    questions = [
        make_question(store, v, settings.pref_language, settings.pref_kanji)
        for v in chosen
    ]
    return {"method": learning_method.value, "questions": [q.to_dict() for q in questions]}


@router.post("/answer")
def answer_question(req: QuizAnswerRequest, db: int = 0):
    store = get_store(db)
    vocable = store.get(req.vocable_id)
    if vocable is None:
        raise HTTPException(status_code=404, detail="Vocable not found")

    correct = check_answer(vocable, req.asked_side, req.answer)
    store.record_answer(vocable, correct)
    save_store(db)
    return {
        "correct": correct,
        "expected": vocable.words(req.asked_side),
        "vocable": vocable.to_dict(),
    }
