"""
HTTP client for the Vocabulary Trainer API.
"""

import httpx

BASE_URL = "http://localhost:8000/api"


# === Vocables ===

def add_vocable(native: str, foreign: str, choices: list[int | None]) -> dict:
    payload = {"native": native, "foreign": foreign, "choices": choices}
    r = httpx.post(f"{BASE_URL}/vocables", json=payload)
    r.raise_for_status()
    return r.json()


def remove_word(word: str, choices: list[int | None]) -> dict:
    r = httpx.post(f"{BASE_URL}/vocables/remove", json={"word": word, "choices": choices})
    r.raise_for_status()
    return r.json()


def rename_word(old: str, new: str, choices: list[int | None]) -> dict:
    r = httpx.post(f"{BASE_URL}/vocables/rename", json={"old": old, "new": new, "choices": choices})
    r.raise_for_status()
    return r.json()


def list_vocables(fragments: list[str] | None = None) -> list[dict]:
    params = [("q", f) for f in fragments or []]
    r = httpx.get(f"{BASE_URL}/vocables", params=params)
    r.raise_for_status()
    return r.json()["vocables"]


def lookup_word(word: str) -> list[dict]:
    r = httpx.get(f"{BASE_URL}/words/{word}")
    r.raise_for_status()
    return r.json()["vocables"]


def import_vocables(text: str) -> dict:
    r = httpx.post(f"{BASE_URL}/vocables/import", json={"text": text}, timeout=60)
    r.raise_for_status()
    return r.json()


# === Quiz ===

def draw_questions(count: int | None = None, method: str | None = None) -> dict:
    params = {}
    if count:
        params["count"] = count
    if method:
        params["method"] = method
    r = httpx.get(f"{BASE_URL}/quiz", params=params)
    r.raise_for_status()
    return r.json()


def answer_question(vocable_id: int, asked_side: str, answer: str) -> dict:
    payload = {"vocable_id": vocable_id, "asked_side": asked_side, "answer": answer}
    r = httpx.post(f"{BASE_URL}/quiz/answer", json=payload)
    r.raise_for_status()
    return r.json()


# === Settings ===

def get_settings() -> dict:
    r = httpx.get(f"{BASE_URL}/settings")
    r.raise_for_status()
    return r.json()


def update_settings(values: dict[str, str]) -> dict:
    r = httpx.put(f"{BASE_URL}/settings", json={"values": values})
    r.raise_for_status()
    return r.json()


def set_namespace(namespace: str) -> dict:
    r = httpx.put(f"{BASE_URL}/namespace", json={"namespace": namespace})
    r.raise_for_status()
    return r.json()
