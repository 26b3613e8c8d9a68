"""
Global state and settings stored in Redis.
"""

from dataclasses import asdict, dataclass

import redis

from vocab.core.training import LearningMethod, PrefLanguage
from vocab.core.vocable import PreferKanji


STATE_KEY = "vocab:state:namespace"
DEFAULT_NAMESPACE = "default"


def get_namespace(client: redis.Redis) -> str:
    value = client.get(STATE_KEY)
    if value is None:
        return DEFAULT_NAMESPACE
    return value.decode()


def set_namespace(client: redis.Redis, namespace: str) -> None:
    client.set(STATE_KEY, namespace)


def parse_bool(value: str) -> bool:
    value = value.strip().lower()
    if value in ("true", "t"):
        return True
    if value in ("false", "f"):
        return False
    raise ValueError(f"cannot parse bool: {value!r}")


@dataclass
class Settings:
    number_of_words: int = 10
    learning_method: LearningMethod = LearningMethod.RANDOM
    pref_kanji: PreferKanji = PreferKanji.NO
    pref_language: PrefLanguage = PrefLanguage.NONE
    import_delimiter: str = "-"
    import_standard_order: bool = True

    def to_dict(self) -> dict:
        data = asdict(self)
        for key, value in data.items():
            if hasattr(value, "value"):
                data[key] = value.value
        return data

    def set(self, key: str, value: str) -> None:
        """Set one setting from its text form. Raises ValueError on bad input."""
        try:
            if key == "number_of_words":
                number = int(value)
                if number <= 0:
                    raise ValueError("must be positive")
                self.number_of_words = number
            elif key == "learning_method":
                self.learning_method = LearningMethod.parse(value)
            elif key == "pref_kanji":
                self.pref_kanji = PreferKanji.parse(value)
            elif key == "pref_language":
                self.pref_language = PrefLanguage.parse(value)
            elif key == "import_delimiter":
                if not value or value == ",":
                    raise ValueError("must be a non-empty string other than ','")
                self.import_delimiter = value
            elif key == "import_standard_order":
                self.import_standard_order = parse_bool(value)
            else:
                raise ValueError("unknown setting")
        except ValueError as e:
            raise ValueError(f"{key}: {e}") from e

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        settings = cls()
        for key, value in data.items():
            settings.set(key, str(value))
        return settings


class SettingsStore:
    """Stores settings as a Redis hash per namespace."""

    def __init__(self, client: redis.Redis):
        self.client = client

    @property
    def namespace(self) -> str:
        return get_namespace(self.client)

    def _key(self) -> str:
        return f"vocab:{self.namespace}:settings"

    def load(self) -> Settings:
        raw = self.client.hgetall(self._key())
        data = {k.decode(): v.decode() for k, v in raw.items()}
        return Settings.from_dict(data)

    def save(self, settings: Settings) -> None:
        data = {k: str(v).lower() if isinstance(v, bool) else str(v) for k, v in settings.to_dict().items()}
        self.client.hset(self._key(), mapping=data)
