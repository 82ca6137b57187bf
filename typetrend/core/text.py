from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

import yaml

DEFAULT_CORPUS_PATH = Path(__file__).resolve().parent.parent / "data" / "words.yaml"


@dataclass(frozen=True)
class WordCorpus:
    words: Tuple[str, ...]

    @classmethod
    def from_yaml(cls, path: Path = DEFAULT_CORPUS_PATH) -> "WordCorpus":
        if not path.exists():
            raise FileNotFoundError(f"Word corpus not found: {path}")
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{path.name}: expected YAML with a 'words' list")
        words = raw.get("words")
        if not isinstance(words, list):
            raise ValueError(f"{path.name}: missing or invalid 'words'")
        cleaned = [str(item).strip() for item in words if str(item).strip()]
        if not cleaned:
            raise ValueError(f"{path.name}: 'words' is empty")
        return cls(words=tuple(cleaned))


class TextGenerator:
    """Builds practice texts by drawing words uniformly, with replacement."""

    def __init__(self, corpus: WordCorpus, rng: Optional[random.Random] = None) -> None:
        if not corpus.words:
            raise ValueError("corpus must contain at least one word")
        self._corpus = corpus
        self._rng = rng or random.Random()

    @property
    def corpus(self) -> WordCorpus:
        return self._corpus

    def generate(self, word_count: int) -> str:
        if word_count <= 0:
            raise ValueError(f"word_count must be positive, got {word_count}")
        words: List[str] = [self._rng.choice(self._corpus.words) for _ in range(word_count)]
        return " ".join(words)
