"""Value objects returned by a dictionary lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Literal

LangKind = Literal["korean", "english", "japanese", "hanja", "other"]
VALID_KINDS: tuple[LangKind, ...] = ("korean", "english", "japanese", "hanja", "other")

# Dictionary label prefixes as shown on the result page, checked in order.
LABEL_PREFIXES: tuple[tuple[str, LangKind], ...] = (
    ("한국", "korean"),
    ("영", "english"),
    ("일", "japanese"),
    ("한자", "hanja"),
)


@dataclass(frozen=True, slots=True)
class Lang:
    """Dictionary a word was found in."""

    kind: LangKind
    label: str | None = None

    KOREAN: ClassVar[Lang]
    ENGLISH: ClassVar[Lang]
    JAPANESE: ClassVar[Lang]
    HANJA: ClassVar[Lang]

    def __post_init__(self) -> None:
        if self.kind not in VALID_KINDS:
            raise ValueError(f"kind must be one of {list(VALID_KINDS)}")
        if self.kind == "other" and not self.label:
            raise ValueError("label is required for other languages")

    @classmethod
    def other(cls, label: str) -> Lang:
        return cls("other", label)

    @classmethod
    def from_label(cls, label: str) -> Lang:
        """Map a dictionary label (e.g. ``영어사전``) to a language."""
        label = label.strip()
        for prefix, kind in LABEL_PREFIXES:
            if label.startswith(prefix):
                return cls(kind)
        return cls.other(label)

    @property
    def is_other(self) -> bool:
        return self.kind == "other"

    def __str__(self) -> str:
        if self.is_other:
            return str(self.label)
        return self.kind.capitalize()

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "label": self.label}


Lang.KOREAN = Lang("korean")
Lang.ENGLISH = Lang("english")
Lang.JAPANESE = Lang("japanese")
Lang.HANJA = Lang("hanja")


@dataclass(frozen=True, slots=True)
class Word:
    """Single dictionary entry."""

    word: str
    lang: Lang
    meaning: tuple[str, ...] = ()
    pronounce: str | None = None

    def __str__(self) -> str:
        parts: list[str] = []
        if self.lang.is_other:
            parts.append(f"({self.lang.label})")
        parts.append(self.word)
        if self.pronounce is not None:
            parts.append(self.pronounce)
        return "  ".join(parts) + "  " + ", ".join(self.meaning)

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "meaning": list(self.meaning),
            "pronounce": self.pronounce,
            "lang": self.lang.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class Search:
    """Result of one dictionary lookup."""

    words: tuple[Word, ...] = ()
    alternatives: tuple[str, ...] = ()

    @property
    def word(self) -> Word | None:
        """Best match, if any."""
        return self.words[0] if self.words else None

    @property
    def found(self) -> bool:
        return bool(self.words)

    def __str__(self) -> str:
        if self.words:
            return "\n".join(str(w) for w in self.words)
        if self.alternatives:
            return f"Did you mean: {', '.join(self.alternatives)}"
        return "Word not found"

    def to_dict(self) -> dict[str, Any]:
        return {
            "words": [w.to_dict() for w in self.words],
            "alternatives": list(self.alternatives),
        }
