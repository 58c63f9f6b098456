from dataclasses import FrozenInstanceError

import pytest

from daumdic.models import Lang, Search, Word


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("한국어사전", Lang.KOREAN),
        ("영어사전", Lang.ENGLISH),
        ("일본어사전", Lang.JAPANESE),
        ("한자사전", Lang.HANJA),
        (" 영어사전 ", Lang.ENGLISH),
        ("중국어사전", Lang("other", "중국어사전")),
    ],
)
def test_lang_from_label(label: str, expected: Lang) -> None:
    assert Lang.from_label(label) == expected


def test_lang_str() -> None:
    assert str(Lang.KOREAN) == "Korean"
    assert str(Lang.other("베트남어사전")) == "베트남어사전"


def test_word_str_with_pronunciation() -> None:
    word = Word(
        word="resist",
        lang=Lang.ENGLISH,
        meaning=("저항하다", "반대하다"),
        pronounce="[rizíst]",
    )
    assert str(word) == "resist  [rizíst]  저항하다, 반대하다"


def test_word_str_for_other_language_includes_label() -> None:
    word = Word(word="加油站", lang=Lang.other("중국어사전"), meaning=("주유소",))
    assert str(word) == "(중국어사전)  加油站  주유소"


def test_values_are_immutable_and_compare_by_value() -> None:
    a = Word(word="zoo", lang=Lang.ENGLISH, meaning=("동물원",))
    b = Word(word="zoo", lang=Lang.ENGLISH, meaning=("동물원",))

    assert a == b
    assert hash(a) == hash(b)
    with pytest.raises(FrozenInstanceError):
        a.word = "zoos"  # type: ignore[misc]


def test_search_str_variants() -> None:
    word = Word(word="zoo", lang=Lang.ENGLISH, meaning=("동물원",))

    assert str(Search(words=(word, word))) == "zoo  동물원\nzoo  동물원"
    assert str(Search(alternatives=("resist", "resistant"))) == "Did you mean: resist, resistant"
    assert str(Search()) == "Word not found"


def test_search_to_dict() -> None:
    search = Search(
        words=(Word(word="方", lang=Lang.HANJA, meaning=("모",), pronounce="방"),),
        alternatives=("房",),
    )

    assert search.to_dict() == {
        "words": [
            {
                "word": "方",
                "meaning": ["모"],
                "pronounce": "방",
                "lang": {"kind": "hanja", "label": None},
            }
        ],
        "alternatives": ["房"],
    }


@pytest.mark.parametrize(("kind", "label"), [("bogus", None), ("other", None), ("other", "")])
def test_lang_rejects_invalid_values(kind: str, label) -> None:
    with pytest.raises(ValueError):
        Lang(kind, label)  # type: ignore[arg-type]
