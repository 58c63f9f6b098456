"""
daumdic - look up words (Korean, English, Japanese, Chinese, ...) in the
Daum dictionary and get their meaning and pronunciation.
"""

from daumdic.client import DictionaryClient, search, search_sync
from daumdic.config import DictionaryConfig
from daumdic.errors import DaumDicError, EmptyWordError, FetchError, ParseError
from daumdic.models import Lang, Search, Word
from daumdic.parser import parse_document

__version__ = "0.1.0"

__all__ = [
    "DictionaryClient",
    "DictionaryConfig",
    "search",
    "search_sync",
    "parse_document",
    "Lang",
    "Word",
    "Search",
    "DaumDicError",
    "EmptyWordError",
    "FetchError",
    "ParseError",
]
