"""Configuration schema using Pydantic."""

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://dic.daum.net/search.do"
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; daumdic/0.1)"


class DictionaryConfig(BaseModel):
    """Dictionary endpoint and HTTP settings."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=10.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    follow_redirects: bool = True
