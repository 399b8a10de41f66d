"""Fetch the vocabulary word list from a URL or a local file"""

import json
from pathlib import Path
from typing import Any

import requests  # type: ignore[import-untyped]
from pydantic import ValidationError
from requests.adapters import HTTPAdapter  # type: ignore[import-untyped]
from urllib3.util import Retry

from ..config.settings import settings
from ..exceptions import WordListLoadError, WordListParseError
from ..logging_config import get_logger
from ..models.vocabulary import VocabularyList
from .constants import WordListConstants
from .interfaces import WordListSourceInterface

logger = get_logger(__name__)


def parse_word_list(payload: Any, source: str) -> VocabularyList:
    """Validate a decoded JSON document into a VocabularyList.

    The document must be an object whose ``words`` field is an array of
    objects with string ``word``, ``meaning`` and ``image`` fields.
    """
    if not isinstance(payload, dict):
        raise WordListParseError(source, "document is not a JSON object")
    if WordListConstants.WORDS_FIELD not in payload:
        raise WordListParseError(
            source, f"missing '{WordListConstants.WORDS_FIELD}' field"
        )
    if not isinstance(payload[WordListConstants.WORDS_FIELD], list):
        raise WordListParseError(
            source, f"'{WordListConstants.WORDS_FIELD}' is not an array"
        )

    try:
        return VocabularyList.model_validate(
            {"words": payload[WordListConstants.WORDS_FIELD]}
        )
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(p) for p in first.get("loc", ()))
        raise WordListParseError(
            source, f"invalid entry at {location}: {first.get('msg')}", e
        ) from e


class HttpWordListSource(WordListSourceInterface):
    """Fetches the word list JSON document over HTTP(S)"""

    def __init__(
        self,
        url: str | None = None,
        timeout: int | None = None,
        max_retries: int | None = None,
    ):
        self.url = url or settings.word_list.url
        self.timeout = int(
            timeout if timeout is not None else settings.word_list.request_timeout
        )
        self.max_retries = int(
            max_retries if max_retries is not None else settings.word_list.max_retries
        )
        self.session = requests.Session()
        headers = WordListConstants.DEFAULT_HEADERS.copy()
        headers["User-Agent"] = settings.word_list.user_agent
        self.session.headers.update(headers)
        self._configure_retries()

    @property
    def location(self) -> str:
        return self.url

    def _configure_retries(self) -> None:
        retry = Retry(
            total=self.max_retries,
            backoff_factor=0.3,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=("GET",),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    def fetch(self) -> VocabularyList:
        """Fetch the word list once"""
        logger.debug(f"Fetching word list: {self.url}")
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.Timeout as e:
            raise WordListLoadError(
                self.url, f"timed out after {self.timeout}s", e
            ) from e
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "error"
            raise WordListLoadError(self.url, f"HTTP {status}", e) from e
        except requests.RequestException as e:
            raise WordListLoadError(self.url, "network error", e) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise WordListParseError(self.url, "response is not valid JSON", e) from e

        return parse_word_list(payload, self.url)


class FileWordListSource(WordListSourceInterface):
    """Reads the word list JSON document from a local file"""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    @property
    def location(self) -> str:
        return str(self.path)

    def fetch(self) -> VocabularyList:
        logger.debug(f"Reading word list: {self.path}")
        try:
            with open(self.path, encoding=WordListConstants.ENCODING) as f:
                payload = json.load(f)
        except FileNotFoundError as e:
            raise WordListLoadError(self.location, "file not found", e) from e
        except json.JSONDecodeError as e:
            raise WordListParseError(self.location, "file is not valid JSON", e) from e
        except (OSError, UnicodeDecodeError) as e:
            raise WordListLoadError(self.location, "file could not be read", e) from e

        return parse_word_list(payload, self.location)


def create_word_list_source(location: str | None = None) -> WordListSourceInterface:
    """Pick a source for ``location``: http(s) URLs are fetched, anything else is a file path"""
    location = location or settings.word_list.url
    if location.lower().startswith(("http://", "https://")):
        return HttpWordListSource(location)
    return FileWordListSource(location)
