import asyncio
import logging
import re
from pathlib import Path
from typing import Mapping, Protocol

from .errors import TemplateNotFound

logger = logging.getLogger(__name__)

# e.g. "en", "pt", "pt-BR", "zh_Hant"; anything else never reaches the filesystem
LANGUAGE_CODE_RE = re.compile(r"^[A-Za-z]{2,3}([-_][A-Za-z0-9]{2,8})?$")


class MessageSource(Protocol):
    async def read(self, language_code: str) -> str:
        """Returns the raw template for the language or raises TemplateNotFound."""
        ...

    def available_languages(self) -> list[str]:
        ...


class FileMessageSource:
    """
    Templates stored as one UTF-8 file per language: <directory>/<code>.txt.
    Every read goes to disk; nothing is cached.
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _path_for(self, language_code: str) -> Path:
        if not LANGUAGE_CODE_RE.match(language_code or ""):
            logger.warning(f"Rejected malformed language code: {language_code!r}")
            raise TemplateNotFound(language_code)
        return self.directory / f"{language_code}.txt"

    async def read(self, language_code: str) -> str:
        path = self._path_for(language_code)
        logger.debug(f"Reading template for '{language_code}' from {path}")
        try:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except FileNotFoundError:
            logger.warning(f"Template file not found for language '{language_code}': {path}")
            raise TemplateNotFound(language_code) from None
        return text.rstrip("\r\n")

    def available_languages(self) -> list[str]:
        if not self.directory.is_dir():
            return []
        return sorted(p.stem for p in self.directory.glob("*.txt") if LANGUAGE_CODE_RE.match(p.stem))


class InMemoryMessageSource:
    """Key/value template store, handy for tests and embedded templates."""

    def __init__(self, templates: Mapping[str, str] | None = None):
        self.templates = dict(templates or {})
        self.reads = 0

    async def read(self, language_code: str) -> str:
        self.reads += 1
        try:
            return self.templates[language_code]
        except KeyError:
            raise TemplateNotFound(language_code) from None

    def available_languages(self) -> list[str]:
        return sorted(self.templates)
