"""
Vocabulary Importer - Turns uploaded text into word records.

Format: one "term;definition" pair per line. Blank lines and lines without
the delimiter are skipped silently.
"""

import time
from dataclasses import dataclass, field
from typing import List, Optional

import aiofiles

from ..config import Config
from ..models import WordRecord, WordStatus
from ..utils.logger import get_logger
from ..utils.parsing import TextParser

logger = get_logger(__name__)


@dataclass
class ImportResult:
    """Outcome of parsing one file."""

    records: List[WordRecord] = field(default_factory=list)
    skipped: int = 0

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def ok(self) -> bool:
        """False when nothing in the input could be parsed."""
        return bool(self.records)


class VocabularyImporter:
    """
    Parser for delimited vocabulary files.

    Ids are millisecond timestamps offset by line position. The importer
    remembers the highest id it issued, so ids never repeat across imports.
    """

    def __init__(self, delimiter: str = Config.FIELD_DELIMITER):
        self.delimiter = delimiter
        self._last_id: int = 0

    def _next_id_base(self) -> int:
        base = int(time.time() * 1000)
        return max(base, self._last_id + 1)

    def parse_text(self, text: str) -> ImportResult:
        """
        Parse raw text into word records.

        Args:
            text: Whole file content

        Returns:
            ImportResult with parsed records and the number of skipped lines
        """
        lines = (text or "").split('\n')
        base = self._next_id_base()
        records: List[WordRecord] = []
        skipped = 0

        for index, line in enumerate(lines):
            clean = line.strip()
            if index == 0 and clean.startswith(TextParser.BOM):
                clean = clean[len(TextParser.BOM):].strip()
            if not clean:
                continue

            pair = TextParser.split_pair(clean, self.delimiter)
            if pair is None:
                skipped += 1
                continue

            term, definition = pair
            records.append(WordRecord(
                id=base + index,
                term=term,
                definition=definition,
                status=WordStatus.UNKNOWN,
            ))

        if records:
            self._last_id = records[-1].id

        if skipped:
            logger.debug("Skipped %d malformed lines", skipped)

        return ImportResult(records=records, skipped=skipped)

    @staticmethod
    def accepts_file(path: str) -> bool:
        """True if `path` has one of the importable text extensions."""
        return path.strip().lower().endswith(Config.IMPORT_EXTENSIONS)

    async def read_file_async(self, path: str) -> str:
        """
        Read a whole text file asynchronously.

        Args:
            path: File path

        Returns:
            File content (UTF-8, BOM stripped)

        Raises:
            OSError: If the file cannot be opened
            UnicodeDecodeError: If the file is not valid UTF-8
        """
        async with aiofiles.open(path, 'r', encoding='utf-8-sig') as f:
            return await f.read()

    async def import_file_async(self, path: str) -> ImportResult:
        """
        Read and parse a file in one step.

        Args:
            path: File path

        Returns:
            ImportResult; check .ok before replacing the store
        """
        text = await self.read_file_async(path)
        result = self.parse_text(text)
        logger.info("Parsed %d words from %s", result.count, path)
        return result


def parse_vocabulary(text: str, delimiter: Optional[str] = None) -> List[WordRecord]:
    """Convenience wrapper: parse text and return just the records."""
    importer = VocabularyImporter(delimiter or Config.FIELD_DELIMITER)
    return importer.parse_text(text).records
