"""
WordMaster: Command-line import
-------------------------------

Loads a "term;definition" text file into the local word store, replacing
the current collection, so the next app start opens straight into study.

Usage:
    python import_words.py words.txt
"""

import asyncio
import sys
from typing import List, Optional

from wordmaster.config import Config
from wordmaster.services import JSONFileStorage, VocabularyImporter, WordStore
from wordmaster.utils.logger import get_logger, setup_logger

logger = get_logger("wordmaster.cli")


async def main(argv: list) -> bool:
    """Main entry point."""
    if len(argv) != 1:
        print("Usage: python import_words.py FILE")
        return False

    path = argv[0]
    importer = VocabularyImporter()

    try:
        result = await importer.import_file_async(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", path, e)
        return False

    if not result.ok:
        logger.error("No words recognized in %s (expected: term;definition)", path)
        return False

    store = WordStore(JSONFileStorage(Config.STORAGE_FILE))
    store.replace_all(result.records)
    print(f"Imported {result.count} words into {Config.STORAGE_FILE}")
    return True


def run(argv: Optional[List[str]] = None) -> int:
    """Run the import and return the process exit code."""
    setup_logger(Config.LOG_LEVEL, Config.LOG_FILE or None)
    try:
        success = asyncio.run(main(sys.argv[1:] if argv is None else argv))
    except KeyboardInterrupt:
        print("\n[!] Aborted by user.")
        return 1
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(run())
