from pathlib import Path
import json
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


class DocumentStore:
    """The whole database as one JSON document on disk."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def initialize(self):
        """Create the backing file as ``{}`` unless it already exists.

        Existing content is never touched, even if it isn't valid JSON.
        """
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.write_document({})
        logger.info("Created empty document at %s", self.path)

    def read_document(self) -> Dict[str, Any]:
        # FileNotFoundError / JSONDecodeError are left to the caller
        with self.path.open("r", encoding="utf-8") as f:
            return json.load(f)

    def write_document(self, doc: Dict[str, Any]):
        # Serialize before opening: "w" truncates, so a bad doc must not get that far
        text = json.dumps(doc, indent=2, ensure_ascii=False)
        with self.path.open("w", encoding="utf-8") as f:
            f.write(text)
