# inventory/storage.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


class ProductFileStore:
    """JSON file holding the product collection as a single array."""

    def __init__(self, file_path: Path) -> None:
        self.file_path = Path(file_path)

    def ensure_file(self) -> None:
        # OSError here is left to propagate: the service cannot start without its data directory
        if not self.file_path.exists():
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self.file_path.write_text(json.dumps([]), encoding="utf-8")
            logger.info("Created empty product store at %s", self.file_path)

    def read(self) -> Any:
        """Return the decoded file contents; raises ``json.JSONDecodeError`` on bad JSON."""
        self.ensure_file()
        with self.file_path.open("r", encoding="utf-8") as f:
            return json.load(f)

    def write(self, records: List[Dict[str, Any]]) -> None:
        with self.file_path.open("w", encoding="utf-8") as f:
            json.dump(records, f, indent=2)
