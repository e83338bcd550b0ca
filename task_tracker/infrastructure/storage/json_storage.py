"""JSON file record store with Result-based error handling.

Keeps the whole task collection as one JSON array in a single file. The
store has no domain knowledge: it only loads and replaces the array.
"""

import json
import logging
from pathlib import Path

from task_tracker.domain.repository import TaskRecord
from task_tracker.domain.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class JsonFileStore:
    """Whole-collection JSON file I/O returning Result values.

    A missing file is created holding an empty array on first access.
    Invalid JSON and non-array content are reported as errors rather than
    treated as empty, so a corrupt file is never silently overwritten.

    Example:
        store = JsonFileStore(Path("~/.task-tracker/tasks.json").expanduser())
        result = store.load_records()
        if isinstance(result, Ok):
            records = result.value
        else:
            print(f"Error: {result.error}")
    """

    def __init__(self, path: Path, indent: int = 2) -> None:
        self.path = path
        self.indent = indent

    def initialize(self) -> Result[None, str]:
        """Create the parent directory and an empty collection if missing."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                logger.debug(f"Creating empty task store at {self.path}")
                self.path.write_text("[]", encoding="utf-8")
            return Ok(None)
        except PermissionError:
            return Err(f"Permission denied initializing {self.path}")
        except OSError as e:
            return Err(f"Error initializing {self.path}: {e}")

    def load_records(self) -> Result[list[TaskRecord], str]:
        """Read every record from the file.

        Returns:
            Ok(list) with the records, Err(str) with a message if the file
            cannot be read or does not hold a JSON array.
        """
        init = self.initialize()
        if isinstance(init, Err):
            return init

        try:
            content = self.path.read_text(encoding="utf-8")
            if not content.strip():
                return Ok([])
            data = json.loads(content)
        except json.JSONDecodeError as e:
            return Err(f"Invalid JSON in {self.path}: {e}")
        except PermissionError:
            return Err(f"Permission denied reading {self.path}")
        except OSError as e:
            return Err(f"Error reading {self.path}: {e}")

        if not isinstance(data, list):
            return Err(f"Store file {self.path} contains invalid data (not an array)")

        logger.debug(f"Loaded {len(data)} records from {self.path}")
        return Ok(data)

    def save_records(self, records: list[TaskRecord]) -> Result[None, str]:
        """Replace the file content with ``records``.

        Returns:
            Ok(None) if successful, Err(str) with a message if it failed.
        """
        if not isinstance(records, list):
            return Err("Invalid input: records must be a list")

        try:
            content = json.dumps(records, indent=self.indent, ensure_ascii=False)
        except TypeError as e:
            return Err(f"Data not JSON serializable: {e}")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content, encoding="utf-8")
        except PermissionError:
            return Err(f"Permission denied writing {self.path}")
        except OSError as e:
            return Err(f"Error writing {self.path}: {e}")

        logger.debug(f"Wrote {len(records)} records to {self.path}")
        return Ok(None)

    def clear(self) -> Result[None, str]:
        """Replace the collection with an empty array."""
        return self.save_records([])
