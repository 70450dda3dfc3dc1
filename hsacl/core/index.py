"""
Profile index: named ACL documents stored as files and tracked in a JSON index.
"""
import json
import os
import threading
import uuid
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Union
from ..exceptions import (
    ConfigurationError, ProfileExistsError, ProfileNotFoundError,
    SerializationError, StorageError
)

PROFILES_DIRNAME = "profiles"
INDEX_FILENAME = "index.json"
PROFILE_SUFFIX = ".hujson"


@dataclass
class ProfileRecord:
    """Location of a single profile's content file."""
    path: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, name: str, data) -> 'ProfileRecord':
        if not isinstance(data, dict) or not isinstance(data.get("path"), str):
            raise SerializationError(f"Invalid index entry for profile '{name}': {data!r}")
        return cls(path=data["path"])


class Index:
    """Maps profile names to content files and activates one into the output file.

    Every public method holds a single lock for its whole duration, so one
    instance can be shared between threads. Nothing protects the directory
    from a second process opening it.
    """

    def __init__(self, base_dir: Union[str, Path], output_path: Union[str, Path]):
        self.base_dir = Path(base_dir).resolve()
        self.output_path = Path(output_path)
        self.profiles_dir = self.base_dir / PROFILES_DIRNAME
        self.index_file = self.profiles_dir / INDEX_FILENAME
        self.entries: Dict[str, ProfileRecord] = {}
        self._lock = threading.Lock()

        with self._lock:
            self._ensure_layout()
            if self.index_file.exists():
                self.entries = self._load()
            else:
                self._save()

    @classmethod
    def open(cls, base_dir: Union[str, Path], output_path: Union[str, Path]) -> 'Index':
        """Open the index under base_dir, creating the layout if needed."""
        return cls(base_dir, output_path)

    def _ensure_layout(self):
        """Create base_dir and its profiles directory, checking base_dir is usable."""
        if not self.base_dir.exists():
            try:
                self.base_dir.mkdir(mode=0o755, parents=True)
            except OSError as e:
                raise ConfigurationError(f"Cannot create base directory '{self.base_dir}': {e}") from e

        if not self.base_dir.is_dir():
            raise ConfigurationError(f"Base directory '{self.base_dir}' is not a valid directory")

        if not os.access(self.base_dir, os.W_OK):
            raise ConfigurationError(f"Base directory '{self.base_dir}' is not writable")

        try:
            self.profiles_dir.mkdir(mode=0o755, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(f"Cannot create profiles directory '{self.profiles_dir}': {e}") from e

    def _load(self) -> Dict[str, ProfileRecord]:
        """Load entries from the index file."""
        try:
            with open(self.index_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise SerializationError(f"Malformed index file '{self.index_file}': {e}") from e
        except OSError as e:
            raise StorageError(f"Failed to read index '{self.index_file}': {e}") from e

        if not isinstance(data, dict):
            raise SerializationError(f"Index file '{self.index_file}' does not contain a JSON object")

        return {name: ProfileRecord.from_dict(name, info) for name, info in data.items()}

    def _save(self):
        """Rewrite the index file from the in-memory entries."""
        try:
            payload = json.dumps(
                {name: record.to_dict() for name, record in self.entries.items()},
                indent=4
            )
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize index: {e}") from e

        # Write a temporary file first, then replace the index with it
        temp_file = self.index_file.with_suffix('.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                f.write(payload)
            temp_file.replace(self.index_file)
        except OSError as e:
            try:
                temp_file.unlink()
            except OSError:
                pass  # best effort, the save error is what gets reported
            raise StorageError(f"Failed to save index: {e}") from e

    def _new_profile_path(self) -> Path:
        return self.profiles_dir / f"{uuid.uuid4()}{PROFILE_SUFFIX}"

    def _require(self, name: str) -> ProfileRecord:
        record = self.entries.get(name)
        if record is None:
            raise ProfileNotFoundError(f"Profile '{name}' does not exist")
        return record

    def _read_content(self, name: str, record: ProfileRecord) -> bytes:
        try:
            with open(record.path, 'rb') as f:
                return f.read()
        except OSError as e:
            raise StorageError(f"Failed to read profile '{name}' from {record.path}: {e}") from e

    def set(self, name: str, content: Union[bytes, str]):
        """Store content under name, replacing the content of an existing profile."""
        if isinstance(content, str):
            content = content.encode('utf-8')

        with self._lock:
            record = self.entries.get(name)
            is_new = record is None
            profile_path = self._new_profile_path() if is_new else Path(record.path)

            try:
                with open(profile_path, 'wb') as f:
                    f.write(content)
            except OSError as e:
                if is_new:
                    try:
                        profile_path.unlink()
                    except OSError:
                        pass  # best effort, the write error is what gets reported
                raise StorageError(f"Failed to write profile '{name}' to {profile_path}: {e}") from e

            if is_new:
                self.entries[name] = ProfileRecord(path=str(profile_path))

            self._save()

    def remove(self, name: str):
        """Forget a profile. Missing names are ignored; the content file is kept."""
        with self._lock:
            self.entries.pop(name, None)
            self._save()

    def rename(self, old_name: str, new_name: str):
        """Move a profile to a new name without touching its content."""
        with self._lock:
            self._require(old_name)
            if new_name in self.entries:
                raise ProfileExistsError(f"Profile '{new_name}' already exists")

            self.entries[new_name] = self.entries.pop(old_name)
            self._save()

    def apply(self, name: str):
        """Copy a profile's content over the output file."""
        with self._lock:
            content = self._read_content(name, self._require(name))
            try:
                with open(self.output_path, 'wb') as f:
                    f.write(content)
            except OSError as e:
                raise StorageError(f"Failed to write output file {self.output_path}: {e}") from e

    def get(self, name: str) -> bytes:
        """Return the stored content of a profile."""
        with self._lock:
            return self._read_content(name, self._require(name))

    def record(self, name: str) -> ProfileRecord:
        """Return a copy of the index record for a profile."""
        with self._lock:
            return ProfileRecord(path=self._require(name).path)

    def names(self) -> List[str]:
        """Return all profile names, sorted."""
        with self._lock:
            return sorted(self.entries)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self.entries

    def __len__(self) -> int:
        with self._lock:
            return len(self.entries)
