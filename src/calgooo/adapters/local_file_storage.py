"""Local disk storage for uploaded images."""

from dataclasses import dataclass
from pathlib import Path

from calgooo.services.uploads import FileStorage


@dataclass
class LocalFileStorage(FileStorage):
    """Writes uploads into a directory on the local filesystem."""

    root: Path

    @classmethod
    def create(cls, root: Path) -> "LocalFileStorage":
        """Create the storage, making sure the directory exists."""
        root.mkdir(parents=True, exist_ok=True)
        return cls(root=root)

    def save(self, filename: str, content: bytes) -> None:
        """Write bytes to a file inside the upload directory."""
        target = self.root / Path(filename).name
        target.write_bytes(content)
