"""Writes rendered artifacts to disk.

Policy:

- Directories are created with ``mkdir(parents=True, exist_ok=True)``, so an
  existing directory (or one created concurrently by another process) is not
  an error.
- Files are always overwritten in full.  There is no merge and no backup:
  re-running the generator on a customised file discards the edits.
- Writes are not transactional.  The first failure aborts the remaining
  writes and files already written stay on disk; the raised
  ``FilesystemError`` carries the partial report so callers can tell the
  user what was written.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .errors import FilesystemError
from .models import GeneratedArtifact, GenerationReport, ReportEntry


class FileMaterializer:
    """Creates directories and writes artifact content under an output root."""

    def __init__(self, output_root: str | Path = ".") -> None:
        self.output_root = Path(output_root)

    def materialize(self, artifacts: Iterable[GeneratedArtifact]) -> GenerationReport:
        """Write every artifact in order and return the manifest.

        Raises:
            FilesystemError: on the first directory or file that cannot be
                written; ``report`` lists the artifacts written before it.
        """
        entries: list[ReportEntry] = []
        created_dirs: set[Path] = set()

        for artifact in artifacts:
            path = artifact.absolute_path
            directory = path.parent
            if directory not in created_dirs:
                try:
                    directory.mkdir(parents=True, exist_ok=True)
                except OSError as exc:
                    raise FilesystemError(
                        directory, exc, GenerationReport(entries=tuple(entries))
                    ) from exc
                created_dirs.add(directory)

            data = artifact.encoded
            try:
                # Bytes, not text: no newline translation, size is exact.
                path.write_bytes(data)
            except OSError as exc:
                raise FilesystemError(
                    path, exc, GenerationReport(entries=tuple(entries))
                ) from exc

            entries.append(
                ReportEntry(relative_path=self._relative(artifact), byte_size=len(data))
            )

        return GenerationReport(entries=tuple(entries))

    def _relative(self, artifact: GeneratedArtifact) -> str:
        try:
            return artifact.absolute_path.relative_to(self.output_root.absolute()).as_posix()
        except ValueError:
            return artifact.relative_path
