"""Registry of temporary run files with guaranteed deletion."""

import logging
from pathlib import Path
from types import TracebackType

logger = logging.getLogger(__name__)


class RunRegistry:
    """
    Track run files as they are created and delete them all on exit.

    Used as a context manager around every stage that creates or consumes
    runs, so no run survives a finished or failed sort.
    """

    def __init__(self) -> None:
        self._paths: list[Path] = []

    def __enter__(self) -> "RunRegistry":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            self.remove_all()
        except OSError:
            # Keep the exception already propagating from the body.
            if exc_type is None:
                raise

    def __len__(self) -> int:
        return len(self._paths)

    @property
    def paths(self) -> list[Path]:
        return list(self._paths)

    def register(self, path: Path) -> Path:
        """Record a run path before anything is written to it."""
        self._paths.append(path)
        return path

    def remove_all(self) -> None:
        """
        Delete every registered run.

        Runs already deleted are skipped. The first deletion failure is
        re-raised once every other run has been attempted.
        """
        first_error: OSError | None = None
        for path in self._paths:
            try:
                path.unlink(missing_ok=True)
            except OSError as exc:
                logger.warning("Could not delete run %s: %s", path, exc)
                if first_error is None:
                    first_error = exc
        self._paths.clear()

        if first_error is not None:
            raise first_error
