"""Shared file checking: errors, paths and the Registry file size limit."""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

logger = logging.getLogger(__name__)

# Terraform Registry storage limits.
REGISTRY_MAXIMUM_NUMBER_OF_FILES = 2000
REGISTRY_MAXIMUM_SIZE_OF_FILE = 500000


class CheckError(Exception):
    """A documentation check failed."""


class MultiCheckError(CheckError):
    """Several documentation checks failed; nested collections are flattened."""

    def __init__(self, errors: Iterable[Exception]) -> None:
        flattened: list[Exception] = []
        for error in errors:
            if isinstance(error, MultiCheckError):
                flattened.extend(error.errors)
            else:
                flattened.append(error)
        self.errors = flattened
        super().__init__(self._format())

    def _format(self) -> str:
        if len(self.errors) == 1:
            return f"1 error occurred:\n\t* {self.errors[0]}\n\n"
        points = "\n\t".join(f"* {error}" for error in self.errors)
        return f"{len(self.errors)} errors occurred:\n\t{points}\n\n"

    def __str__(self) -> str:
        return self._format()


@dataclass
class FileOptions:
    """Where documentation files are looked up."""

    base_path: str = ""

    def full_path(self, path: str) -> str:
        """Return the path joined to the base path, if there is one."""
        if self.base_path:
            return os.path.normpath(os.path.join(self.base_path, path))
        return path


class FileCheck(ABC):
    """A check of single documentation files."""

    @abstractmethod
    def run(self, path: str) -> None:
        """Check one file, raising CheckError on failure."""

    def run_all(self, files: Iterable[str]) -> None:
        """Check every file, raising MultiCheckError with all failures."""
        errors = []
        for file in files:
            try:
                self.run(file)
            except CheckError as err:
                errors.append(err)
        if errors:
            raise MultiCheckError(errors)


def file_size_check(fullpath: str) -> int:
    """Return the file's size, raising CheckError at or above the Registry limit."""
    try:
        size = os.stat(fullpath).st_size
    except OSError as err:
        raise CheckError(str(err)) from err

    logger.debug("File %s size: %d (limit: %d)", fullpath, size, REGISTRY_MAXIMUM_SIZE_OF_FILE)
    if size >= REGISTRY_MAXIMUM_SIZE_OF_FILE:
        raise CheckError(
            f"exceeded maximum ({REGISTRY_MAXIMUM_SIZE_OF_FILE}) size of documentation file "
            f"for Terraform Registry: {size}"
        )
    return size