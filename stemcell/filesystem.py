# -*- Mode:Python; indent-tabs-mode:nil; tab-width:4 -*-
#
# Copyright 2026 Canonical Ltd.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3 as
# published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""Filesystem access used by extracted stemcells."""

import logging
import os
import shutil
import tarfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    """Filesystem operations an extracted stemcell relies on.

    Whatever an implementation raises on failure is wrapped by the caller in a
    :class:`~stemcell.errors.StemcellError`.
    """

    def write_file(self, path: str, content: bytes) -> None:
        """Create or overwrite the file at path."""

    def read_file(self, path: str) -> bytes:
        """Return the contents of the file at path."""

    def file_exists(self, path: str) -> bool:
        """Whether path exists."""

    def remove_all(self, path: str) -> None:
        """Remove path and everything below it."""

    def create_tarball(self, source_dir: str, destination: str) -> None:
        """Write a gzipped tarball with the contents of source_dir."""


class LocalFileSystem:
    """FileSystem implementation backed by the local disk."""

    def write_file(self, path: str, content: bytes) -> None:
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(content)

    def read_file(self, path: str) -> bytes:
        return Path(path).read_bytes()

    def file_exists(self, path: str) -> bool:
        return os.path.lexists(path)

    def remove_all(self, path: str) -> None:
        """Remove a file or directory tree, succeeding if it does not exist."""
        if not os.path.lexists(path):
            logger.debug(f"Nothing to remove at {path!r}")
            return

        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.unlink(path)

    def create_tarball(self, source_dir: str, destination: str) -> None:
        """Write a gzipped tarball with the contents of source_dir at its root."""
        Path(destination).parent.mkdir(parents=True, exist_ok=True)
        with tarfile.open(destination, "w:gz") as tar:
            for entry in sorted(os.listdir(source_dir)):
                tar.add(os.path.join(source_dir, entry), arcname=entry)
