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

"""A stemcell unpacked into a directory, along with its manifest."""

import logging
import os

from stemcell import errors, yaml_utils
from stemcell.const import STEMCELL_MANIFEST_FILENAME
from stemcell.filesystem import FileSystem
from stemcell.models import Manifest

logger = logging.getLogger(__name__)


class ExtractedStemcell:
    """A stemcell manifest paired with the directory it was extracted into.

    The manifest is owned and mutated in place by the setters. The filesystem
    is shared with the caller. After :meth:`delete` the instance should not
    be used anymore.

    :param manifest: The manifest describing the stemcell.
    :param extracted_path: Root of the extracted stemcell contents.
    :param fs: The filesystem the extracted stemcell lives on.
    """

    def __init__(self, manifest: Manifest, extracted_path: str, fs: FileSystem):
        self._manifest = manifest.model_copy(deep=True)
        self._extracted_path = extracted_path
        self._fs = fs

    def __str__(self) -> str:
        return (
            f"ExtractedStemcell{{name={self._manifest.name} "
            f"version={self._manifest.version}}}"
        )

    @property
    def extracted_path(self) -> str:
        """Root of the extracted stemcell contents."""
        return self._extracted_path

    @property
    def manifest_path(self) -> str:
        """Location of stemcell.MF inside the extracted directory."""
        return os.path.join(self._extracted_path, STEMCELL_MANIFEST_FILENAME)

    def manifest(self) -> Manifest:
        """Return the current manifest."""
        return self._manifest

    def os_and_version(self) -> str:
        """Return ``<os>/<version>``."""
        return f"{self._manifest.os}/{self._manifest.version}"

    def set_name(self, new_name: str) -> None:
        self._manifest.name = new_name

    def set_version(self, new_version: str) -> None:
        self._manifest.version = new_version

    def set_cloud_properties(self, raw: str) -> None:
        """Merge YAML encoded cloud properties into the manifest.

        Keys in ``raw`` overwrite existing keys regardless of the type of
        their current value. Existing keys not in ``raw`` are kept.

        :param raw: A YAML mapping, e.g. ``"---\\nkey: value\\n"``.

        :raise ManifestParseError: If raw is not a YAML mapping. The manifest
            is left unmodified.
        """
        overrides = yaml_utils.load_mapping(raw, source="cloud properties")

        logger.debug(f"Merging cloud properties {sorted(overrides)!r} into {self}")
        self._manifest.cloud_properties.update(overrides)

    def save(self) -> None:
        """Write the manifest to stemcell.MF in the extracted directory.

        :raise ManifestWriteError: If the file cannot be written.
        """
        path = self.manifest_path
        content = yaml_utils.dump(self._manifest.marshal())

        logger.debug(f"Writing stemcell manifest to {path!r}")
        try:
            self._fs.write_file(path, content.encode())
        except Exception as err:
            raise errors.ManifestWriteError(path, str(err)) from err

    def delete(self) -> None:
        """Remove the extracted directory and everything in it.

        :raise ExtractedPathRemoveError: If removal fails.
        """
        logger.debug(f"Removing extracted stemcell {self._extracted_path!r}")
        try:
            self._fs.remove_all(self._extracted_path)
        except Exception as err:
            raise errors.ExtractedPathRemoveError(
                self._extracted_path, str(err)
            ) from err

    def pack(self, destination_path: str) -> str:
        """Save the manifest and pack the extracted directory into a tarball.

        The extracted directory is removed once the tarball is written.

        :param destination_path: Where to write the gzipped tarball.

        :return: The path to the tarball.
        :raise ManifestWriteError: If the manifest cannot be written.
        :raise StemcellPackError: If the tarball cannot be created.
        :raise ExtractedPathRemoveError: If the extracted directory cannot be
            removed.
        """
        self.save()

        logger.debug(f"Packing {self} into {destination_path!r}")
        try:
            self._fs.create_tarball(self._extracted_path, destination_path)
        except Exception as err:
            raise errors.StemcellPackError(destination_path, str(err)) from err

        self.delete()
        return destination_path
