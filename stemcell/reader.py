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

"""Load the manifest of an already extracted stemcell."""

import logging
import os

import pydantic

from stemcell import errors, yaml_utils
from stemcell.const import STEMCELL_IMAGE_FILENAME, STEMCELL_MANIFEST_FILENAME
from stemcell.extracted_stemcell import ExtractedStemcell
from stemcell.filesystem import FileSystem
from stemcell.models import Manifest

logger = logging.getLogger(__name__)

# Scalars kept as written in stemcell.MF, so that "version: 3312.10" stays intact.
_TEXT_KEYS = frozenset({"name", "version", "bosh_protocol"})


def read_manifest(extracted_path: str, fs: FileSystem) -> Manifest:
    """Read stemcell.MF from an extracted stemcell directory.

    A manifest without an image path points at the image file in
    the extracted directory.

    :param extracted_path: Root of the extracted stemcell contents.
    :param fs: The filesystem the extracted stemcell lives on.

    :return: The parsed manifest.
    :raise ManifestReadError: If stemcell.MF cannot be read.
    :raise ManifestParseError: If stemcell.MF is not a valid manifest.
    """
    path = os.path.join(extracted_path, STEMCELL_MANIFEST_FILENAME)

    logger.debug(f"Reading stemcell manifest from {path!r}")
    try:
        content = fs.read_file(path)
    except Exception as err:
        raise errors.ManifestReadError(path, str(err)) from err

    data = yaml_utils.load_mapping(content, source=path, text_keys=_TEXT_KEYS)
    try:
        manifest = Manifest.unmarshal(data)
    except pydantic.ValidationError as err:
        raise errors.ManifestParseError(path, str(err)) from err

    if not manifest.image_path:
        manifest.image_path = os.path.join(extracted_path, STEMCELL_IMAGE_FILENAME)

    return manifest


def open_extracted_stemcell(extracted_path: str, fs: FileSystem) -> ExtractedStemcell:
    """Wrap an extracted stemcell directory and its manifest."""
    return ExtractedStemcell(read_manifest(extracted_path, fs), extracted_path, fs)
