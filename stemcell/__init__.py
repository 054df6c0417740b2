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

"""Inspect, customize and repack extracted stemcells."""

from importlib import metadata

from .extracted_stemcell import ExtractedStemcell
from .filesystem import FileSystem, LocalFileSystem
from .models import Manifest
from .reader import open_extracted_stemcell, read_manifest


def _get_version():
    try:
        return metadata.version("stemcell")
    except metadata.PackageNotFoundError:
        return "0.0.0+devel"


__version__ = _get_version()

__all__ = [
    "ExtractedStemcell",
    "FileSystem",
    "LocalFileSystem",
    "Manifest",
    "open_extracted_stemcell",
    "read_manifest",
]
