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

import os
from typing import Dict, List, Optional, Tuple

import pytest

from stemcell.models import Manifest


class FakeFileSystem:
    """In-memory filesystem with injectable failures."""

    def __init__(self) -> None:
        self.files: Dict[str, bytes] = {}
        self.write_file_error: Optional[Exception] = None
        self.read_file_error: Optional[Exception] = None
        self.remove_all_error: Optional[Exception] = None
        self.create_tarball_error: Optional[Exception] = None
        self.remove_all_calls: List[str] = []
        self.tarballs: List[Tuple[str, str]] = []

    def write_file(self, path: str, content: bytes) -> None:
        if self.write_file_error:
            raise self.write_file_error
        self.files[path] = content

    def read_file(self, path: str) -> bytes:
        if self.read_file_error:
            raise self.read_file_error
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(f"No such file: {path!r}") from None

    def file_exists(self, path: str) -> bool:
        return path in self.files or any(
            name.startswith(path.rstrip(os.sep) + os.sep) for name in self.files
        )

    def remove_all(self, path: str) -> None:
        self.remove_all_calls.append(path)
        if self.remove_all_error:
            raise self.remove_all_error
        prefix = path.rstrip(os.sep) + os.sep
        for name in list(self.files):
            if name == path or name.startswith(prefix):
                del self.files[name]

    def create_tarball(self, source_dir: str, destination: str) -> None:
        if self.create_tarball_error:
            raise self.create_tarball_error
        self.tarballs.append((source_dir, destination))
        self.files[destination] = b"fake-tarball"


@pytest.fixture
def fake_fs():
    """An in-memory filesystem."""
    yield FakeFileSystem()


@pytest.fixture
def extracted_path():
    yield "fake-path"


@pytest.fixture
def full_manifest():
    """A manifest with every field populated."""
    yield Manifest(
        image_path="fake-image-path",
        name="fake-stemcell-name",
        version="3312.12",
        os="centos-7",
        sha1="fake-sha",
        bosh_protocol="1",
        api_version=3,
        stemcell_formats=["vsphere-ova", "vsphere-ovf"],
        cloud_properties={"infrastructure": "vsphere"},
    )
