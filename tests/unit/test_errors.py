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

"""Stemcell error tests."""

import pytest
from craft_cli import CraftError

from stemcell import errors


def test_manifest_parse_error():
    error = errors.ManifestParseError("cloud properties", "bad indent")

    assert isinstance(error, CraftError)
    assert str(error) == "Failed to parse cloud properties: bad indent"
    assert error.resolution == "Make sure the content is a valid YAML mapping."


def test_manifest_write_error():
    error = errors.ManifestWriteError("fake-path/stemcell.MF", "disk full")

    assert str(error) == (
        "Failed to write stemcell manifest 'fake-path/stemcell.MF': disk full"
    )
    assert error.path == "fake-path/stemcell.MF"
    assert error.resolution is not None


def test_manifest_read_error():
    error = errors.ManifestReadError("fake-path/stemcell.MF", "missing")

    assert str(error) == "Failed to read stemcell manifest 'fake-path/stemcell.MF': missing"


@pytest.mark.parametrize(
    "error,message",
    [
        (
            errors.ExtractedPathRemoveError("fake-path", "busy"),
            "Failed to remove extracted stemcell 'fake-path': busy",
        ),
        (
            errors.StemcellPackError("out.tgz", "no space"),
            "Failed to pack stemcell into 'out.tgz': no space",
        ),
    ],
)
def test_errors_without_resolution(error, message):
    assert isinstance(error, errors.StemcellError)
    assert str(error) == message
    assert error.resolution is None
