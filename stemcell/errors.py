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

"""Stemcell error definitions."""

from craft_cli import CraftError


class StemcellError(CraftError):
    """Failure in a stemcell operation."""


class ManifestParseError(StemcellError):
    """Structured text could not be parsed into a mapping.

    :param source: Where the text came from.
    :param message: The parser's description of the problem.
    """

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(
            f"Failed to parse {source}: {message}",
            resolution="Make sure the content is a valid YAML mapping.",
        )


class ManifestReadError(StemcellError):
    """The stemcell manifest could not be read."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(
            f"Failed to read stemcell manifest {path!r}: {message}",
            resolution="Make sure the stemcell was extracted and is readable.",
        )


class ManifestWriteError(StemcellError):
    """The stemcell manifest could not be written."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(
            f"Failed to write stemcell manifest {path!r}: {message}",
            resolution=(
                "Make sure the extracted stemcell directory exists and its "
                "permissions and ownership are correct."
            ),
        )


class ExtractedPathRemoveError(StemcellError):
    """The extracted stemcell directory could not be removed."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Failed to remove extracted stemcell {path!r}: {message}")


class StemcellPackError(StemcellError):
    """The extracted stemcell could not be packed into a tarball."""

    def __init__(self, destination: str, message: str) -> None:
        self.destination = destination
        super().__init__(f"Failed to pack stemcell into {destination!r}: {message}")
