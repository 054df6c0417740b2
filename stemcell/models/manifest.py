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

"""Stemcell manifest (stemcell.MF) definition."""

import datetime
from typing import Any

import pydantic

PropertyValue = (
    str
    | bool
    | int
    | float
    | datetime.datetime
    | datetime.date
    | list[Any]
    | dict[str, Any]
    | None
)
"""A cloud property value as parsed from YAML."""


class Manifest(pydantic.BaseModel):
    """Descriptor of a stemcell, stored as stemcell.MF in the extracted directory."""

    model_config = pydantic.ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    name: str = ""
    version: str = ""

    os: str = pydantic.Field(default="", alias="operating_system")
    """The base operating system, e.g. ``ubuntu-jammy``."""

    image_path: str = ""
    """Path to the packaged disk image."""

    sha1: str = ""
    """Checksum of the disk image."""

    bosh_protocol: str = ""
    api_version: int | None = None
    stemcell_formats: list[str] = pydantic.Field(default_factory=list)

    cloud_properties: dict[str, PropertyValue] = pydantic.Field(
        default_factory=dict
    )
    """Provider specific metadata, e.g. ``infrastructure: vsphere``."""

    @pydantic.field_validator(
        "name", "version", "os", "image_path", "sha1", "bosh_protocol", mode="before"
    )
    @classmethod
    def _empty_or_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        # A float has already lost trailing zeros, only integers are taken.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @classmethod
    def unmarshal(cls, data: dict[str, Any]) -> "Manifest":
        """Create and populate a new ``Manifest`` object from dictionary data.

        :param data: The dictionary data to unmarshal.
        :return: The newly created object.
        :raise TypeError: If data is not a dictionary.
        """
        if not isinstance(data, dict):
            raise TypeError("data is not a dictionary")

        return cls.model_validate(data)

    def marshal(self) -> dict[str, Any]:
        """Create a dictionary keyed the way stemcell.MF is.

        :return: The manifest as a dictionary.
        """
        data = self.model_dump(by_alias=True)
        if data["api_version"] is None:
            del data["api_version"]
        return data
