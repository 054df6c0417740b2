#!/usr/bin/env python3
# -*- Mode:Python; indent-tabs-mode:nil; tab-width:4 -*-
#
# Copyright (C) 2021, 2026 Canonical Ltd
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
import subprocess


def _git_describe() -> str:
    try:
        proc = subprocess.run(
            ["git", "describe", "--always", "--long"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=False,
            text=True,
        )
    except FileNotFoundError:
        return ""
    return proc.stdout.strip()


def determine_version():
    # Examples (git describe -> python package version):
    # 1.2.0-0-gad012482d -> 1.2.0
    # 1.2.0-16-g2d8943dbc -> 1.2.0.post16+git2d8943dbc
    #
    # For shallow clones or repositories missing tags:
    # 0ae7c04 -> 0.0.0+git0ae7c04
    desc = _git_describe()

    if not desc:
        return os.environ.get("STEMCELL_VERSION", "0.0.0+devel")

    split_desc = desc.split("-")
    if len(split_desc) != 3:
        return f"0.0.0+git{desc}"

    version, distance, commit = split_desc

    if distance == "0":
        return version

    return f"{version}.post{distance}+git{commit[1:]}"


if __name__ == "__main__":
    print(determine_version())
