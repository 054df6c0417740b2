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

"""YAML helpers for stemcell manifests and cloud properties."""

from typing import Any, Collection, Dict, Optional, TextIO, Union

import yaml

from stemcell.errors import ManifestParseError

_STR_TAG = "tag:yaml.org,2002:str"
_NULL_TAG = "tag:yaml.org,2002:null"


def load(stream: Union[TextIO, str, bytes]) -> Any:
    """Safely load YAML in ordered manner."""
    return yaml.load(stream, Loader=_SafeOrderedLoader)


def dump(
    data: Dict[str, Any], *, stream: Optional[TextIO] = None, sort_keys: bool = False
) -> Optional[str]:
    """Safely dump YAML in block style."""
    return yaml.dump(
        data,
        stream=stream,
        Dumper=_SafeOrderedDumper,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=sort_keys,
    )


def load_mapping(
    text: Union[str, bytes], *, source: str, text_keys: Collection[str] = ()
) -> Dict[str, Any]:
    """Load a YAML document that must be a mapping.

    An empty document is an empty mapping. Top level keys are
    converted to strings.

    :param text: The YAML document.
    :param source: Description of where the document came from, used in errors.
    :param text_keys: Top level keys whose plain scalar values are kept as
        written, e.g. ``version: 3312.10`` loads as ``"3312.10"``. Nulls are
        still loaded as ``None``.

    :return: The parsed mapping.
    :raise ManifestParseError: If the document is malformed or not a mapping.
    """
    try:
        data = _load_keeping_text(text, text_keys)
    except yaml.MarkedYAMLError as err:
        mark = err.problem_mark
        if mark is None:
            raise ManifestParseError(source, str(err)) from err
        raise ManifestParseError(
            source,
            f"{err.problem} on line {mark.line + 1}, column {mark.column + 1}",
        ) from err
    except yaml.reader.ReaderError as err:
        raise ManifestParseError(
            source,
            f"invalid character {chr(err.character)!r} at position "
            f"{err.position + 1}: {err.reason}",
        ) from err
    except yaml.YAMLError as err:
        raise ManifestParseError(source, str(err)) from err

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ManifestParseError(
            source, f"expected a mapping, found {type(data).__name__}"
        )

    return {str(key): value for key, value in data.items()}


def _load_keeping_text(stream: Union[str, bytes], text_keys: Collection[str]) -> Any:
    loader = _SafeOrderedLoader(stream)
    try:
        node = loader.get_single_node()
        if node is None:
            return None
        if isinstance(node, yaml.MappingNode):
            for key_node, value_node in node.value:
                if (
                    isinstance(key_node, yaml.ScalarNode)
                    and key_node.value in text_keys
                    and isinstance(value_node, yaml.ScalarNode)
                    and value_node.style is None
                    and value_node.tag != _NULL_TAG
                ):
                    value_node.tag = _STR_TAG
        return loader.construct_document(node)
    finally:
        loader.dispose()


class _SafeOrderedLoader(yaml.SafeLoader):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.add_constructor(
            yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _dict_constructor
        )


class _SafeOrderedDumper(yaml.SafeDumper):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.add_representer(str, _str_presenter)


def _dict_constructor(loader, node):
    # Necessary in order to make yaml merge tags work
    loader.flatten_mapping(node)
    value = loader.construct_pairs(node, deep=True)

    try:
        return dict(value)
    except TypeError:
        raise yaml.constructor.ConstructorError(
            "while constructing a mapping",
            node.start_mark,
            "found unhashable key",
            node.start_mark,
        )


def _str_presenter(dumper, data):
    if len(data.splitlines()) > 1:  # check for multiline string
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)
