"""Root settings document parsing."""

from __future__ import annotations

from typing import Any, Mapping

import yaml

from .errors import ConfigParseError

_TYPED_SCALAR_TAGS = frozenset(
    {
        "tag:yaml.org,2002:bool",
        "tag:yaml.org,2002:float",
        "tag:yaml.org,2002:int",
        "tag:yaml.org,2002:timestamp",
    }
)


class SettingsLoader(yaml.SafeLoader):
    """SafeLoader that keeps plain scalars as the text written in the document.

    Ids such as ``0042`` or ``007`` stay strings instead of becoming ints.
    Only null resolution is kept, so ``accounts:`` is still an empty section.
    """


SettingsLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _TYPED_SCALAR_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_settings_document(raw: bytes | str) -> dict[str, Any]:
    """Parse a YAML (or JSON) settings document into a mapping.

    An empty document yields an empty mapping. Anything that is not valid
    YAML, or whose root is not a mapping, raises ``ConfigParseError``.
    """
    try:
        data = yaml.load(raw, Loader=SettingsLoader)
    except yaml.YAMLError as exc:
        raise ConfigParseError(f"settings document is not valid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError(
            f"settings document must be a mapping, got {type(data).__name__}"
        )
    return data
