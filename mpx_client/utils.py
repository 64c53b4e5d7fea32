"""
Small helpers shared by the request and config layers
"""

from typing import Dict, List, Mapping, Optional, Sequence
from urllib.parse import urlencode


def string_param_default(value: Optional[str], default: str) -> str:
    """Return ``value`` unless it is empty, otherwise ``default``"""
    return value if value else default


def normalize_ids(ids: Sequence[str]) -> List[str]:
    """
    Reduce identifiers to their trailing path segment

    Full resource URIs such as ``http://host/data/Media/123`` become ``123``.
    Plain identifiers pass through unchanged. Duplicates are kept.
    """
    return [identifier.rsplit("/", 1)[-1] for identifier in ids]


def encode_params(params: Mapping[str, str]) -> str:
    """Form-encode query parameters with keys in sorted order"""
    return urlencode(sorted(params.items()))


def merge_params(
    params: Optional[Mapping[str, str]],
    defaults: Mapping[str, str]
) -> Dict[str, str]:
    """
    Merge call parameters over defaults

    A new dict is returned; caller values always win over defaults.
    """
    merged = dict(defaults)
    if params:
        merged.update(params)
    return merged


__all__ = ["string_param_default", "normalize_ids", "encode_params", "merge_params"]
