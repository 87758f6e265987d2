"""Encoding of option structs into query parameters and JSON bodies."""

from pydantic import BaseModel

from core.errors import RequestConstructionError


def _present_fields(options):
    """Return the fields of ``options`` that are present, in declaration order."""
    if options is None:
        return {}
    if isinstance(options, dict):
        return {key: value for key, value in options.items() if value is not None}
    if not isinstance(options, BaseModel):
        raise RequestConstructionError(
            f"unsupported options type {type(options).__name__}"
        )

    values = options.model_dump(mode='json', exclude_none=True)
    missing = [
        name for name in getattr(options, 'required_fields', ())
        if name not in values
    ]
    if missing:
        raise RequestConstructionError(
            f"{type(options).__name__} is missing required field(s): {', '.join(missing)}"
        )
    return values


def _query_value(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def encode_query(options):
    """Encode options as a list of query string pairs.

    Lists expand into repeated ``key[]`` pairs. An empty list is sent as a
    single empty ``key[]`` so that it stays distinguishable from an absent one.
    """
    params = []
    for key, value in _present_fields(options).items():
        if isinstance(value, (list, tuple)):
            if not value:
                params.append((f"{key}[]", ''))
            for item in value:
                params.append((f"{key}[]", _query_value(item)))
        elif isinstance(value, dict):
            for sub_key, sub_value in value.items():
                params.append((f"{key}[{sub_key}]", _query_value(sub_value)))
        else:
            params.append((key, _query_value(value)))
    return params


def encode_body(options):
    """Encode options as a JSON-ready dict with absent fields left out."""
    return _present_fields(options)
