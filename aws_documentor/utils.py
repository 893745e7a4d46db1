"""Shared helpers for AWS resource scans."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Iterable, Iterator, Optional

import boto3
from botocore.exceptions import OperationNotPageableError


def safe_paginate(client: boto3.client, method_name: str, result_key: str, **kwargs) -> Iterator[dict]:
    """Iterate through paginated boto3 results while handling pagination gaps."""

    try:
        paginator = client.get_paginator(method_name)
    except OperationNotPageableError:
        response = getattr(client, method_name)(**kwargs)
        for item in response.get(result_key, []):
            yield item
        return

    for page in paginator.paginate(**kwargs):
        for item in page.get(result_key, []):
            yield item


def tags_to_dict(tags: Optional[Iterable[dict]]) -> Dict[str, str]:
    """Return EC2 ``[{"Key": ..., "Value": ...}]`` tags as a plain mapping.

    Entries missing either the key or the value are skipped.
    """

    result: Dict[str, str] = {}
    for tag in tags or []:
        key = tag.get("Key")
        value = tag.get("Value")
        if key is not None and value is not None:
            result[key] = value
    return result


def format_timestamp(value: Optional[datetime]) -> str:
    """Format ``value`` as a UTC ``YYYY-MM-DDTHH:MM:SSZ`` string."""

    if value is None:
        return ""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


__all__ = ["safe_paginate", "tags_to_dict", "format_timestamp"]
