"""Lazy-initialized boto3 clients — reused across warm Lambda invocations."""

from functools import lru_cache
from typing import Any

import boto3


@lru_cache(maxsize=1)
def get_secrets_client(region: str) -> Any:
    return boto3.client("secretsmanager", region_name=region)
