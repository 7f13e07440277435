from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from shorts_architect.errors import ConfigurationError

logger = logging.getLogger(__name__)

_ssm_client = None
_parameter_cache: dict[str, str] = {}


def _client():
    global _ssm_client
    if _ssm_client is None:
        _ssm_client = boto3.client("ssm")
    return _ssm_client


def read_secret(parameter_name: str) -> str:
    """Decrypt a SecureString parameter; values are cached for the warm Lambda container."""
    cached = _parameter_cache.get(parameter_name)
    if cached is not None:
        return cached
    try:
        response = _client().get_parameter(Name=parameter_name, WithDecryption=True)
    except (BotoCoreError, ClientError) as exc:
        raise ConfigurationError(f"Unable to read SSM parameter {parameter_name}: {exc}") from exc
    value = response["Parameter"]["Value"]
    if not value:
        raise ConfigurationError(f"SSM parameter {parameter_name} is empty")
    _parameter_cache[parameter_name] = value
    return value


def hydrate_credentials(parameters: Mapping[str, Optional[str]]) -> list[str]:
    """Fill missing credential env vars from SSM.

    ``parameters`` maps an env var name (e.g. ``OPENAI_API_KEY``) to the SSM
    parameter holding its value. Variables already set are left alone.
    Returns the names that were populated.
    """
    hydrated: list[str] = []
    for env_name, parameter_name in parameters.items():
        if not parameter_name or os.getenv(env_name):
            continue
        os.environ[env_name] = read_secret(parameter_name)
        hydrated.append(env_name)
    if hydrated:
        logger.info("Loaded %s from SSM", ", ".join(hydrated))
    return hydrated
