"""Service configuration read from environment variables."""

from __future__ import annotations

import json
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

SCOPE_IDENTIFY = "identify"
DISCORD_AUTH_URL = "https://discordapp.com/api/oauth2/authorize"
DISCORD_TOKEN_URL = "https://discordapp.com/api/oauth2/token"
AUTH_STYLE_IN_PARAMS = "in_params"

# Names of environment variables that hold credentials.
_VAR_OAUTH_CS = "OAUTH_CLIENT_SECRET"
_VAR_AUTH_BOT = "AUTH_BOT_TOKEN"
_VAR_DB_PW = "DB_PASSWORD"
_VAR_PG_PW = "POSTGRES_PASSWORD"
_VAR_NOTIFY_BOT = "NOTIFICATION_BOT_TOKEN"
_VAR_CDN_AK = "IMAGES_CDN_API_KEY"


class ConfigError(ValueError):
    """Raised when a required environment variable is missing or invalid."""


def _lookup(name: str, environ: Optional[Mapping[str, str]]) -> str:
    env = os.environ if environ is None else environ
    value = env.get(name, "")
    if value == "":
        raise ConfigError(f"env variable '{name}' is not set")
    return value


def env_string(name: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Return a required non-empty string variable."""
    return _lookup(name, environ)


def env_int(name: str, environ: Optional[Mapping[str, str]] = None) -> int:
    """Return a required variable parsed as a signed 64-bit decimal integer."""
    value = _lookup(name, environ)
    if not _INT_RE.fullmatch(value):
        raise ConfigError(f"invalid integer in env variable '{name}': {value!r}")
    number = int(value)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ConfigError(f"integer out of range in env variable '{name}': {value!r}")
    return number


def env_bool(name: str, environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return a required variable that must be exactly 'True' or 'False'."""
    value = _lookup(name, environ)
    if value == "True":
        return True
    if value == "False":
        return False
    raise ConfigError(f"invalid value of env variable '{name}'")


def env_json_list(name: str, environ: Optional[Mapping[str, str]] = None) -> list[str]:
    """Return a required variable holding a JSON array of strings (or null)."""
    value = _lookup(name, environ)
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid json env variable '{name}': {exc}") from exc
    if parsed is None:
        return []
    if not isinstance(parsed, list) or not all(isinstance(item, str) for item in parsed):
        raise ConfigError(f"invalid json env variable '{name}': expected a list of strings")
    return parsed


@dataclass(frozen=True)
class OAuthEndpoint:
    """Authorisation and token URLs of an OAuth2 provider."""

    auth_url: str
    token_url: str
    auth_style: str = AUTH_STYLE_IN_PARAMS


@dataclass(frozen=True)
class OAuthConfig:
    """OAuth2 client settings."""

    redirect_url: str
    client_id: str
    client_secret: str
    scopes: list[str]
    endpoint: OAuthEndpoint


@dataclass(frozen=True)
class Config:
    """All settings the service runs with."""

    port: int
    oauth_conf: OAuthConfig
    host_base_url: str
    auth_bot_token: str
    flashpoint_server_id: str
    securecookie_hash_key_previous: str
    securecookie_block_key_previous: str
    securecookie_hash_key_current: str
    securecookie_block_key_current: str
    session_expiration_seconds: int
    validator_server_url: str
    db_user: str
    db_password: str
    db_ip: str
    db_port: int
    db_name: str
    postgres_user: str
    postgres_password: str
    postgres_host: str
    postgres_port: int
    notification_bot_token: str
    notification_channel_id: str
    curation_feed_channel_id: str
    is_dev: bool
    resumable_upload_dir_full_path: str
    flashfreeze_dir_full_path: str
    archive_indexer_server_url: str
    flashfreeze_ingest_dir_full_path: str
    submissions_dir_full_path: str
    submission_images_dir_full_path: str
    system_uid: int
    images_cdn: str
    images_cdn_compressed: bool
    images_cdn_api_key: str
    min_launcher_version: str
    data_packs_dir: str
    frozen_packs_dir: str
    images_dir: str
    deleted_data_packs_dir: str
    deleted_images_dir: str
    flashpoint_source_only_mode: bool
    flashpoint_source_only_admin_mode: bool
    recommendation_engine_url: str
    do_not_unfreeze_game_list: list[str] = field(default_factory=list)
    db_root_user: str = ""
    db_root_password: str = ""


def get_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    """Build the configuration from the environment, raising ConfigError on any problem."""
    env = os.environ if environ is None else environ

    def s(name: str) -> str:
        return env_string(name, env)

    def i(name: str) -> int:
        return env_int(name, env)

    def b(name: str) -> bool:
        return env_bool(name, env)

    oauth = OAuthConfig(
        redirect_url=s("OAUTH_REDIRECT_URL"),
        client_id=s("OAUTH_CLIENT_ID"),
        client_secret=s(_VAR_OAUTH_CS),
        scopes=[SCOPE_IDENTIFY],
        endpoint=OAuthEndpoint(auth_url=DISCORD_AUTH_URL, token_url=DISCORD_TOKEN_URL),
    )
    return Config(
        port=i("PORT"),
        oauth_conf=oauth,
        host_base_url=s("HOST_BASE_URL"),
        auth_bot_token=s(_VAR_AUTH_BOT),
        flashpoint_server_id=s("FLASHPOINT_SERVER_ID"),
        securecookie_hash_key_previous=s("SECURECOOKIE_HASH_KEY_PREVIOUS"),
        securecookie_block_key_previous=s("SECURECOOKIE_BLOCK_KEY_PREVIOUS"),
        securecookie_hash_key_current=s("SECURECOOKIE_HASH_KEY_CURRENT"),
        securecookie_block_key_current=s("SECURECOOKIE_BLOCK_KEY_CURRENT"),
        session_expiration_seconds=i("SESSION_EXPIRATION_SECONDS"),
        validator_server_url=s("VALIDATOR_SERVER_URL"),
        db_user=s("DB_USER"),
        db_password=s(_VAR_DB_PW),
        db_ip=s("DB_IP"),
        db_port=i("DB_PORT"),
        db_name=s("DB_NAME"),
        postgres_user=s("POSTGRES_USER"),
        postgres_password=s(_VAR_PG_PW),
        postgres_host=s("POSTGRES_HOST"),
        postgres_port=i("POSTGRES_PORT"),
        notification_bot_token=s(_VAR_NOTIFY_BOT),
        notification_channel_id=s("NOTIFICATION_CHANNEL_ID"),
        curation_feed_channel_id=s("CURATION_FEED_CHANNEL_ID"),
        is_dev=b("IS_DEV"),
        resumable_upload_dir_full_path=s("RESUMABLE_UPLOAD_DIR_FULL_PATH"),
        flashfreeze_dir_full_path=s("FLASHFREEZE_DIR_FULL_PATH"),
        archive_indexer_server_url=s("ARCHIVE_INDEXER_SERVER_URL"),
        flashfreeze_ingest_dir_full_path=s("FLASHFREEZE_INGEST_DIR_FULL_PATH"),
        submissions_dir_full_path=s("SUBMISSIONS_DIR_FULL_PATH"),
        submission_images_dir_full_path=s("SUBMISSION_IMAGES_DIR_FULL_PATH"),
        system_uid=i("SYSTEM_UID"),
        images_cdn=s("IMAGES_CDN"),
        images_cdn_compressed=b("IMAGES_CDN_COMPRESSED"),
        images_cdn_api_key=s(_VAR_CDN_AK),
        min_launcher_version=s("MIN_LAUNCHER_VERSION"),
        data_packs_dir=s("DATA_PACKS_PATH"),
        frozen_packs_dir=s("FROZEN_PACKS_PATH"),
        images_dir=s("IMAGES_PATH"),
        deleted_data_packs_dir=s("DELETED_DATA_PACKS_PATH"),
        deleted_images_dir=s("DELETED_IMAGES_PATH"),
        flashpoint_source_only_mode=b("FLASHPOINT_SOURCE_ONLY_MODE"),
        flashpoint_source_only_admin_mode=b("FLASHPOINT_SOURCE_ONLY_ADMIN_MODE"),
        recommendation_engine_url=s("RECOMMENDATION_ENGINE_URL"),
        do_not_unfreeze_game_list=env_json_list("DO_NOT_UNFREEZE_GAME_LIST", env),
    )