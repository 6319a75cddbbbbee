import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from ._utils._request_spec import BodyMode
from ._utils.constants import (
    DEFAULT_TIMEOUT,
    DOTENV_FILE,
    ENV_DEFAULT_BODY_MODE,
    ENV_FOLLOW_REDIRECTS,
    ENV_TIMEOUT,
    ENV_VERIFY_SSL,
)

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    default_body_mode: BodyMode = BodyMode.JSON
    follow_redirects: bool = False
    verify_ssl: bool = True

    @field_validator("default_body_mode")
    @classmethod
    def _must_encode_a_body(cls, value: BodyMode) -> BodyMode:
        if value is BodyMode.NONE:
            raise ValueError("default body mode must be 'json' or 'form'")
        return value

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = DOTENV_FILE) -> "Config":
        """Read the configuration from the environment and a local .env file.

        Values already present in the environment win over the .env file.
        Unset variables keep the model defaults.

        Raises:
            pydantic.ValidationError: if a variable holds an invalid value.
        """
        if dotenv_path:
            load_dotenv(dotenv_path, override=False)

        values = {}
        if timeout := os.getenv(ENV_TIMEOUT):
            values["timeout"] = timeout
        if body_mode := os.getenv(ENV_DEFAULT_BODY_MODE):
            values["default_body_mode"] = body_mode.lower()
        if follow := os.getenv(ENV_FOLLOW_REDIRECTS):
            values["follow_redirects"] = follow.lower() in _TRUTHY
        if verify := os.getenv(ENV_VERIFY_SSL):
            values["verify_ssl"] = verify.lower() in _TRUTHY

        return cls(**values)
