"""
Typed values exchanged between the client components.

`ConnectionConfig` describes where the Splash instance lives. The option
models describe one request each; a field left at `None` means "not
specified" and is never sent, so the server-side default applies.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TIMEOUT = 30.0


# --- Connection ---

class ConnectionConfig(BaseModel):
    """
    Immutable connection settings for a Splash instance.

    The scheme and base URL are derived from the fields; the model is frozen,
    so they never change after construction.
    """
    model_config = ConfigDict(frozen=True)

    host: str = Field("localhost", min_length=1)
    port: int = Field(8050, gt=0, lt=65536)
    username: Optional[str] = None
    password: Optional[str] = None
    use_tls: bool = False

    @property
    def scheme(self) -> str:
        return "https" if self.use_tls else "http"

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}"

    @property
    def has_credentials(self) -> bool:
        return self.username is not None


# --- Request Options ---

class RenderOptions(BaseModel):
    """
    Options shared by the render.html, render.har and render.json endpoints.

    `timeout` is always sent (30 seconds unless overridden; `None` also means
    30 seconds); every other field besides `url` is optional.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    url: str = Field(..., min_length=1)
    base_url: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    resource_timeout: Optional[float] = None
    wait: Optional[float] = None
    proxy: Optional[str] = None
    viewport: Optional[str] = None
    js: Optional[str] = None
    js_source: Optional[str] = None
    filters: Optional[str] = None
    allowed_domains: Optional[str] = None
    allowed_content_types: Optional[str] = None
    forbidden_content_types: Optional[str] = None
    images: Optional[bool] = None

    @field_validator("timeout", mode="before")
    @classmethod
    def default_timeout(cls, value: Any) -> Any:
        return DEFAULT_TIMEOUT if value is None else value


class HarOptions(RenderOptions):
    """render.har options: adds whether response bodies go into the HAR records."""
    response_body: Optional[bool] = None


class JsonOptions(HarOptions):
    """render.json options: flags selecting which parts of the render are returned."""
    html: Optional[bool] = None
    png: Optional[bool] = None
    jpeg: Optional[bool] = None
    iframes: Optional[bool] = None
    script: Optional[bool] = None
    console: Optional[bool] = None
    history: Optional[bool] = None
    har: Optional[bool] = None


class ScriptOptions(BaseModel):
    """
    Options for the execute and run endpoints.

    `timeout` behaves as in `RenderOptions`. `lua_args` are extra values
    exposed to the script through `splash.args`.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    lua_source: str = Field(..., min_length=1)
    timeout: float = DEFAULT_TIMEOUT
    allowed_domains: Optional[str] = None
    proxy: Optional[str] = None
    filters: Optional[str] = None
    lua_args: Optional[Dict[str, Any]] = None

    @field_validator("timeout", mode="before")
    @classmethod
    def default_timeout(cls, value: Any) -> Any:
        return DEFAULT_TIMEOUT if value is None else value
