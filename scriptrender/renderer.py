"""Render shell-script templates from a directory, with a per-renderer cache."""

from __future__ import annotations

import dataclasses
import shlex
import threading
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import jinja2


class TemplateName(str, Enum):
    """Known template file names."""

    INSTALL_DOCKER = "install_docker.sh.tmpl"
    CONFIGURE_DOCKER = "configure_docker.sh.tmpl"
    TN_DB_STARTUP = "tn_db_startup.sh.tmpl"
    OBSERVER_START = "observer_start.sh.tmpl"

    def __str__(self) -> str:
        return self.value


@dataclasses.dataclass
class TnStartupData:
    """Data for the TN database startup template."""

    region: str = ""
    repo_uri: str = ""
    image_uri: str = ""
    compose_path: str = ""
    tn_data_path: str = ""
    postgres_data_path: str = ""
    env_vars: dict[str, str] = dataclasses.field(default_factory=dict)
    # Explicit key order keeps the rendered script deterministic.
    sorted_env_keys: list[str] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class ParameterDescriptor:
    """One environment parameter for the observer start script."""

    env_name: str
    env_value: str = ""
    is_ssm_parameter: bool = False
    ssm_path: str = ""
    is_secure: bool = False


@dataclasses.dataclass
class ObserverStartData:
    """Data for the observer start template."""

    observer_dir: str = ""
    prefix: str = ""
    params: list[ParameterDescriptor] = dataclasses.field(default_factory=list)


class TemplateError(Exception):
    """Raised when a template cannot be parsed or executed."""


class _FailError(Exception):
    """Raised from inside a template by the ``fail`` helper."""


def _fail(message: str) -> None:
    raise _FailError(message)


def _quote(value: Any) -> str:
    return '"' + str(value).replace("\\", "\\\\").replace('"', '\\"') + '"'


def _squote(value: Any) -> str:
    return "'" + str(value) + "'"


def _context(data: Any) -> dict[str, Any]:
    context: dict[str, Any] = {}
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        context.update(
            {f.name: getattr(data, f.name) for f in dataclasses.fields(data)}
        )
    elif isinstance(data, Mapping):
        context.update({str(key): value for key, value in data.items()})
    context["data"] = data
    return context


class TemplateRenderer:
    """Loads templates from a directory, caches them and renders them with data."""

    def __init__(self, template_dir):
        self.template_dir = Path(template_dir)
        self._env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(self.template_dir)),
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )
        self._env.globals["fail"] = _fail
        self._env.filters["quote"] = _quote
        self._env.filters["squote"] = _squote
        self._env.filters["shquote"] = lambda value: shlex.quote(str(value))
        self._cache: dict[str, jinja2.Template] = {}
        self._lock = threading.Lock()

    def _load(self, name: str) -> jinja2.Template:
        with self._lock:
            cached = self._cache.get(name)
            if cached is not None:
                return cached
            path = self.template_dir / name
            try:
                template = self._env.get_template(name)
            except jinja2.TemplateError as exc:
                raise TemplateError(f"parsing template {str(path)!r}: {exc}") from exc
            self._cache[name] = template
            return template

    def render(self, name, data):
        """Render the named template with ``data`` and return the text."""
        str_name = name.value if isinstance(name, TemplateName) else str(name)
        template = self._load(str_name)
        try:
            return template.render(_context(data))
        except Exception as exc:
            raise TemplateError(f"executing template {str_name!r}: {exc}") from exc