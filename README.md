# scriptrender

Render shell scripts, such as user-data scripts for cloud instances, from
Jinja2 template files kept in a directory outside your code. Each
`TemplateRenderer` parses a template once per name and caches it, so
rendering the same template repeatedly is cheap. The cache is guarded by a
lock, so one renderer can be shared between threads.

## Installation

```
pip install scriptrender
```

## Usage

`scriptrender.renderer.TemplateRenderer` takes the directory that holds your
templates. `render(name, data)` renders the template with that file name and
returns the text:

```python
from scriptrender.renderer import (
    ObserverStartData,
    ParameterDescriptor,
    TemplateError,
    TemplateName,
    TemplateRenderer,
)

renderer = TemplateRenderer("templates/")

data = ObserverStartData(
    observer_dir="/opt/observer",
    prefix="/app/prefix",
    params=[
        ParameterDescriptor(env_name="FOO", is_ssm_parameter=True, ssm_path="FOO"),
        ParameterDescriptor(env_name="BAR", env_value="static_value"),
    ],
)

try:
    script = renderer.render(TemplateName.OBSERVER_START, data)
except TemplateError as exc:
    print(f"could not render: {exc}")
```

### Template names

`TemplateName` is a string enum of the file names the data classes are made
for:

- `TemplateName.INSTALL_DOCKER`: `install_docker.sh.tmpl`
- `TemplateName.CONFIGURE_DOCKER`: `configure_docker.sh.tmpl`
- `TemplateName.TN_DB_STARTUP`: `tn_db_startup.sh.tmpl`, for `TnStartupData`
- `TemplateName.OBSERVER_START`: `observer_start.sh.tmpl`, for `ObserverStartData`

Any other file name in the template directory can be passed as a plain
string.

### What a template sees

- If `data` is a dataclass instance, each of its fields is a variable
  (for example `observer_dir`, `prefix`, `params`).
- If `data` is a mapping, each key is a variable.
- In every case the whole object is also available as `data`; `None` is
  allowed.

Undefined variables are errors. Besides the Jinja2 built-ins, templates get:

- `fail(message)`: stop rendering with an error carrying `message`.
- `quote` filter: wrap in double quotes, escaping `\` and `"`.
- `squote` filter: wrap in single quotes as is.
- `shquote` filter: quote for a POSIX shell with `shlex.quote`.

Trailing newlines in templates are kept and no HTML escaping is done.

### Data classes

- `TnStartupData`: `region`, `repo_uri`, `image_uri`, `compose_path`,
  `tn_data_path`, `postgres_data_path`, `env_vars` (a dict) and
  `sorted_env_keys` (a list giving the order in which to emit `env_vars`).
- `ParameterDescriptor`: `env_name`, `env_value`, `is_ssm_parameter`,
  `ssm_path`, `is_secure`.
- `ObserverStartData`: `observer_dir`, `prefix`, `params` (a list of
  `ParameterDescriptor`).

### Errors

Every failure raises `TemplateError`:

- `parsing template '<path>': ...` when the template file is missing or has
  a syntax error. Such a failure is not cached.
- `executing template '<name>': ...` when rendering fails, for example an
  undefined variable, a call to `fail`, or a value of the wrong type.

## What this package does not include

No template files are shipped: the names in `TemplateName` only refer to
files you place in the directory you pass to `TemplateRenderer`. There is no
command-line tool; the package is used from Python.

## Development

```
pip install -e ".[test]"
pytest
```