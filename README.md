# actionskit

Small building blocks for writing GitHub Actions steps in Python. It has no
dependencies outside the standard library.

## Installation

```
pip install actionskit
```

## Modules

- `actionskit.command`: write workflow commands to standard output.
  `issue_command(command, properties, message)` prints
  `::command key=value,...::message` followed by the platform line ending
  (`\r\n` on Windows, `\n` elsewhere). Messages have `%`, CR and LF escaped;
  property values additionally have `:` and `,` escaped. Properties whose
  value is `None` are skipped, and an empty command name becomes
  `missing.command`. `issue(name, message=None)` issues a command with no
  properties.
- `actionskit.core`: `set_secret(secret)` issues `::add-mask::<secret>` so
  the value is masked in the job log. Also defines `InputOptions`
  (`required`, `trim_whitespace`) and the `ExitCode` enum (`SUCCESS = 0`,
  `FAILURE = 1`).
- `actionskit.summary`: `Summary` collects text in a buffer with
  `add_raw(text, add_eol=False)` and `add_eol()`, and writes it with
  `write(overwrite=False)` to the file named by the `GITHUB_STEP_SUMMARY`
  environment variable. `write` appends unless `overwrite` is true, then
  empties the buffer; `clear()` empties the buffer and truncates the file.
  `stringify()`, `is_empty_buffer()` and `empty_buffer()` inspect and reset
  the buffer. Writing raises `RuntimeError` if the variable is unset and
  `OSError` if the file cannot be accessed or its permission bits are not
  exactly `0o666`. `SummaryTableCell` and `SummaryImageOptions` are plain
  records.
- `actionskit.pathutils`: `to_posix_path`, `to_win32_path` and
  `to_platform_path` replace path separators.
- `actionskit.platform_info`: `get_details()` returns a `PlatformDetails`
  with the OS name and version, platform (`"windows"`, `"darwin"`,
  `"linux"`, ...), architecture (`"amd64"`, `"arm64"`, ...) and
  `is_windows` / `is_macos` / `is_linux` flags. The name and version come
  from `powershell` on Windows, `sw_vers` on macOS and `lsb_release`
  elsewhere; a failing or missing tool raises
  `subprocess.CalledProcessError` or `OSError`.
- `actionskit.manifest`: `ToolRelease` and `ToolReleaseFile` records for tool
  release manifests, with `from_dict` and `to_dict` (an unset
  `platform_version` is left out of the mapping).
- `actionskit.utils`: `to_command_value` turns `None` into `""`, returns
  strings unchanged and encodes anything else as compact JSON;
  `to_command_properties` maps `AnnotationProperties` to command property
  names (`title`, `file`, `startLine`, `endLine`, `startColumn`,
  `endColumn`), or to `{}` when none is set.

## Examples

Issue a command:

```python
from actionskit.command import issue_command

issue_command("warning", {"file": "app.py", "line": "3"}, "check this line")
# ::warning file=app.py,line=3::check this line
```

Mask a value in the log:

```python
from actionskit.core import set_secret

set_secret("token")
# ::add-mask::token
```

Write a job summary:

```python
from actionskit.summary import Summary

summary = Summary()
summary.add_raw("## Results", add_eol=True).add_raw("All checks passed.")
summary.write()
```

Convert paths:

```python
from actionskit.pathutils import to_posix_path, to_win32_path

to_posix_path("a\\b\\c")  # "a/b/c"
to_win32_path("a/b/c")    # "a\\b\\c"
```

## What it does not do

- It does not read action inputs, set outputs, export variables, add to
  `PATH`, save state or request ID tokens; `InputOptions` is only a record.
- `Summary` has no HTML builders (headings, tables, images, links); only raw
  text and line endings can be added.
- `actionskit.manifest` only holds release records: it does not download,
  cache or select tool versions.
- There is no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```