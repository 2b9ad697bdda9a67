# containerkit

Small building blocks for tests that work with containers, and a generator
that scaffolds a new container example inside a project tree.

## Install

```
pip install containerkit
```

To run the test suite:

```
pip install "containerkit[test]"
pytest
```

## Modules

### Archives: `containerkit.archive`

These functions pack files and directories as gzip-compressed tar archives and
return the archive as `bytes`.

```python
from containerkit.archive import is_dir, tar_dir, tar_file

is_dir("testresources")                      # True for a directory, False for a file
data = tar_dir("testresources", 0o755)       # whole tree, every entry given mode 0o755
single = tar_file(b"echo hi\n", "hello.sh", 0o700)  # one entry named "hello.sh"
```

- `is_dir` raises `OSError`, for example `FileNotFoundError`, when the path
  cannot be inspected.
- `tar_dir` names each entry after its path as walked from `src`, skips
  symbolic links, and prints a short progress line to stdout.
- `tar_file` names its single entry after the base name of `base_path`.

### Logs: `containerkit.logs`

- `Log(log_type, content)` is one message from a process. `log_type` is
  `STDOUT_LOG` (`"STDOUT"`) or `STDERR_LOG` (`"STDERR"`). `content` is bytes.
- `LogConsumer` is an abstract base class. Subclasses implement `accept(log)`.
- `Logging` is an abstract base class. Subclasses implement
  `printf(format, *args)`, which takes a `%`-style format.
- `default_logger()` returns the shared logger. It writes timestamped lines to
  standard error.
- `with_logger(logger)` returns a `LoggerOption`. Its `apply_generic_to(opts)`
  and `apply_docker_to(opts)` methods set `opts.logger` to that logger.

### Exec output: `containerkit.execproc`

Docker multiplexes stdout and stderr into a single framed stream.

- `std_copy(stdout, stderr, source)` splits that stream into two writable
  binary streams and returns the number of payload bytes written.
  - A truncated frame ends the copy.
  - An unknown stream id raises `ValueError`.
  - A daemon error frame raises `DaemonStreamError`.
- `multiplexed()` returns a `ProcessOption`. Applying it to a
  `ProcessOptions(reader)` replaces `reader` with the stdout part alone.

### Docker host: `containerkit.dockerhost`

```python
from containerkit.dockerhost import extract_docker_host, in_a_container

extract_docker_host("unix:///this/is/a/sample.sock")  # "/this/is/a/sample.sock"
extract_docker_host(None)                             # "/var/run/docker.sock"
in_a_container()                                      # does /.dockerenv exist?
```

`extract_docker_host` resolves the socket path in this order:

1. If `TESTCONTAINERS_DOCKER_SOCKET_OVERRIDE` is set and non-empty, its value
   is returned.
2. Otherwise a `unix://` URL gives its path.
3. Anything else falls back to `/var/run/docker.sock`.

`default_gateway_ip()` runs `ip route` through `sh` and `awk` to find the
default gateway. It raises `RuntimeError` if detection fails.

### Session: `containerkit.session`

`session_id()` returns a random UUID that is created once per process.
`session_string()` returns the same UUID as text.

## Scaffolding a new example

The generator is `containerkit.generator`, installed as the
`containerkit-generate` command. Run it from the project's `examples`
directory, which must hold a `_template` directory. That directory contains
these templates, written for Jinja2:

- `ci.yml.tmpl`
- `docs_example.md.tmpl`
- `example_test.go.tmpl`
- `example.go.tmpl`
- `go.mod.tmpl`
- `Makefile.tmpl`
- `tools.go.tmpl`

The project root, the parent of `examples`, must contain:

- `mkdocs.yml`, whose fourth `nav` entry is the `Examples` section
- `.github/dependabot.yml`, whose first two updates are the main and compose
  modules

```
containerkit-generate -name mongodb -title MongoDB -image mongo:6
```

The options take a single dash. `-name` and `-image` are required.

`-title` must also be given in practice: names and titles may contain only
letters, and an empty title is rejected.

The command does the following:

1. Renders the templates into `examples/<name>/`.
2. Writes the documentation page to `docs/examples/<name>.md`.
3. Writes a CI workflow to `.github/workflows/<name>-example.yml`.
4. Inserts the example into the MkDocs navigation and the Dependabot updates,
   keeping both lists sorted.
5. Runs `go mod tidy` in the new example directory.

It exits with 0 on success, 2 when a required option is missing, and 1 on any
other failure.

The same steps, except `go mod tidy`, are available from Python:

```python
from containerkit.generator import Example, generate, output_path

example = Example(name="foodb", title_name="FooDB", image="docker.io/example/foodb:latest",
                  tc_version="v0.0.0-test")
example.lower()        # "foodb"
example.title()        # "FooDB"
example.lower_title()  # "fooDB"
example.validate()     # raises ValueError for non-alphabetical name or title
generate(example, "/path/to/project", "/path/to/project/examples/_template")
```

`output_path(template, example_lower, root_dir)` tells where a given template
is written.

The templates receive these values:

- the fields `Image`, `Name`, `TitleName` and `TCVersion`
- the callables `ToLower`, `Title`, `ToLowerTitle` and `codeinclude`
- the `example` object itself

The configuration helpers can also be used on their own.

In `containerkit.mkdocs`:

- `MkDocsConfig`
- `read_mkdocs_config`
- `write_mkdocs_config`
- `generate_mkdocs`
- `mkdocs_config_file`
- `list_examples`
- `list_example_docs`
- `project_root`

In `containerkit.dependabot`:

- `DependabotConfig`, `Update` and `Schedule`
- `read_dependabot_config`
- `write_dependabot_config`
- `generate_dependabot_updates`
- `dependabot_config_file`
- `new_update`

## What this package does not do

The package does not create, start, stop or inspect containers. It does not
talk to a Docker daemon either. It only provides the surrounding pieces:

- archives to copy into containers
- log record types
- exec stream demultiplexing
- socket path detection
- the example generator