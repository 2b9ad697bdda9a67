"""MkDocs configuration: reading, writing and registering example docs."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any

import yaml

_EXAMPLES_NAV_INDEX = 3


class _Loader(yaml.SafeLoader):
    """Safe loader that keeps the plain value of nodes with unknown tags."""


def _construct_untagged(loader: _Loader, node: yaml.Node) -> Any:
    if isinstance(node, yaml.MappingNode):
        return loader.construct_mapping(node, deep=True)
    if isinstance(node, yaml.SequenceNode):
        return loader.construct_sequence(node, deep=True)
    return loader.construct_scalar(node)


_Loader.add_constructor(None, _construct_untagged)


def _nav(key: str, default: Any) -> Any:
    factory = list if default == [] else str
    return field(default_factory=factory, metadata={"key": key, "omitempty": True})


@dataclass
class Palette:
    scheme: str = ""


@dataclass
class Font:
    text: str = ""
    code: str = ""


@dataclass
class Theme:
    name: str = ""
    palette: Palette = field(default_factory=Palette, metadata={"type": Palette})
    font: Font = field(default_factory=Font, metadata={"type": Font})
    logo: str = ""
    favicon: str = ""


@dataclass
class NavEntry:
    home: str = _nav("Home", "")
    quickstart: str = _nav("Quickstart", "")
    features: list[Any] = _nav("Features", [])
    examples: list[str] = _nav("Examples", [])
    system_requirements: list[str] = _nav("System Requirements", [])
    contributing: list[str] = _nav("Contributing", [])
    getting_help: str = _nav("Getting help", "")


@dataclass
class Extra:
    latest_version: str = ""


@dataclass
class MkDocsConfig:
    """The parts of mkdocs.yml that the generator reads and writes."""

    site_name: str = ""
    plugins: list[str] = field(default_factory=list)
    theme: Theme = field(default_factory=Theme, metadata={"type": Theme})
    extra_css: list[str] = field(default_factory=list)
    repo_name: str = ""
    repo_url: str = ""
    markdown_extensions: list[Any] = field(default_factory=list)
    nav: list[NavEntry] = field(default_factory=list, metadata={"item": NavEntry})
    edit_uri: str = ""
    extra: Extra = field(default_factory=Extra, metadata={"type": Extra})


def _load(cls: type, data: Any) -> Any:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping for {cls.__name__}")
    values = {}
    for f in fields(cls):
        value = data.get(f.metadata.get("key", f.name))
        if value is None:
            continue
        if "type" in f.metadata:
            value = _load(f.metadata["type"], value)
        elif "item" in f.metadata:
            value = [_load(f.metadata["item"], item) for item in value]
        values[f.name] = value
    return cls(**values)


def _dump(obj: Any) -> dict[str, Any]:
    out = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if is_dataclass(value):
            value = _dump(value)
        elif isinstance(value, list):
            value = [_dump(item) if is_dataclass(item) else item for item in value]
        if f.metadata.get("omitempty") and not value:
            continue
        out[f.metadata.get("key", f.name)] = value
    return out


def mkdocs_config_file(root_dir: str | os.PathLike[str]) -> Path:
    """Return the path of mkdocs.yml under *root_dir*."""
    return Path(root_dir) / "mkdocs.yml"


def project_root(cwd: str | os.PathLike[str] | None = None) -> Path:
    """Return the parent of *cwd*, the current directory by default."""
    current = os.getcwd() if cwd is None else os.fspath(cwd)
    return Path(os.path.abspath(current)).parent


def list_examples(root_dir: str | os.PathLike[str]) -> list[str]:
    """Return the names of the example directories, sorted, without the template."""
    return sorted(
        entry.name
        for entry in (Path(root_dir) / "examples").iterdir()
        if entry.is_dir() and entry.name != "_template"
    )


def list_example_docs(root_dir: str | os.PathLike[str]) -> list[str]:
    """Return the names of all entries in the examples docs directory, sorted."""
    return sorted(entry.name for entry in (Path(root_dir) / "docs" / "examples").iterdir())


def read_mkdocs_config(root_dir: str | os.PathLike[str]) -> MkDocsConfig:
    """Read and parse mkdocs.yml under *root_dir*."""
    text = mkdocs_config_file(root_dir).read_text(encoding="utf-8")
    return _load(MkDocsConfig, yaml.load(text, Loader=_Loader))


def write_mkdocs_config(root_dir: str | os.PathLike[str], config: MkDocsConfig) -> None:
    """Write *config* as mkdocs.yml under *root_dir*."""
    text = yaml.safe_dump(_dump(config), sort_keys=False, allow_unicode=True)
    mkdocs_config_file(root_dir).write_text(text, encoding="utf-8")


def generate_mkdocs(root_dir: str | os.PathLike[str], example_lower: str) -> None:
    """Add the doc page of *example_lower* to the Examples nav, kept sorted after the index."""
    config = read_mkdocs_config(root_dir)
    if len(config.nav) <= _EXAMPLES_NAV_INDEX:
        raise ValueError("mkdocs nav has no Examples section at its fourth entry")

    section = config.nav[_EXAMPLES_NAV_INDEX]
    examples = [doc for doc in section.examples if not doc.endswith("index.md")]
    examples.append(f"examples/{example_lower}.md")
    section.examples = ["examples/index.md", *sorted(examples)]

    write_mkdocs_config(root_dir, config)