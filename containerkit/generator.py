"""Generator of new example modules from templates."""

from __future__ import annotations

import argparse
import os
import re
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

import jinja2
import yaml

from containerkit.dependabot import generate_dependabot_updates
from containerkit.mkdocs import generate_mkdocs, read_mkdocs_config

TEMPLATES = (
    "ci.yml",
    "docs_example.md",
    "example_test.go",
    "example.go",
    "go.mod",
    "Makefile",
    "tools.go",
)

_ALPHABETICAL = re.compile(r"[A-Za-z]+")
_WORD = re.compile(r"\w+")


def _title_case(text: str) -> str:
    """Upper-case the first letter of each word, leaving the rest untouched."""
    return _WORD.sub(lambda match: match.group(0)[:1].upper() + match.group(0)[1:], text)


@dataclass
class Example:
    """An example module to generate."""

    image: str
    name: str
    title_name: str = ""
    tc_version: str = ""

    def lower(self) -> str:
        """The example name in lower case."""
        return self.name.lower()

    def lower_title(self) -> str:
        """The title with its first letter in lower case."""
        if self.title_name:
            return self.title_name[:1].lower() + self.title_name[1:]
        return _title_case(self.lower())

    def title(self) -> str:
        """The title of the example name."""
        if self.title_name:
            return self.title_name
        return _title_case(self.lower())

    def validate(self) -> None:
        """Raise ValueError unless name and title are purely alphabetical."""
        if not _ALPHABETICAL.fullmatch(self.name):
            raise ValueError(
                f"invalid name: {self.name}. Only alphabetical characters are allowed"
            )
        if not _ALPHABETICAL.fullmatch(self.title_name):
            raise ValueError(
                f"invalid title: {self.title_name}. Only alphabetical characters are allowed"
            )


def output_path(template: str, example_lower: str, root_dir: str | os.PathLike[str]) -> Path:
    """Return where the file rendered from *template* goes."""
    root = Path(root_dir)
    kind = template.lower()
    if kind == "docs_example.md":
        return root / "docs" / "examples" / f"{example_lower}.md"
    if kind == "ci.yml":
        return root / ".github" / "workflows" / f"{example_lower}-example.yml"
    if kind == "tools.go":
        return root / "examples" / example_lower / "tools" / template
    return root / "examples" / example_lower / template.replace("example", example_lower)


def generate(
    example: Example,
    root_dir: str | os.PathLike[str],
    template_dir: str | os.PathLike[str] = "_template",
) -> None:
    """Render every template for *example* and register it in the docs and Dependabot."""
    example.validate()

    root = Path(root_dir)
    (root / "examples").mkdir(mode=0o700, parents=True, exist_ok=True)

    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(os.fspath(template_dir)),
        autoescape=False,
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )
    context = {
        "Image": example.image,
        "Name": example.name,
        "TitleName": example.title_name,
        "TCVersion": example.tc_version,
        "example": example,
        "ToLower": example.lower,
        "Title": example.title,
        "ToLowerTitle": example.lower_title,
        "codeinclude": str,
    }

    example_lower = example.lower()
    for template_name in TEMPLATES:
        template = env.get_template(template_name + ".tmpl")
        target = output_path(template_name, example_lower, root)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(template.render(**context), encoding="utf-8")

    generate_mkdocs(root, example_lower)
    generate_dependabot_updates(root, example_lower)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a new example module.")
    parser.add_argument(
        "-name",
        help="Name of the example. Only alphabetical characters are allowed.",
    )
    parser.add_argument(
        "-title",
        default="",
        help=(
            "(Optional) Title of the example name, used to override the name in the case "
            "of mixed casing (Mongodb -> MongoDB). Use camel-case when needed. "
            "Only alphabetical characters are allowed."
        ),
    )
    parser.add_argument(
        "-image",
        help="Fully-qualified name of the Docker image to be used by the example",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Generate an example from the command line and return the exit status."""
    args = _parser().parse_args(argv)

    for required in ("name", "image"):
        if getattr(args, required) is None:
            print(f"missing required -{required} argument/flag", file=sys.stderr)
            return 2

    examples_dir = os.path.abspath(os.path.dirname(args.name) or ".")
    root_dir = os.path.dirname(examples_dir)

    try:
        mkdocs_config = read_mkdocs_config(root_dir)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f">> could not read MkDocs config: {exc}")
        return 1

    example = Example(
        image=args.image,
        name=args.name,
        title_name=args.title,
        tc_version=mkdocs_config.extra.latest_version,
    )

    try:
        generate(example, root_dir)
    except (OSError, ValueError, yaml.YAMLError, jinja2.TemplateError) as exc:
        print(f">> error generating the example: {exc}")
        return 1

    try:
        subprocess.run(
            ["go", "mod", "tidy"],
            cwd=os.path.join(root_dir, "examples", example.lower()),
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        print(f">> error synchronizing the dependencies: {exc}")
        return 1

    print(
        "Please go to",
        example.lower(),
        "directory to check the results, where 'go mod tidy' was executed "
        "to synchronize the dependencies",
    )
    print("Commit the modified files and submit a pull request to include them into the project")
    print("Thanks!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())