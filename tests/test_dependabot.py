import os

import pytest

from containerkit.dependabot import (
    DependabotConfig,
    Schedule,
    Update,
    dependabot_config_file,
    generate_dependabot_updates,
    new_update,
    read_dependabot_config,
    write_dependabot_config,
)
from containerkit.mkdocs import list_examples

SAMPLE = """\
version: 2
updates:
  - package-ecosystem: gomod
    directory: /
    schedule:
      interval: weekly
    open-pull-requests-limit: 3
    rebase-strategy: disabled
  - package-ecosystem: gomod
    directory: /modules/compose
    schedule:
      interval: weekly
    open-pull-requests-limit: 3
    rebase-strategy: disabled
  - package-ecosystem: gomod
    directory: /examples/redis
    schedule:
      interval: weekly
    open-pull-requests-limit: 3
    rebase-strategy: disabled
  - package-ecosystem: gomod
    directory: /examples/nginx
    schedule:
      interval: weekly
    open-pull-requests-limit: 3
    rebase-strategy: disabled
"""


@pytest.fixture
def root(tmp_path):
    root_dir = tmp_path / "project"
    (root_dir / ".github").mkdir(parents=True)
    (root_dir / ".github" / "dependabot.yml").write_text(SAMPLE, encoding="utf-8")
    return root_dir


def test_dependabot_config_file(tmp_path):
    root_dir = tmp_path / "project"
    (root_dir / ".github").mkdir(parents=True)
    (root_dir / ".github" / "dependabot.yml").write_bytes(b"")

    path = dependabot_config_file(root_dir)

    assert str(path).endswith(os.path.join("project", ".github", "dependabot.yml"))
    assert path.exists()


def test_read_dependabot_config(root):
    config = read_dependabot_config(root)

    assert config.version == 2
    assert len(config.updates) > 0
    assert config.updates[0] == Update(
        package_ecosystem="gomod",
        directory="/",
        schedule=Schedule("weekly"),
        open_pull_requests_limit=3,
        rebase_strategy="disabled",
    )


def test_read_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_dependabot_config(tmp_path)


def test_write_read_round_trip(tmp_path):
    (tmp_path / ".github").mkdir()
    config = DependabotConfig(version=2, updates=[new_update("a"), new_update("b")])

    write_dependabot_config(tmp_path, config)

    assert read_dependabot_config(tmp_path) == config


def test_new_update():
    update = new_update("foodb")

    assert update.directory == "/examples/foodb"
    assert update.open_pull_requests_limit == 3
    assert update.package_ecosystem == "gomod"
    assert update.rebase_strategy == "disabled"
    assert update.schedule.interval == "weekly"


def test_generate_dependabot_updates(root):
    original = read_dependabot_config(root)

    generate_dependabot_updates(root, "foodb")

    config = read_dependabot_config(root)
    assert len(config.updates) == len(original.updates) + 1
    assert [u.directory for u in config.updates] == [
        "/",
        "/modules/compose",
        "/examples/foodb",
        "/examples/nginx",
        "/examples/redis",
    ]
    assert all(u.schedule.interval == "weekly" for u in config.updates)


def test_generate_needs_main_and_compose(tmp_path):
    (tmp_path / ".github").mkdir()
    write_dependabot_config(tmp_path, DependabotConfig(version=2, updates=[new_update("x")]))

    with pytest.raises(ValueError):
        generate_dependabot_updates(tmp_path, "foodb")


def test_examples_have_dependabot_entry(root):
    for name in ("redis", "nginx", "_template"):
        (root / "examples" / name).mkdir(parents=True)
    (root / "examples" / "README.md").write_text("readme", encoding="utf-8")

    examples = list_examples(root)
    updates = read_dependabot_config(root).updates

    assert len(updates) - 2 == len(examples)
    directories = {u.directory for u in updates}
    for example in examples:
        assert "/examples/" + example.lower() in directories