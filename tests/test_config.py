from pathlib import Path

import pytest

from domdump.io_utils import load_config, read_markup, write_text
from domdump.models import DumpConfig


def test_defaults_without_config_file() -> None:
    config = load_config(None)
    assert config == DumpConfig()
    assert config.parser == "html.parser"
    assert config.assume_xhtml is True


def test_yaml_config_with_aliases(tmp_path: Path) -> None:
    path = tmp_path / "domdump.yaml"
    path.write_text("parser: xml\nassumeXhtml: false\nencoding: latin-1\n", encoding="utf-8")

    config = load_config(path)
    assert config.parser == "xml"
    assert config.assume_xhtml is False
    assert config.encoding == "latin-1"


def test_empty_yaml_means_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == DumpConfig()


@pytest.mark.parametrize(
    "body",
    [
        "parser: lxml\n",
        "unknown_key: 1\n",
        "- parser\n",
        "parser: [unclosed\n",
    ],
)
def test_invalid_config_exits(tmp_path: Path, body: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(SystemExit):
        load_config(path)


def test_missing_config_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        load_config(tmp_path / "nope.yaml")


def test_read_and_write_text(tmp_path: Path) -> None:
    target = write_text(tmp_path / "out" / "page.html", "<p>é</p>")
    assert target.exists()
    assert read_markup(target) == "<p>é</p>"
    with pytest.raises(SystemExit):
        read_markup(tmp_path / "missing.html")
