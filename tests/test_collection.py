import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from histyles import StyleCollection  # noqa: E402
from models import Style, StyleEntry  # noqa: E402


def make_style(color: str, bold: bool | None = None) -> Style:
    return Style(background_color="#ffffff", tokens={"Token.Keyword": StyleEntry(color=color, bold=bold)})


def test_from_external_replaces_existing_entries():
    coll = StyleCollection({"stale": make_style("#000000")})
    coll.from_external({"a": "#111111", "b": "#222222"}, make_style)

    assert sorted(coll.names()) == ["a", "b"]
    assert coll["b"].tokens["Token.Keyword"].color == "#222222"


def test_copy_from_later_collection_wins():
    standard = {"emacs": make_style("#aa22ff"), "monokai": make_style("#f92672")}
    custom = {"monokai": make_style("#ffffff", bold=True), "mine": make_style("#123456")}

    available = StyleCollection()
    available.copy_from(standard)
    available.copy_from(custom)

    assert sorted(available) == ["emacs", "mine", "monokai"]
    assert available["monokai"] == custom["monokai"]
    assert available["emacs"] == standard["emacs"]
    assert available["mine"] == custom["mine"]


def test_copy_from_never_removes_names():
    coll = StyleCollection({"keep": make_style("#000000")})
    coll.copy_from({})
    assert "keep" in coll


def test_copy_from_makes_independent_copies():
    source = {"s": make_style("#000000")}
    coll = StyleCollection()
    coll.copy_from(source)

    coll["s"].tokens["Token.Keyword"].color = "#ff0000"
    coll["s"].tokens["Token.Comment"] = StyleEntry(italic=True)

    assert source["s"].tokens["Token.Keyword"].color == "#000000"
    assert "Token.Comment" not in source["s"].tokens


def test_empty_collection_is_allowed():
    coll = StyleCollection()
    assert coll.names() == []
    assert StyleCollection.from_json(coll.to_json()) == {}
