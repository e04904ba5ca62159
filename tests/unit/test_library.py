"""
# Standard Library Unit Tests
"""

from textwrap import dedent

import pytest

from cirno import (
    StdLib,
    Templates,
    Pin,
    Value,
    ValueKind,
    Vector2,
    NotFoundInStdlib,
    InvalidTemplate,
    CouldNotOpenLibrary,
    LoadError,
)
from cirno.library import place_pins


def test_bundled_types():
    types = StdLib().types()
    for tp in ("gates/buf", "gates/and2", "gates/or2", "gates/and3", "gates/or3"):
        assert tp in types


def test_resolve():
    text = StdLib().resolve("gates/and2")
    assert ":pin label 'y" in text


def test_resolve_exact_match():
    stdlib = StdLib()
    for tp in ("and2", "gates/and2.cic", "gates/and", "gates", "/gates/and2", "gates/../gates/and2"):
        with pytest.raises(NotFoundInStdlib) as e:
            stdlib.resolve(tp)
        assert e.value.tp == tp


def test_template_positions():
    """Two-row footprint: first half along the bottom, second half back along the top"""
    pins = Templates().get("gates/and2")
    assert [p.label for p in pins] == ["a", "b", "y", "vcc"]
    assert [p.region.position for p in pins] == [
        Vector2(0, 2),
        Vector2(1, 2),
        Vector2(1, 0),
        Vector2(0, 0),
    ]
    assert pins[2].value == Value(ValueKind.AND, ["a", "b"])
    assert pins[3].value == Value(ValueKind.VCC)


def test_place_pins_six():
    pins = place_pins([Pin(label=str(i)) for i in range(6)])
    assert [(p.region.position.x, p.region.position.y) for p in pins] == [
        (0, 2),
        (1, 2),
        (2, 2),
        (2, 0),
        (1, 0),
        (0, 0),
    ]
    assert all(p.region.size == Vector2(1, 1) for p in pins)


def test_template_cache():
    templates = Templates()
    first = templates.get("gates/or3")
    assert templates.get("gates/or3") is first
    assert list(templates.cache.keys()) == ["gates/or3"]
    assert len(first) == 6


def test_extra_paths(tmp_path):
    (tmp_path / "mine").mkdir()
    (tmp_path / "mine" / "pair.cic").write_text(":pin label 'p\n:pin label 'q value or 'p .\n")
    # Bundled templates take priority over same-named extras
    (tmp_path / "gates").mkdir()
    (tmp_path / "gates" / "and2.cic").write_text(":pin label 'z\n:pin label 'w\n")

    templates = Templates(StdLib([tmp_path]))
    pins = templates.get("mine/pair")
    assert [p.region.position for p in pins] == [Vector2(0, 2), Vector2(0, 0)]
    assert len(templates.get("gates/and2")) == 4


@pytest.mark.parametrize(
    "text, reason",
    [
        (":pin label 'a\n:pin label 'b\n:pin label 'c\n", "odd number of pins"),
        ("", "no pins"),
        (":pin label 'a\n:net type vcc y 0\n", "net object in template"),
        (":pin label 'a\n:pin label\n", "out of tokens"),
    ],
)
def test_invalid_templates(tmp_path, text, reason):
    (tmp_path / "bad.cic").write_text(text)
    templates = Templates(StdLib([tmp_path]))
    with pytest.raises(InvalidTemplate) as e:
        templates.get("bad")
    assert e.value.tp == "bad"
    assert reason in str(e.value)


def test_missing_directory(tmp_path):
    with pytest.raises(CouldNotOpenLibrary) as e:
        StdLib([tmp_path / "nope"])
    assert e.value.path == tmp_path / "nope"
    assert isinstance(e.value, LoadError)


def test_undecodable_template(tmp_path):
    (tmp_path / "bin.cic").write_bytes(b":pin label '\xff\n")
    with pytest.raises(InvalidTemplate) as e:
        Templates(StdLib([tmp_path])).get("bin")
    assert e.value.tp == "bin"
