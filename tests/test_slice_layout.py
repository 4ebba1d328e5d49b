import math
import numpy as np
import pytest


def _layout(pairs, radius=200.0, with_labels=True):
    from pieviz.svl.pie_verify import scale_values
    from pieviz.ve.slice_layout import layout_slices
    return layout_slices(scale_values(pairs), radius, lambda c: "abcdef", with_labels)


def test_single_entry_is_whole_ring_and_flipped():
    (p,) = _layout([("Only", 42.0)])
    assert p.percentage == pytest.approx(100.0)
    assert p.offset == 0.0
    assert p.label.rotation == pytest.approx(180.0)
    assert p.label.flipped is True
    assert p.label.x == p.label.y == -200.0
    assert p.label.translate == (100.0, -5)
    assert p.label.text == "100.0%"
    assert p.segment.dash_length == pytest.approx(p.segment.circumference)


def test_two_halves_sit_on_flip_boundaries():
    a, b = _layout([("A", 1.0), ("B", 1.0)])
    assert (a.percentage, b.percentage) == (50.0, 50.0)
    assert a.label.rotation == pytest.approx(90.0)
    assert b.offset == 50.0
    assert b.label.rotation == pytest.approx(270.0)
    assert not a.label.flipped and not b.label.flipped
    assert a.label.x == b.label.x == 200.0


def test_zero_entry_uses_offset_before_it():
    a, b = _layout([("A", 0.0), ("B", 10.0)])
    assert a.segment.dash_length == 0
    assert a.offset == 0.0 and b.offset == 0.0
    assert a.label.rotation == 0.0
    assert a.label.text == "0.0%"
    assert a.label.small is True
    assert b.segment.dash_offset == 0


def test_pets_segments():
    cat, dog, ham = _layout([("Cat", 10.0), ("Dog", 20.0), ("Hamster", 5.0)])
    c = math.pi * 200.0
    assert cat.segment.circumference == pytest.approx(c)
    assert dog.segment.dash_length == pytest.approx(c * 20 / 35)
    assert dog.segment.dash_offset == pytest.approx(-c * 10 / 35)
    assert ham.segment.dash_offset == pytest.approx(-c * 30 / 35)
    assert [p.label.text for p in (cat, dog, ham)] == ["28.57%", "57.14%", "14.29%"]
    assert [p.label.flipped for p in (cat, dog, ham)] == [False, True, False]
    assert [p.index for p in (cat, dog, ham)] == [0, 1, 2]


def test_small_label_threshold():
    big, small = _layout([("big", 95.0), ("small", 5.0)])
    assert small.label.small is True
    assert big.label.small is False


def test_rotations_never_run_backward():
    rng = np.random.default_rng(7)
    vals = rng.gamma(1.0, 3.0, 30)
    vals[::4] = 0.0
    placements = _layout([(i, float(v)) for i, v in enumerate(vals)])
    rotations = [p.label.rotation for p in placements]
    assert all(b >= a for a, b in zip(rotations, rotations[1:]))
    assert [p.category for p in placements] == list(range(30))


def test_labels_off():
    placements = _layout([("A", 1), ("B", 3)], with_labels=False)
    assert all(p.label is None for p in placements)


def test_colour_lookup_is_used_per_category():
    from pieviz.svl.pie_verify import scale_values
    from pieviz.ve.slice_layout import layout_slices
    colours = {"A": "111111", "B": "222222"}
    out = layout_slices(scale_values([("A", 1), ("B", 1)]), 10.0, colours.__getitem__)
    assert [p.segment.colour for p in out] == ["111111", "222222"]


def test_radius_must_be_positive():
    with pytest.raises(ValueError):
        _layout([("A", 1)], radius=0)


def test_to_dict_is_json_friendly():
    (p,) = _layout([(("tuple", "key"), 1)])
    d = p.to_dict()
    assert d["category"] == "('tuple', 'key')"
    assert d["segment"]["colour"] == "abcdef"
    assert d["label"]["text"] == "100.0%"
