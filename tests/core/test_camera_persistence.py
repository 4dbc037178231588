from __future__ import annotations

import json
import logging
from decimal import Decimal
from fractions import Fraction
from pathlib import Path

import pytest

from engine.core import Camera, load_camera, save_camera
from engine.core.persistence import FORMAT_VERSION
from numeric.scalar import ScalarKind
from planar import Complex, Point, Vector


def test_save_then_load_restores_exact_state(tmp_path: Path) -> None:
    cam = Camera(ScalarKind.RATIONAL)
    cam.set_scale(Fraction(5, 3))
    cam.add_translation(Vector(Fraction(-1, 7), Fraction(2)))
    cam.set_rotation(Complex(Fraction(3, 5), Fraction(4, 5)))

    path = save_camera(cam, tmp_path / "state" / "camera.json")
    assert path.exists()
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["version"] == FORMAT_VERSION
    assert "saved_at" in data

    back = load_camera(path)
    assert back == cam
    assert back is not None and back.scale.scale_x() == Fraction(5, 3)


def test_round_trip_float_and_decimal(tmp_path: Path, panned_zoomed_camera: Camera) -> None:
    path = save_camera(panned_zoomed_camera, tmp_path / "f.json")
    assert load_camera(path) == panned_zoomed_camera

    dec = Camera(ScalarKind.DECIMAL)
    dec.set_translation(Point(Decimal("0.1"), Decimal("-2.5")))
    path = save_camera(dec, tmp_path / "d.json")
    back = load_camera(path)
    assert back == dec
    assert back is not None and back.translation.translation().x == Decimal("0.1")


def test_save_logs_info(tmp_path: Path, camera: Camera, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="engine.core.persistence"):
        save_camera(camera, tmp_path / "c.json")
    assert any("camera saved" in r.getMessage() for r in caplog.records)


def test_load_missing_file_returns_none(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="engine.core.persistence"):
        assert load_camera(tmp_path / "nope.json") is None
    assert any(r.levelno == logging.WARNING for r in caplog.records)


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        json.dumps([1, 2, 3]),
        json.dumps({"version": 999, "camera": {}}),
        json.dumps({"version": FORMAT_VERSION}),
        json.dumps({"version": FORMAT_VERSION, "camera": {"translation": {}}}),
        json.dumps(
            {
                "version": FORMAT_VERSION,
                "camera": {
                    "translation": {"rows": [[{"kind": "integer", "value": "x"}] * 3] * 3},
                    "scale": {"rows": []},
                    "rotation": {"rows": []},
                },
            }
        ),
    ],
)
def test_load_malformed_is_fail_soft(tmp_path: Path, payload: str) -> None:
    path = tmp_path / "bad.json"
    path.write_text(payload, encoding="utf-8")
    assert load_camera(path) is None


def test_load_non_utf8_bytes_is_fail_soft(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "binary.json"
    path.write_bytes(b'{"version": 1, "camera": "\xff\xfe"}')
    with caplog.at_level(logging.WARNING, logger="engine.core.persistence"):
        assert load_camera(path) is None
    assert any(r.levelno == logging.WARNING for r in caplog.records)
