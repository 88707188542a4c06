import json
import threading

import numpy as np
import pytest

from conftest import circle_stroke, spiral_stroke
from sketchauth.core.errors import InputTooShortError, MalformedTemplateError, NoTemplateError
from sketchauth.core.fingerprint import build_fingerprint
from sketchauth.core.template_store import TemplateStore, decode_template, encode_template
from sketchauth.utils.blob_store import FileBlobStore


@pytest.fixture
def fingerprint():
    return build_fingerprint(spiral_stroke())


def test_starts_empty(template_store):
    assert template_store.load() is None
    assert not template_store.exists()


def test_save_then_load_round_trips_exactly(template_store, fingerprint):
    template_store.save(fingerprint)
    assert np.array_equal(template_store.load(), fingerprint)
    assert template_store.exists()


def test_save_overwrites(template_store, fingerprint):
    other = build_fingerprint(circle_stroke())
    template_store.save(fingerprint)
    template_store.save(other)
    assert np.array_equal(template_store.load(), other)


def test_save_rejects_malformed_fingerprint(template_store):
    with pytest.raises(MalformedTemplateError):
        template_store.save(np.zeros((4, 3)))
    with pytest.raises(MalformedTemplateError):
        template_store.save([(0.0, float("nan"))])
    assert template_store.load() is None


def test_remove(template_store, fingerprint):
    template_store.save(fingerprint)
    template_store.remove()
    assert template_store.load() is None
    template_store.remove()  # removing again is harmless


def test_export_without_template_fails(template_store):
    with pytest.raises(NoTemplateError, match="No template to export"):
        template_store.export_bytes()


def test_export_writes_xy_objects(template_store, fingerprint):
    template_store.save(fingerprint)
    exported = json.loads(template_store.export_bytes())
    assert len(exported) == 64
    assert set(exported[0]) == {"x", "y"}
    assert exported[0]["x"] == fingerprint[0, 0]


def test_export_then_import_restores_template(template_store, fingerprint):
    template_store.save(fingerprint)
    data = template_store.export_bytes()
    template_store.remove()
    template_store.import_bytes(data)
    assert np.array_equal(template_store.load(), fingerprint)


def test_import_accepts_coordinate_pairs(template_store):
    pairs = [[float(i), float(-i)] for i in range(10)]
    imported = template_store.import_bytes(json.dumps(pairs))
    assert imported.shape == (10, 2)
    assert np.array_equal(template_store.load(), imported)


def test_import_too_short_keeps_existing_template(template_store, fingerprint):
    template_store.save(fingerprint)
    short = json.dumps([{"x": 1, "y": 2}] * 3)
    with pytest.raises(InputTooShortError):
        template_store.import_bytes(short)
    assert np.array_equal(template_store.load(), fingerprint)


@pytest.mark.parametrize("payload", [
    b"not json",
    b"\xff\xfe\x00",
    b'{"x": 1, "y": 2}',
    b'"a string"',
    json.dumps([{"x": 1}] * 10).encode(),
    json.dumps([["1", "2"]] * 10).encode(),
    json.dumps([[1, 2, 3]] * 10).encode(),
    json.dumps([[True, False]] * 10).encode(),
    b"[" + b",".join([b"[NaN, 1]"] * 10) + b"]",
    pytest.param(b"[" + b",".join([b"[1" + b"0" * 400 + b", 1]"] * 10) + b"]", id="oversized-integer"),
    pytest.param(b"[" * 200000, id="deeply-nested"),
])
def test_import_malformed_keeps_existing_template(template_store, fingerprint, payload):
    template_store.save(fingerprint)
    with pytest.raises(MalformedTemplateError):
        template_store.import_bytes(payload)
    assert np.array_equal(template_store.load(), fingerprint)


def test_unreadable_stored_blob_is_reported_absent(blob_store, template_store):
    blob_store.set(template_store.key, b"garbage")
    assert template_store.load() is None


def test_decode_and_encode_are_inverse(fingerprint):
    assert np.array_equal(decode_template(encode_template(fingerprint)), fingerprint)


def test_stores_are_independent(fingerprint):
    from sketchauth.utils.blob_store import MemoryBlobStore
    first = TemplateStore(MemoryBlobStore())
    second = TemplateStore(MemoryBlobStore())
    first.save(fingerprint)
    assert second.load() is None


def test_file_backed_store_persists(tmp_path, fingerprint):
    TemplateStore(FileBlobStore(tmp_path)).save(fingerprint)
    assert (tmp_path / "sketch_template_v1.json").exists()
    reopened = TemplateStore(FileBlobStore(tmp_path))
    assert np.array_equal(reopened.load(), fingerprint)
    reopened.remove()
    assert not (tmp_path / "sketch_template_v1.json").exists()


def test_concurrent_saves_and_loads_never_tear(tmp_path):
    store = TemplateStore(FileBlobStore(tmp_path))
    candidates = [build_fingerprint(circle_stroke(sweep=0.5 + 0.1 * i)) for i in range(4)]
    candidates.append(build_fingerprint(spiral_stroke()))
    loaded, errors = [], []

    def writer(fingerprint):
        try:
            for _ in range(25):
                store.save(fingerprint)
        except Exception as e:
            errors.append(e)

    def reader():
        try:
            for _ in range(50):
                loaded.append(store.load())
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=writer, args=(fp,)) for fp in candidates]
    threads += [threading.Thread(target=reader) for _ in range(3)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert not errors
    assert len(loaded) == 150
    for template in loaded:
        assert template is None or any(np.array_equal(template, fp) for fp in candidates)
    assert any(np.array_equal(store.load(), fp) for fp in candidates)
