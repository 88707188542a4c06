import pytest

from sketchauth.utils.blob_store import FileBlobStore, MemoryBlobStore


@pytest.fixture(params=["memory", "file"])
def store(request, tmp_path):
    if request.param == "memory":
        return MemoryBlobStore()
    return FileBlobStore(tmp_path / "blobs")


def test_get_missing_key(store):
    assert store.get("missing") is None


def test_set_get_delete(store):
    store.set("slot", b"[1, 2]")
    assert store.get("slot") == b"[1, 2]"
    store.set("slot", b"[3]")
    assert store.get("slot") == b"[3]"
    store.delete("slot")
    assert store.get("slot") is None
    store.delete("slot")


def test_file_store_creates_directory_and_leaves_no_temp_files(tmp_path):
    directory = tmp_path / "nested" / "templates"
    store = FileBlobStore(directory)
    store.set("slot", b"data")
    assert [p.name for p in directory.iterdir()] == ["slot.json"]


@pytest.mark.parametrize("key", ["../escape", "a/b", ""])
def test_file_store_rejects_path_like_keys(tmp_path, key):
    with pytest.raises(ValueError):
        FileBlobStore(tmp_path).set(key, b"data")
