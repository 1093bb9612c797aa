from clausemap.cache.memory_storage import MemoryStorage


class TestMemoryStorage:
    def test_set_and_get(self) -> None:
        storage = MemoryStorage()
        storage.set_item("k", "v")
        assert storage.get_item("k") == "v"

    def test_missing_key(self) -> None:
        assert MemoryStorage().get_item("k") is None

    def test_overwrite(self) -> None:
        storage = MemoryStorage()
        storage.set_item("k", "1")
        storage.set_item("k", "2")
        assert storage.get_item("k") == "2"

    def test_remove_missing_key_is_noop(self) -> None:
        storage = MemoryStorage()
        storage.remove_item("k")
        assert storage.keys() == []

    def test_keys(self) -> None:
        storage = MemoryStorage()
        storage.set_item("a", "1")
        storage.set_item("b", "2")
        storage.remove_item("a")
        assert storage.keys() == ["b"]
