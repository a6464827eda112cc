from repostwatch.processor.exceptions import ItemNotFoundError
from repostwatch.processor.models import ItemStatus, UploadedItem


class ItemRegistry:
    """In-memory store of uploaded items for the lifetime of the process.

    Only the orchestrator mutates an item; readers get the live object and
    must not modify it.
    """

    def __init__(self) -> None:
        self._items: dict[str, UploadedItem] = {}

    def create(self, filename: str, media_type: str, raw_bytes: bytes) -> UploadedItem:
        item = UploadedItem(filename=filename, raw_bytes=raw_bytes, media_type=media_type)
        self._items[item.id] = item
        return item

    def get(self, item_id: str) -> UploadedItem:
        try:
            return self._items[item_id]
        except KeyError:
            raise ItemNotFoundError(f"Item {item_id} not found") from None

    def items(self) -> list[UploadedItem]:
        return list(self._items.values())

    def history(self) -> list[UploadedItem]:
        """Items that reached a terminal state, oldest first."""
        return [item for item in self._items.values() if item.status.is_terminal]

    def clear_history(self) -> int:
        finished = [item.id for item in self.history()]
        for item_id in finished:
            del self._items[item_id]
        return len(finished)

    def pending(self) -> list[UploadedItem]:
        return [
            item
            for item in self._items.values()
            if item.status in (ItemStatus.WAITING, ItemStatus.PROCESSING)
        ]
