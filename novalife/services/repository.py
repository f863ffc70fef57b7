import logging
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from novalife.core.errors import NotFoundError, ValidationError
from novalife.core.ids import new_id
from novalife.storage.store import BlobStore, DataKey, StoredDocument

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def dump(model: BaseModel) -> Dict[str, Any]:
    return model.model_dump(mode="json")


def validate(model: Type[T], data: Dict[str, Any]) -> T:
    """Build ``model`` from ``data``, reporting schema problems as a 400."""
    try:
        return model.model_validate(data)
    except SchemaError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'value'}: {err['msg']}" for err in e.errors()
        )
        raise ValidationError(f"Invalid {model.__name__}: {problems}")


def set_fields(payload: BaseModel, exclude=None) -> Dict[str, Any]:
    """Fields the client actually sent, minus explicit nulls."""
    return {
        k: v for k, v in payload.model_dump(mode="json", exclude_unset=True, exclude=exclude).items()
        if v is not None
    }


class SingletonRepository(Generic[T]):
    """One document of which exactly one instance exists (about, settings, admin)."""

    def __init__(self, store: BlobStore, key: DataKey, model: Type[T], default_factory: Callable[[], Dict[str, Any]]):
        self.store = store
        self.key = key
        self.model = model
        self.default_factory = default_factory

    def get_or_init(self) -> StoredDocument:
        stored = self.store.get_or_init(self.key, self.default_factory())
        try:
            document = self.model.model_validate(stored.value)
        except SchemaError:
            logger.warning("%s is invalid, filling it from the default", self.key.value)
            document = self._from_default(stored.value)
        return StoredDocument(document, stored.was_initialized)

    def _from_default(self, value: Any) -> T:
        default = self.default_factory()
        if isinstance(value, dict):
            try:
                return self.model.model_validate({**default, **value})
            except SchemaError:
                logger.warning("%s cannot be repaired, using the default", self.key.value)
        return self.model.model_validate(default)

    def get(self) -> T:
        return self.get_or_init().value

    def save(self, document: T) -> T:
        self.store.write(self.key, dump(document))
        return document

    def replace(self, partial: Dict[str, Any]) -> T:
        """Shallow-merge ``partial`` over the stored document and persist it."""
        current = dump(self.get())
        merged = validate(self.model, {**current, **partial})
        return self.save(merged)


class CollectionRepository(Generic[T]):
    """An array document whose items carry a unique string ``id``."""

    def __init__(self, store: BlobStore, key: DataKey, model: Type[T], label: str = "Item"):
        self.store = store
        self.key = key
        self.model = model
        self.label = label

    def list(self) -> List[T]:
        raw = self.store.read(self.key, [])
        if not isinstance(raw, list):
            logger.warning("%s does not hold a list, treating it as empty", self.key.value)
            return []
        items = []
        for item in raw:
            try:
                items.append(self.model.model_validate(item))
            except SchemaError:
                item_id = item.get("id") if isinstance(item, dict) else None
                logger.warning("Skipping invalid item %r in %s", item_id, self.key.value)
        return items

    def save_all(self, items: List[T]) -> List[T]:
        self.store.write(self.key, [dump(item) for item in items])
        return items

    def get(self, item_id: str) -> Optional[T]:
        return next((item for item in self.list() if item.id == item_id), None)

    def append(self, item: Dict[str, Any]) -> List[T]:
        """Add an item, giving it a fresh id unless it carries an unused one."""
        items = self.list()
        taken = {existing.id for existing in items}
        item_id = item.get("id")
        while not item_id or item_id in taken:
            item_id = new_id()
        items.append(validate(self.model, {**item, "id": item_id}))
        return self.save_all(items)

    def update_by_id(self, item_id: str, partial: Dict[str, Any]) -> List[T]:
        items = self.list()
        for index, item in enumerate(items):
            if item.id == item_id:
                items[index] = validate(self.model, {**dump(item), **partial, "id": item_id})
                return self.save_all(items)
        raise NotFoundError(f"{self.label} not found")

    def remove_by_id(self, item_id: str, must_exist: bool = False) -> List[T]:
        """
        Remove the item with ``item_id``.

        Removing an absent id leaves the document untouched; with
        ``must_exist`` it raises NotFoundError instead.
        """
        items = self.list()
        remaining = [item for item in items if item.id != item_id]
        if len(remaining) == len(items):
            if must_exist:
                raise NotFoundError(f"{self.label} not found")
            return items
        return self.save_all(remaining)
