import logging
import re
from typing import List, Optional

from novalife.core.errors import NotFoundError, ValidationError
from novalife.core.ids import new_id
from novalife.models.about import (
    DEFAULT_ABOUT_DATA,
    AboutData,
    AboutUpdate,
    Project,
    ProjectIn,
    TimelineItem,
    TimelineItemIn,
)
from novalife.services.repository import SingletonRepository, dump, set_fields, validate
from novalife.storage.store import BlobStore, DataKey, StoredDocument

logger = logging.getLogger(__name__)

LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def year_value(year: str) -> Optional[int]:
    """Integer at the start of ``year`` ("2020-2022" -> 2020), or None."""
    match = LEADING_INT.match(year or "")
    return int(match.group(1)) if match else None


def sort_timeline(items: List[TimelineItem]) -> List[TimelineItem]:
    # Stable: equal years keep their relative order; unparseable years go last
    def key(item: TimelineItem):
        value = year_value(item.year)
        return (1, 0) if value is None else (0, -value)

    return sorted(items, key=key)


class AboutService:
    """The about page document and its nested timeline and project lists."""

    def __init__(self, store: BlobStore):
        self.repo = SingletonRepository(store, DataKey.ABOUT, AboutData, lambda: DEFAULT_ABOUT_DATA)

    def get_or_init(self) -> StoredDocument:
        return self.repo.get_or_init()

    def get(self) -> AboutData:
        return self.repo.get()

    def update(self, data: AboutUpdate) -> AboutData:
        partial = set_fields(data)
        for field in ("timeline", "projects"):
            if field in partial:
                _check_unique_ids(field, partial[field])
        if "timeline" in partial:
            items = [validate(TimelineItem, item) for item in partial["timeline"]]
            partial["timeline"] = [dump(item) for item in sort_timeline(items)]
        about = self.repo.replace(partial)
        logger.info("Updated about page fields: %s", ", ".join(sorted(partial)) or "none")
        return about

    # Timeline

    def add_timeline_item(self, fields: TimelineItemIn) -> AboutData:
        about = self.get()
        item = validate(TimelineItem, {**set_fields(fields, exclude={"id"}), "id": _fresh_id(about.timeline)})
        about.timeline = sort_timeline(about.timeline + [item])
        logger.info("Added timeline item %s", item.id)
        return self.repo.save(about)

    def update_timeline_item(self, item_id: str, fields: TimelineItemIn) -> AboutData:
        about = self.get()
        index = _index_of(about.timeline, item_id)
        if index is None:
            raise NotFoundError("Timeline item not found")
        merged = {**dump(about.timeline[index]), **set_fields(fields, exclude={"id"})}
        about.timeline[index] = validate(TimelineItem, merged)
        about.timeline = sort_timeline(about.timeline)
        logger.info("Updated timeline item %s", item_id)
        return self.repo.save(about)

    def remove_timeline_item(self, item_id: str) -> AboutData:
        about = self.get()
        remaining = [item for item in about.timeline if item.id != item_id]
        if len(remaining) == len(about.timeline):
            return about
        about.timeline = remaining
        logger.info("Removed timeline item %s", item_id)
        return self.repo.save(about)

    # Projects

    def get_project(self, project_id: str) -> Project:
        project = next((p for p in self.get().projects if p.id == project_id), None)
        if not project:
            raise NotFoundError("Project not found")
        return project

    def add_project(self, fields: ProjectIn) -> AboutData:
        about = self.get()
        project = validate(Project, {**set_fields(fields, exclude={"id"}), "id": _fresh_id(about.projects)})
        about.projects.append(project)
        logger.info("Added project %s", project.id)
        return self.repo.save(about)

    def update_project(self, project_id: str, fields: ProjectIn) -> AboutData:
        about = self.get()
        index = _index_of(about.projects, project_id)
        if index is None:
            raise NotFoundError("Project not found")
        merged = {**dump(about.projects[index]), **set_fields(fields, exclude={"id"})}
        about.projects[index] = validate(Project, merged)
        logger.info("Updated project %s", project_id)
        return self.repo.save(about)

    def remove_project(self, project_id: str) -> AboutData:
        about = self.get()
        remaining = [p for p in about.projects if p.id != project_id]
        if len(remaining) == len(about.projects):
            return about
        about.projects = remaining
        logger.info("Removed project %s", project_id)
        return self.repo.save(about)


def _index_of(items, item_id: str) -> Optional[int]:
    return next((i for i, item in enumerate(items) if item.id == item_id), None)


def _check_unique_ids(field: str, items) -> None:
    ids = [item.get("id") for item in items]
    if len(ids) != len(set(ids)):
        raise ValidationError(f"Duplicate ids in {field}")


def _fresh_id(items) -> str:
    taken = {item.id for item in items}
    item_id = new_id()
    while item_id in taken:
        item_id = new_id()
    return item_id
