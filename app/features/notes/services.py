import logging
from typing import List, Optional

from app.db.repositories.notes import NoteRepository, NoteTagRepository
from app.features.notes.schemas import NoteCreate, NoteOut, NoteTagOut
from app.features.tags import TagAggregator

logger = logging.getLogger(__name__)


class NoteService:
    """Même schéma que TodoService : une requête principale, puis les tags en une requête."""

    def __init__(self, *, repo: NoteRepository, tag_repo: NoteTagRepository):
        self.repo = repo
        self.tag_repo = tag_repo
        self.aggregator = TagAggregator(tag_repo)

    def _with_tags(self, notes) -> List[NoteOut]:
        return [NoteOut.model_validate(item) for item in self.aggregator.attach_tags(notes)]

    def list_for_user(self, user_id: int) -> List[NoteOut]:
        return self._with_tags(self.repo.list_by_user(user_id))

    def list_for_user_by_tag(self, user_id: int, tag: str) -> List[NoteOut]:
        return self._with_tags(self.repo.list_by_user_and_tag(user_id, tag))

    def create(self, payload: NoteCreate) -> NoteOut:
        note = self.repo.create(**payload.model_dump())
        logger.info("note created id=%s user_id=%s", note.id, note.user_id)
        return NoteOut.model_validate({**note.model_dump(), "tags": []})

    def add_tag(self, note_id: int, tag: Optional[str]) -> Optional[NoteTagOut]:
        if not self.repo.get(note_id):
            return None
        row = self.tag_repo.create(note_id=note_id, tag=tag)
        logger.info("tag %r added to note id=%s", tag, note_id)
        return NoteTagOut.model_validate(row)
