"""List members and their notes, tags, goals and activity."""

from __future__ import annotations

import hashlib

from ..models import (
    EmptyResponse,
    ListMember,
    ListMemberParams,
    MemberActivity,
    MemberActivityCollection,
    MemberGoal,
    MemberGoalsCollection,
    MemberNote,
    MemberNoteParams,
    MemberNotesCollection,
    MemberTag,
    MemberTagsCollection,
    MemberTagsParams,
    MemberTagUpdate,
)
from ..pagination import ModelBuilder, PaginatedIterator, ResourceClassBuilder, SimpleFilter
from .base import Resource


def subscriber_hash(email: str) -> str:
    """MD5 hash of the lower-cased address, as used in member endpoints."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8"), usedforsecurity=False)
    return digest.hexdigest()


def member_id(email_or_hash: str) -> str:
    """Subscriber hash for an address; hashes pass through unchanged."""
    return subscriber_hash(email_or_hash) if "@" in email_or_hash else email_or_hash


class MemberNoteResource(Resource[MemberNote]):
    """A note attached to a list member."""

    async def update(self, note: str) -> MemberNoteResource:
        data = await self.api.patch(self.endpoint, MemberNote, MemberNoteParams(note=note))
        return MemberNoteResource(self.api, data, self.endpoint)

    async def delete(self) -> None:
        await self.api.delete(self.endpoint, EmptyResponse)


class ListMemberResource(Resource[ListMember]):
    """A list member bound to ``lists/{list_id}/members/{subscriber_hash}``."""

    async def update(self, params: ListMemberParams) -> ListMemberResource:
        data = await self.api.patch(self.endpoint, ListMember, params)
        return ListMemberResource(self.api, data, self.endpoint)

    async def upsert(self, params: ListMemberParams) -> ListMemberResource:
        """Replace the member, creating it when the address is new."""
        data = await self.api.put(self.endpoint, ListMember, params)
        return ListMemberResource(self.api, data, self.endpoint)

    async def archive(self) -> None:
        """Archive the member; history is kept and the address can rejoin."""
        await self.api.delete(self.endpoint, EmptyResponse)

    async def permanently_delete(self) -> None:
        """Erase the member and its history. The address cannot be re-imported."""
        await self.api.post(f"{self.endpoint}/actions/delete-permanent", EmptyResponse)

    # Activity and goals

    async def iter_activity(
        self, filter: SimpleFilter | None = None
    ) -> PaginatedIterator[MemberActivity, MemberActivity, SimpleFilter]:
        """Last 50 events of the member."""
        return await self._iterate(
            "activity", ModelBuilder(), MemberActivityCollection, filter or SimpleFilter()
        )

    async def get_goals(self) -> MemberGoalsCollection:
        """Last 50 goal events; this call is not paginated."""
        return await self.api.get(f"{self.endpoint}/goals", MemberGoalsCollection)

    # Tags

    async def iter_tags(
        self, filter: SimpleFilter | None = None
    ) -> PaginatedIterator[MemberTag, MemberTag, SimpleFilter]:
        return await self._iterate(
            "tags", ModelBuilder(), MemberTagsCollection, filter or SimpleFilter()
        )

    async def update_tags(
        self, add: list[str] | None = None, remove: list[str] | None = None
    ) -> None:
        """Add and remove tags by name; unknown tags are created."""
        tags = [MemberTagUpdate(name=name, status="active") for name in add or []]
        tags += [MemberTagUpdate(name=name, status="inactive") for name in remove or []]
        await self.api.post(f"{self.endpoint}/tags", EmptyResponse, MemberTagsParams(tags=tags))

    # Notes

    async def iter_notes(
        self, filter: SimpleFilter | None = None
    ) -> PaginatedIterator[MemberNote, MemberNoteResource, SimpleFilter]:
        return await self._iterate(
            "notes",
            ResourceClassBuilder(MemberNoteResource),
            MemberNotesCollection,
            filter or SimpleFilter(),
        )

    async def get_note(self, note_id: int) -> MemberNoteResource:
        endpoint = self._child_endpoint("notes", note_id)
        data = await self.api.get(endpoint, MemberNote)
        return MemberNoteResource(self.api, data, endpoint)

    async def create_note(self, note: str) -> MemberNoteResource:
        data = await self.api.post(
            f"{self.endpoint}/notes", MemberNote, MemberNoteParams(note=note)
        )
        return MemberNoteResource(self.api, data, self._child_endpoint("notes", data.id))
