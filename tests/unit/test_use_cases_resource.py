"""
Unit tests for the resource lifecycle use cases (List, Get, Create, Update, Delete).
"""
from unittest.mock import AsyncMock

import pytest

from sensestr_api.application.use_cases.resource import (
    CreateResourceUseCase,
    DeleteResourceUseCase,
    GetResourceUseCase,
    ListResourcesUseCase,
    UpdateResourceUseCase,
)
from sensestr_api.core.exceptions import (
    BadRequestError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from sensestr_api.domain.models.device import Device
from sensestr_api.domain.models.session import Session
from sensestr_api.domain.models.viewer import Viewer
from sensestr_api.domain.repositories.resource_repository import ResourceFilter

SESSION_A = "507f1f77bcf86cd799439011"
SESSION_B = "507f1f77bcf86cd799439012"
MISSING_ID = "000000000000000000000000"


async def _create(repo, resource_type, identity, fields, owner=None, publisher=None):
    use_case = CreateResourceUseCase(repo, resource_type, event_publisher=publisher)
    return await use_case.execute(fields, identity, requested_owner_id=owner)


class TestCreateResourceUseCase:
    """Tests for CreateResourceUseCase"""

    @pytest.mark.asyncio
    async def test_owner_defaults_to_caller(self, memory_repository, user_identity):
        device = await _create(memory_repository, Device, user_identity, {"name": "Cam rig"})
        assert device.id is not None
        assert device.owner_id == device.creator_id == device.updator_id == "u1"
        assert device.created_date == device.updated_date
        assert device.id in memory_repository.documents

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, memory_repository, user_identity):
        first = await _create(memory_repository, Session, user_identity, {"name": "a"})
        second = await _create(memory_repository, Session, user_identity, {"name": "b"})
        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_impersonation_without_scope_rejected(self, memory_repository, user_identity):
        with pytest.raises(UnauthorizedError):
            await _create(memory_repository, Viewer, user_identity, {"session_id": SESSION_A}, owner="u2")
        assert memory_repository.documents == {}

    @pytest.mark.asyncio
    async def test_machine_impersonation(self, memory_repository, machine_identity):
        viewer = await _create(memory_repository, Viewer, machine_identity, {"session_id": SESSION_A}, owner="u2")
        assert viewer.owner_id == "u2"
        assert viewer.creator_id == machine_identity.user_id

    @pytest.mark.asyncio
    async def test_machine_self_owner_rejected(self, memory_repository, machine_identity):
        with pytest.raises(BadRequestError):
            await _create(
                memory_repository, Viewer, machine_identity, {}, owner=machine_identity.user_id
            )

    @pytest.mark.asyncio
    async def test_device_sessions_deduplicated(self, memory_repository, user_identity):
        device = await _create(
            memory_repository,
            Device,
            user_identity,
            {"name": "rig", "sessions": [SESSION_A, SESSION_B, SESSION_A]},
        )
        assert device.sessions == [SESSION_A, SESSION_B]

    @pytest.mark.asyncio
    async def test_missing_required_field_is_validation_error(self, memory_repository, user_identity):
        with pytest.raises(ValidationError, match="Device name is required"):
            await _create(memory_repository, Device, user_identity, {"description": "no name"})

    @pytest.mark.asyncio
    async def test_publishes_created_event(self, memory_repository, user_identity, event_publisher):
        viewer = await _create(
            memory_repository, Viewer, user_identity, {"session_id": SESSION_A}, publisher=event_publisher
        )
        assert viewer.owner_id == "u1"
        assert viewer.creator_id == "u1"
        assert event_publisher.names() == ["viewer created"]
        assert event_publisher.events[0][1].id == viewer.id

    @pytest.mark.asyncio
    async def test_rejected_create_publishes_nothing(self, memory_repository, user_identity, event_publisher):
        with pytest.raises(UnauthorizedError):
            await _create(
                memory_repository, Viewer, user_identity, {}, owner="u2", publisher=event_publisher
            )
        assert event_publisher.events == []


class TestGetResourceUseCase:
    """Tests for GetResourceUseCase"""

    @pytest.mark.asyncio
    async def test_get_found(self, memory_repository, user_identity):
        session = await _create(memory_repository, Session, user_identity, {"name": "Standup"})
        result = await GetResourceUseCase(memory_repository, Session).execute(session.id)
        assert result == session

    @pytest.mark.asyncio
    async def test_get_not_found_raises(self, memory_repository):
        with pytest.raises(NotFoundError, match=f"Session with id {MISSING_ID} not found"):
            await GetResourceUseCase(memory_repository, Session).execute(MISSING_ID)


class TestUpdateResourceUseCase:
    """Tests for UpdateResourceUseCase"""

    @pytest.mark.asyncio
    async def test_immutable_fields_preserved(self, memory_repository, user_identity, machine_identity):
        device = await _create(memory_repository, Device, user_identity, {"name": "old"})
        use_case = UpdateResourceUseCase(memory_repository, Device)

        updated = await use_case.execute(device.id, {"name": "new"}, machine_identity)

        stored = memory_repository.documents[device.id]
        assert stored.id == device.id
        assert stored.created_date == device.created_date
        assert stored.creator_id == "u1"
        assert stored.updator_id == machine_identity.user_id
        assert stored.owner_id == "u1"
        assert stored.name == "new"
        assert updated == stored

    @pytest.mark.asyncio
    async def test_updated_date_strictly_increases(self, memory_repository, user_identity):
        session = await _create(memory_repository, Session, user_identity, {"name": "s"})
        use_case = UpdateResourceUseCase(memory_repository, Session)

        first = await use_case.execute(session.id, {"name": "s1"}, user_identity)
        second = await use_case.execute(session.id, {"name": "s2"}, user_identity)

        assert session.updated_date < first.updated_date < second.updated_date
        assert second.updated_date >= second.created_date

    @pytest.mark.asyncio
    async def test_full_replace_clears_absent_fields(self, memory_repository, user_identity):
        device = await _create(
            memory_repository,
            Device,
            user_identity,
            {"name": "rig", "description": "desc", "sessions": [SESSION_A]},
        )
        use_case = UpdateResourceUseCase(memory_repository, Device)

        updated = await use_case.execute(device.id, {"name": "rig"}, user_identity)

        assert updated.description is None
        assert updated.sessions == []

    @pytest.mark.asyncio
    async def test_not_found(self, memory_repository, user_identity):
        with pytest.raises(NotFoundError):
            await UpdateResourceUseCase(memory_repository, Viewer).execute(MISSING_ID, {}, user_identity)

    @pytest.mark.asyncio
    async def test_reassign_without_scope_rejected(self, memory_repository, user_identity):
        viewer = await _create(memory_repository, Viewer, user_identity, {"session_id": SESSION_A})
        use_case = UpdateResourceUseCase(memory_repository, Viewer)

        with pytest.raises(UnauthorizedError, match="cannot change a viewer owner"):
            await use_case.execute(viewer.id, {"session_id": SESSION_B}, user_identity, requested_owner_id="u2")
        assert memory_repository.documents[viewer.id].session_id == SESSION_A

    @pytest.mark.asyncio
    async def test_machine_self_owner_rejected(self, memory_repository, user_identity, machine_identity):
        viewer = await _create(memory_repository, Viewer, user_identity, {})
        use_case = UpdateResourceUseCase(memory_repository, Viewer)

        with pytest.raises(BadRequestError):
            await use_case.execute(viewer.id, {}, machine_identity, requested_owner_id=machine_identity.user_id)

    @pytest.mark.asyncio
    async def test_concurrently_deleted_is_not_found(self, memory_repository, user_identity):
        session = await _create(memory_repository, Session, user_identity, {"name": "s"})
        repo = AsyncMock()
        repo.find_by_id.return_value = session
        repo.update.return_value = False

        with pytest.raises(NotFoundError):
            await UpdateResourceUseCase(repo, Session).execute(session.id, {"name": "t"}, user_identity)


class TestDeleteResourceUseCase:
    """Tests for DeleteResourceUseCase"""

    @pytest.mark.asyncio
    async def test_delete_returns_last_state(self, memory_repository, user_identity):
        session = await _create(memory_repository, Session, user_identity, {"name": "bye"})
        deleted = await DeleteResourceUseCase(memory_repository, Session).execute(session.id, user_identity)
        assert deleted == session
        assert memory_repository.documents == {}

    @pytest.mark.asyncio
    async def test_delete_not_found(self, memory_repository, user_identity):
        with pytest.raises(NotFoundError):
            await DeleteResourceUseCase(memory_repository, Session).execute(MISSING_ID, user_identity)


class TestListResourcesUseCase:
    """Tests for ListResourcesUseCase"""

    @pytest.mark.asyncio
    async def test_list_empty(self, memory_repository):
        page = await ListResourcesUseCase(memory_repository).execute(ResourceFilter())
        assert page.total == 0
        assert page.count == 0
        assert page.items == []

    @pytest.mark.asyncio
    async def test_pagination(self, memory_repository, user_identity):
        for index in range(30):
            await _create(memory_repository, Session, user_identity, {"name": f"s{index}"})
        use_case = ListResourcesUseCase(memory_repository)

        first = await use_case.execute(ResourceFilter(), skip=0, limit=25)
        assert len(first.items) == 25
        assert first.count == 25
        assert first.total == 30

        second = await use_case.execute(ResourceFilter(), skip=25, limit=25)
        assert len(second.items) == 5
        assert second.count == 5
        assert second.total == 30

    @pytest.mark.asyncio
    async def test_filters(self, memory_repository, user_identity, other_user_identity):
        await _create(memory_repository, Viewer, user_identity, {"session_id": SESSION_A})
        await _create(memory_repository, Viewer, user_identity, {"session_id": SESSION_B})
        await _create(memory_repository, Viewer, other_user_identity, {"session_id": SESSION_A})
        use_case = ListResourcesUseCase(memory_repository)

        by_owner = await use_case.execute(ResourceFilter(owner_id="u1"))
        assert by_owner.total == 2

        by_both = await use_case.execute(ResourceFilter(owner_id="u1", session_id=SESSION_A))
        assert by_both.total == 1
        assert by_both.items[0].session_id == SESSION_A

    @pytest.mark.asyncio
    @pytest.mark.parametrize("skip,limit", [(-1, 25), (0, 0), (0, 101)])
    async def test_out_of_range_rejected(self, memory_repository, skip, limit):
        with pytest.raises(ValidationError):
            await ListResourcesUseCase(memory_repository).execute(ResourceFilter(), skip=skip, limit=limit)


class TestViewerLifecycleScenario:
    """Create, update and delete a viewer, checking the published events"""

    @pytest.mark.asyncio
    async def test_viewer_lifecycle(self, memory_repository, user_identity, event_publisher):
        created = await _create(
            memory_repository, Viewer, user_identity, {"session_id": SESSION_A}, publisher=event_publisher
        )
        assert created.owner_id == "u1"
        assert created.creator_id == "u1"

        updated = await UpdateResourceUseCase(memory_repository, Viewer, event_publisher).execute(
            created.id, {"session_id": SESSION_B}, user_identity
        )
        assert updated.updated_date > created.updated_date
        assert updated.owner_id == "u1"
        assert updated.session_id == SESSION_B

        deleted = await DeleteResourceUseCase(memory_repository, Viewer, event_publisher).execute(
            created.id, user_identity
        )
        assert deleted == updated

        with pytest.raises(NotFoundError):
            await GetResourceUseCase(memory_repository, Viewer).execute(created.id)

        assert event_publisher.names() == ["viewer created", "viewer updated", "viewer deleted"]
        assert all(resource.id == created.id for _, resource in event_publisher.events)
        assert event_publisher.events[2][1] == updated
