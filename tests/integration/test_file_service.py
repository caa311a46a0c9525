"""Integration tests for FileService."""

from datetime import timedelta
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.codepad.core.exceptions import (
    DuplicatePathError,
    NotFoundError,
    ReferentialIntegrityError,
    TransactionAborted,
    ValidationError,
)
from src.codepad.models import Project
from src.codepad.models.base import utc_now
from src.codepad.services import FileService
from tests.factories import FileFactory, ProjectFactory

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
async def project(db_session: AsyncSession) -> Project:
    project = ProjectFactory.build(name="demo")
    db_session.add(project)
    await db_session.commit()
    return project


async def _snapshot(service: FileService, project_id) -> list[tuple[str, str]]:
    return [(f.path, f.content) for f in await service.list_files(project_id)]


class TestListFiles:
    async def test_unknown_project_has_no_files(self, file_service: FileService):
        assert await file_service.list_files(uuid4()) == []

    async def test_oldest_first(
        self, file_service: FileService, db_session: AsyncSession, project: Project
    ):
        now = utc_now()
        db_session.add_all(
            [
                FileFactory.build(project_id=project.id, path="b.py", created_at=now),
                FileFactory.build(
                    project_id=project.id, path="a.py", created_at=now - timedelta(minutes=5)
                ),
            ]
        )
        await db_session.commit()

        files = await file_service.list_files(project.id)

        assert [f.path for f in files] == ["a.py", "b.py"]

    async def test_files_of_other_projects_excluded(
        self, file_service: FileService, db_session: AsyncSession, project: Project
    ):
        other = ProjectFactory.build()
        db_session.add(other)
        await db_session.commit()
        db_session.add(FileFactory.build(project_id=other.id, path="other.py"))
        await db_session.commit()

        assert await file_service.list_files(project.id) == []


class TestCreateFile:
    async def test_create_file_is_empty(self, file_service: FileService, project: Project):
        file = await file_service.create_file(project.id, "./src//main.py")

        assert file.path == "./src//main.py"
        assert file.content == ""
        assert await _snapshot(file_service, project.id) == [("./src//main.py", "")]

    @pytest.mark.parametrize("path", [None, "", "  "])
    async def test_missing_path_rejected(self, file_service: FileService, project: Project, path):
        with pytest.raises(ValidationError, match="Path required"):
            await file_service.create_file(project.id, path)

    async def test_unsafe_path_rejected(self, file_service: FileService, project: Project):
        with pytest.raises(ValidationError):
            await file_service.create_file(project.id, "../escape.py")

        assert await file_service.list_files(project.id) == []

    async def test_duplicate_path_conflicts(self, file_service: FileService, project: Project):
        await file_service.create_file(project.id, "a.py")

        with pytest.raises(DuplicatePathError):
            await file_service.create_file(project.id, "a.py")

        assert await _snapshot(file_service, project.id) == [("a.py", "")]

    async def test_unknown_project_rejected(self, file_service: FileService):
        with pytest.raises(ReferentialIntegrityError):
            await file_service.create_file(uuid4(), "a.py")


class TestUpdateFileContent:
    async def test_overwrites_content(self, file_service: FileService, project: Project):
        file = await file_service.create_file(project.id, "a.py")

        await file_service.update_file_content(file.id, "print('hi')\n")

        assert await _snapshot(file_service, project.id) == [("a.py", "print('hi')\n")]

    async def test_empty_string_is_valid(self, file_service: FileService, project: Project):
        file = await file_service.create_file(project.id, "a.py")
        await file_service.update_file_content(file.id, "x")

        await file_service.update_file_content(file.id, "")

        assert await _snapshot(file_service, project.id) == [("a.py", "")]

    async def test_missing_content_rejected(self, file_service: FileService, project: Project):
        file = await file_service.create_file(project.id, "a.py")

        with pytest.raises(ValidationError, match="Content required"):
            await file_service.update_file_content(file.id, None)

    async def test_unknown_file(self, file_service: FileService):
        with pytest.raises(NotFoundError):
            await file_service.update_file_content(uuid4(), "x")


class TestRenameFile:
    async def test_rename_keeps_content(self, file_service: FileService, project: Project):
        file = await file_service.create_file(project.id, "a.py")
        await file_service.update_file_content(file.id, "body")

        await file_service.rename_file(file.id, "pkg/b.py")

        assert await _snapshot(file_service, project.id) == [("pkg/b.py", "body")]

    async def test_rename_to_same_path_is_noop(self, file_service: FileService, project: Project):
        file = await file_service.create_file(project.id, "a.py")

        await file_service.rename_file(file.id, "a.py")

        assert await _snapshot(file_service, project.id) == [("a.py", "")]

    async def test_rename_onto_existing_path_conflicts(
        self, file_service: FileService, project: Project
    ):
        first = await file_service.create_file(project.id, "a.py")
        await file_service.create_file(project.id, "b.py")

        with pytest.raises(DuplicatePathError):
            await file_service.rename_file(first.id, "b.py")

        assert sorted(p for p, _ in await _snapshot(file_service, project.id)) == ["a.py", "b.py"]

    async def test_unsafe_path_rejected(self, file_service: FileService, project: Project):
        file = await file_service.create_file(project.id, "a.py")

        with pytest.raises(ValidationError):
            await file_service.rename_file(file.id, "/etc/passwd")

    async def test_unknown_file(self, file_service: FileService):
        with pytest.raises(NotFoundError):
            await file_service.rename_file(uuid4(), "a.py")


class TestDeleteFile:
    async def test_delete_removes_file(self, file_service: FileService, project: Project):
        keep = await file_service.create_file(project.id, "keep.py")
        drop = await file_service.create_file(project.id, "drop.py")

        assert await file_service.delete_file(drop.id) is True

        files = await file_service.list_files(project.id)
        assert [f.id for f in files] == [keep.id]

    async def test_delete_is_idempotent(self, file_service: FileService, project: Project):
        file = await file_service.create_file(project.id, "a.py")

        assert await file_service.delete_file(file.id) is True
        assert await file_service.delete_file(file.id) is False
        assert await file_service.delete_file(uuid4()) is False


class TestReplaceAllFiles:
    async def test_replace_sets_exact_file_list(self, file_service: FileService, project: Project):
        await file_service.create_file(project.id, "old.py")

        await file_service.replace_all_files(
            project.id,
            [{"path": "x.py", "content": "1"}, {"path": "y.py", "content": "2"}],
        )

        assert await _snapshot(file_service, project.id) == [("x.py", "1"), ("y.py", "2")]

    async def test_paths_are_stored_as_sent(self, file_service: FileService, project: Project):
        files = [
            {"path": "./a.py", "content": "1"},
            {"path": "src//x.py", "content": "2"},
            {"path": "lib /b.py", "content": "3"},
        ]

        await file_service.replace_all_files(project.id, files)

        assert await _snapshot(file_service, project.id) == [
            (f["path"], f["content"]) for f in files
        ]

    async def test_submission_order_is_preserved(
        self, file_service: FileService, project: Project
    ):
        paths = ["z.py", "a.py", "m/n.py", "b.txt", "0.md"]

        await file_service.replace_all_files(project.id, [{"path": p} for p in paths])

        assert [p for p, _ in await _snapshot(file_service, project.id)] == paths

    async def test_replace_issues_new_ids(self, file_service: FileService, project: Project):
        original = await file_service.create_file(project.id, "a.py")

        await file_service.replace_all_files(project.id, [{"path": "a.py", "content": ""}])

        (file,) = await file_service.list_files(project.id)
        assert file.id != original.id

    async def test_empty_list_clears_project(self, file_service: FileService, project: Project):
        await file_service.create_file(project.id, "a.py")

        await file_service.replace_all_files(project.id, [])

        assert await file_service.list_files(project.id) == []

    async def test_replaced_twice_with_same_payload(
        self, file_service: FileService, project: Project
    ):
        payload = [{"path": "x.py", "content": "1"}, {"path": "y.py", "content": "2"}]

        await file_service.replace_all_files(project.id, payload)
        first = await _snapshot(file_service, project.id)
        await file_service.replace_all_files(project.id, payload)

        assert await _snapshot(file_service, project.id) == first

    async def test_other_projects_untouched(
        self, file_service: FileService, db_session: AsyncSession, project: Project
    ):
        other = ProjectFactory.build()
        db_session.add(other)
        await db_session.commit()
        await file_service.create_file(other.id, "keep.py")

        await file_service.replace_all_files(project.id, [{"path": "x.py", "content": ""}])

        assert await _snapshot(file_service, other.id) == [("keep.py", "")]

    async def test_invalid_payload_changes_nothing(
        self, file_service: FileService, project: Project
    ):
        await file_service.replace_all_files(project.id, [{"path": "a.py", "content": "1"}])

        with pytest.raises(ValidationError):
            await file_service.replace_all_files(
                project.id, [{"path": "b.py", "content": "2"}, {"content": "no path"}]
            )

        assert await _snapshot(file_service, project.id) == [("a.py", "1")]

    async def test_failed_insert_rolls_back_delete(
        self, file_service: FileService, project: Project
    ):
        await file_service.replace_all_files(
            project.id, [{"path": "a.py", "content": "1"}, {"path": "b.py", "content": "2"}]
        )

        # The second entry collides with the first on the unique path constraint
        with pytest.raises(TransactionAborted):
            await file_service.replace_all_files(
                project.id, [{"path": "c.py", "content": "3"}, {"path": "c.py", "content": "4"}]
            )

        assert await _snapshot(file_service, project.id) == [("a.py", "1"), ("b.py", "2")]

    async def test_unknown_project(self, file_service: FileService):
        with pytest.raises(NotFoundError):
            await file_service.replace_all_files(uuid4(), [{"path": "a.py", "content": ""}])

    async def test_files_created_after_replace_sort_last(
        self, file_service: FileService, project: Project
    ):
        await file_service.replace_all_files(
            project.id, [{"path": "x.py", "content": ""}, {"path": "y.py", "content": ""}]
        )

        await file_service.create_file(project.id, "new.py")

        assert [p for p, _ in await _snapshot(file_service, project.id)] == [
            "x.py",
            "y.py",
            "new.py",
        ]
