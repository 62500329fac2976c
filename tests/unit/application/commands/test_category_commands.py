"""Unit tests for the catalog commands."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from bluevelvet.application.commands.catalog import (
    INITIAL_CATEGORIES,
    CreateCategoryCommand,
    DeleteCategoryCommand,
    ResetCategoriesCommand,
    SeedCategoriesCommand,
    UpdateCategoryCommand,
)
from bluevelvet.domain.catalog import (
    Category,
    CategoryHasChildrenError,
    CategoryNotFoundError,
    DuplicateCategoryNameError,
    InvalidCategoryError,
)


@pytest.fixture
def mock_category_repo():
    repo = AsyncMock()
    repo.exists_by_name.return_value = False
    repo.find_by_id.return_value = None
    repo.has_children.return_value = False
    repo.count.return_value = 0
    return repo


@pytest.fixture
def rock():
    return Category(name="Rock", image="rock.png")


class TestCreateCategoryCommand:
    async def test_create_root(self, mock_category_repo):
        command = CreateCategoryCommand(mock_category_repo)

        result = await command.execute(name="Jazz", image="jazz.png")

        mock_category_repo.save.assert_awaited_once()
        assert result.name == "Jazz"
        assert result.image == "jazz.png"
        assert result.enabled is True
        assert result.parent_id is None

    async def test_create_below_parent(self, mock_category_repo, rock):
        mock_category_repo.find_by_id.return_value = rock
        command = CreateCategoryCommand(mock_category_repo)

        result = await command.execute(name="Metal", parent_id=rock.id)

        assert result.parent_id == rock.id
        assert result.parent_name == "Rock"

    async def test_duplicate_name_rejected(self, mock_category_repo):
        mock_category_repo.exists_by_name.return_value = True
        command = CreateCategoryCommand(mock_category_repo)

        with pytest.raises(DuplicateCategoryNameError, match="Rock"):
            await command.execute(name="Rock")

        mock_category_repo.save.assert_not_called()

    async def test_uniqueness_checks_stripped_name(self, mock_category_repo):
        command = CreateCategoryCommand(mock_category_repo)

        result = await command.execute(name="  Rock ")

        mock_category_repo.exists_by_name.assert_awaited_once_with("Rock")
        assert result.name == "Rock"

    async def test_unknown_parent_rejected(self, mock_category_repo):
        parent_id = uuid4()
        command = CreateCategoryCommand(mock_category_repo)

        with pytest.raises(CategoryNotFoundError, match="Parent category not found"):
            await command.execute(name="Metal", parent_id=parent_id)

        mock_category_repo.save.assert_not_called()

    async def test_blank_name_rejected(self, mock_category_repo):
        command = CreateCategoryCommand(mock_category_repo)

        with pytest.raises(InvalidCategoryError):
            await command.execute(name="   ")

    def test_from_factory(self):
        factory = MagicMock()
        repo = AsyncMock()
        factory.category_repository.return_value = repo

        command = CreateCategoryCommand.from_factory(factory)

        assert command._category_repo is repo


class TestUpdateCategoryCommand:
    async def test_missing_category(self, mock_category_repo):
        command = UpdateCategoryCommand(mock_category_repo)

        with pytest.raises(CategoryNotFoundError):
            await command.execute(category_id=uuid4(), name="X")

    async def test_rename_to_taken_name(self, mock_category_repo, rock):
        mock_category_repo.find_by_id.return_value = rock
        mock_category_repo.exists_by_name.return_value = True
        command = UpdateCategoryCommand(mock_category_repo)

        with pytest.raises(DuplicateCategoryNameError):
            await command.execute(category_id=rock.id, name="Jazz")

    async def test_keeping_own_name_is_allowed(self, mock_category_repo, rock):
        mock_category_repo.find_by_id.return_value = rock
        mock_category_repo.exists_by_name.return_value = True
        command = UpdateCategoryCommand(mock_category_repo)

        result = await command.execute(category_id=rock.id, name="Rock")

        assert result.name == "Rock"
        mock_category_repo.exists_by_name.assert_not_called()

    async def test_omitted_parent_makes_root(self, mock_category_repo, rock):
        metal = Category(name="Metal")
        metal.set_parent(rock)
        mock_category_repo.find_by_id.return_value = metal
        command = UpdateCategoryCommand(mock_category_repo)

        result = await command.execute(category_id=metal.id, name="Metal")

        assert result.parent_id is None
        assert result.parent_name is None

    async def test_omitted_enabled_keeps_value(self, mock_category_repo):
        category = Category(name="Pop", enabled=False)
        mock_category_repo.find_by_id.return_value = category
        command = UpdateCategoryCommand(mock_category_repo)

        result = await command.execute(category_id=category.id, name="Pop")

        assert result.enabled is False

    async def test_image_is_not_applied(self, mock_category_repo, rock):
        mock_category_repo.find_by_id.return_value = rock
        command = UpdateCategoryCommand(mock_category_repo)

        result = await command.execute(
            category_id=rock.id,
            name="Rock",
            image="new.png",
        )

        assert result.image == "rock.png"

    async def test_own_parent_rejected(self, mock_category_repo, rock):
        mock_category_repo.find_by_id.return_value = rock
        command = UpdateCategoryCommand(mock_category_repo)

        with pytest.raises(InvalidCategoryError):
            await command.execute(category_id=rock.id, name="Rock", parent_id=rock.id)

        mock_category_repo.save.assert_not_called()

    async def test_moving_below_own_child_rejected(self, mock_category_repo, rock):
        metal = Category(name="Metal")
        metal.set_parent(rock)
        mock_category_repo.find_by_id.side_effect = lambda cid: (
            rock if cid == rock.id else metal
        )
        command = UpdateCategoryCommand(mock_category_repo)

        with pytest.raises(InvalidCategoryError, match="own subcategory"):
            await command.execute(category_id=rock.id, name="Rock", parent_id=metal.id)

        mock_category_repo.save.assert_not_called()

    async def test_unknown_parent_rejected(self, mock_category_repo, rock):
        missing = uuid4()
        mock_category_repo.find_by_id.side_effect = lambda cid: (
            rock if cid == rock.id else None
        )
        command = UpdateCategoryCommand(mock_category_repo)

        with pytest.raises(CategoryNotFoundError, match=str(missing)):
            await command.execute(category_id=rock.id, name="Rock", parent_id=missing)


class TestDeleteCategoryCommand:
    async def test_delete_leaf(self, mock_category_repo, rock):
        mock_category_repo.find_by_id.return_value = rock
        command = DeleteCategoryCommand(mock_category_repo)

        await command.execute(rock.id)

        mock_category_repo.delete.assert_awaited_once_with(rock.id)

    async def test_delete_parent_rejected(self, mock_category_repo, rock):
        mock_category_repo.find_by_id.return_value = rock
        mock_category_repo.has_children.return_value = True
        command = DeleteCategoryCommand(mock_category_repo)

        with pytest.raises(CategoryHasChildrenError, match="Rock"):
            await command.execute(rock.id)

        mock_category_repo.delete.assert_not_called()

    async def test_delete_missing(self, mock_category_repo):
        command = DeleteCategoryCommand(mock_category_repo)

        with pytest.raises(CategoryNotFoundError):
            await command.execute(uuid4())

        mock_category_repo.delete.assert_not_called()


class TestResetCategoriesCommand:
    async def test_returns_deleted_count(self, mock_category_repo):
        mock_category_repo.delete_all.return_value = 7
        command = ResetCategoriesCommand(mock_category_repo)

        assert await command.execute() == 7


class TestSeedCategoriesCommand:
    async def test_seeds_empty_catalog(self, mock_category_repo):
        command = SeedCategoriesCommand(mock_category_repo)

        inserted = await command.execute()

        assert inserted == len(INITIAL_CATEGORIES) == 10
        saved = [c.args[0].name for c in mock_category_repo.save.call_args_list]
        assert saved == [name for name, _ in INITIAL_CATEGORIES]

    async def test_skips_when_not_empty(self, mock_category_repo):
        mock_category_repo.count.return_value = 3
        command = SeedCategoriesCommand(mock_category_repo)

        assert await command.execute() == 0
        mock_category_repo.save.assert_not_called()
