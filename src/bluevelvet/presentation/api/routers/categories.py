"""Categories router for catalog management and the public shop listings.

Literal paths are declared before ``/{category_id}`` so they are never
captured by the id route.
"""

import logging
from io import BytesIO
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status
from fastapi.responses import StreamingResponse

from bluevelvet.application.commands.catalog import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    ResetCategoriesCommand,
    UpdateCategoryCommand,
)
from bluevelvet.application.queries.catalog import (
    ExportCategoriesQuery,
    GetCategoryQuery,
    ListCategoriesQuery,
)
from bluevelvet.infrastructure.export import (
    CategoryCsvExporter,
    CategoryExcelExporter,
)
from bluevelvet.presentation.api.dependencies import RepoFactory
from bluevelvet.presentation.api.schemas.categories import (
    CategoryPageResponse,
    CategoryRequest,
    CategoryResponse,
    ResetResponse,
)
from bluevelvet.presentation.api.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()

# Type aliases for query parameters using Annotated (modern FastAPI pattern)
PageParam = Annotated[int, Query(ge=1, description="Page number (1-based)")]
PageSizeParam = Annotated[int, Query(ge=1, le=100, description="Items per page")]

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Category not found"}}


# -----------------------------------------------------------------------------
# Admin listings
# -----------------------------------------------------------------------------


@router.get("/", summary="List categories")
async def list_categories(
    factory: RepoFactory,
    page: PageParam = 1,
    page_size: PageSizeParam = 10,
) -> CategoryPageResponse:
    """List all categories, sorted by name ascending."""
    query = ListCategoriesQuery.from_factory(factory)
    result = await query.list_all(page=page, page_size=page_size)
    return CategoryPageResponse.from_dto(result)


@router.get("/top-level", summary="List root categories")
async def list_top_level(
    factory: RepoFactory,
    page: PageParam = 1,
    page_size: PageSizeParam = 5,
) -> CategoryPageResponse:
    """List categories without a parent, by name."""
    query = ListCategoriesQuery.from_factory(factory)
    result = await query.list_top_level(page=page, page_size=page_size)
    return CategoryPageResponse.from_dto(result)


@router.get("/hierarchy", summary="List root categories with children")
async def list_hierarchy(
    factory: RepoFactory,
    page: PageParam = 1,
    page_size: PageSizeParam = 5,
) -> CategoryPageResponse:
    """List root categories, each with its direct subcategories."""
    query = ListCategoriesQuery.from_factory(factory)
    result = await query.list_top_level(
        page=page,
        page_size=page_size,
        with_children=True,
    )
    return CategoryPageResponse.from_dto(result)


@router.get("/search", summary="Search categories by name")
async def search_categories(
    factory: RepoFactory,
    name: Annotated[str, Query(description="Case-insensitive name fragment")],
    page: PageParam = 1,
    page_size: PageSizeParam = 10,
) -> CategoryPageResponse:
    query = ListCategoriesQuery.from_factory(factory)
    result = await query.search_by_name(name, page=page, page_size=page_size)
    return CategoryPageResponse.from_dto(result)


@router.get(
    "/sorted",
    summary="List categories with custom sort",
    responses={400: {"model": ErrorResponse, "description": "Invalid sort"}},
)
async def list_sorted(
    factory: RepoFactory,
    sort_by: Annotated[str, Query(description="id, name or enabled")] = "name",
    direction: Annotated[str, Query(description="asc or desc")] = "asc",
    page: PageParam = 1,
    page_size: PageSizeParam = 10,
) -> CategoryPageResponse:
    """List all categories sorted by the given field and direction."""
    query = ListCategoriesQuery.from_factory(factory)
    result = await query.list_all(
        page=page,
        page_size=page_size,
        sort_by=sort_by,
        direction=direction,
    )
    return CategoryPageResponse.from_dto(result)


@router.get("/enabled", summary="List enabled categories")
async def list_enabled(
    factory: RepoFactory,
    page: PageParam = 1,
    page_size: PageSizeParam = 10,
) -> CategoryPageResponse:
    query = ListCategoriesQuery.from_factory(factory)
    result = await query.list_enabled(page=page, page_size=page_size)
    return CategoryPageResponse.from_dto(result)


@router.get("/exists", summary="Check whether a name is taken")
async def exists_by_name(
    factory: RepoFactory,
    name: Annotated[str, Query(description="Exact category name")],
) -> bool:
    query = ListCategoriesQuery.from_factory(factory)
    return await query.exists_by_name(name)


# -----------------------------------------------------------------------------
# Shopper view
# -----------------------------------------------------------------------------


@router.get("/public", summary="Enabled categories for shoppers")
async def list_public(factory: RepoFactory) -> list[CategoryResponse]:
    """All enabled categories, unpaginated, by name."""
    query = ListCategoriesQuery.from_factory(factory)
    result = await query.list_enabled_for_shopper()
    return [CategoryResponse.from_dto(dto) for dto in result]


@router.get("/public/hierarchy", summary="Enabled category tree for shoppers")
async def list_public_hierarchy(factory: RepoFactory) -> list[CategoryResponse]:
    """Enabled root categories with their enabled subcategories."""
    query = ListCategoriesQuery.from_factory(factory)
    result = await query.list_enabled_with_children()
    return [CategoryResponse.from_dto(dto) for dto in result]


# -----------------------------------------------------------------------------
# Export
# -----------------------------------------------------------------------------


@router.get("/export", summary="Export all categories")
async def export_categories(factory: RepoFactory) -> list[CategoryResponse]:
    query = ExportCategoriesQuery.from_factory(factory)
    result = await query.execute()
    return [CategoryResponse.from_dto(dto) for dto in result]


@router.get(
    "/export/csv",
    summary="Download categories as CSV",
    response_class=StreamingResponse,
    responses={200: {"description": "CSV file download", "content": {"text/csv": {}}}},
)
async def export_categories_csv(factory: RepoFactory) -> StreamingResponse:
    """Download `ID,Name,Status,Parent Category` rows ordered by name."""
    query = ExportCategoriesQuery.from_factory(factory)
    data = await query.execute()

    exporter = CategoryCsvExporter()
    filename = exporter.filename()

    return StreamingResponse(
        BytesIO(exporter.generate(data).encode("utf-8")),
        media_type=exporter.media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get(
    "/export/xlsx",
    summary="Download categories as Excel",
    response_class=StreamingResponse,
    responses={
        200: {
            "description": "Excel file download",
            "content": {CategoryExcelExporter.media_type: {}},
        },
    },
)
async def export_categories_xlsx(factory: RepoFactory) -> StreamingResponse:
    query = ExportCategoriesQuery.from_factory(factory)
    data = await query.execute()

    exporter = CategoryExcelExporter()
    filename = exporter.filename()

    logger.info("Excel export generated: %d categories", len(data))
    return StreamingResponse(
        BytesIO(exporter.generate(data)),
        media_type=exporter.media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# -----------------------------------------------------------------------------
# Mutations
# -----------------------------------------------------------------------------


@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    responses={
        201: {"description": "Category created"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Parent not found"},
        409: {"model": ErrorResponse, "description": "Name already exists"},
    },
)
async def create_category(
    request: CategoryRequest,
    factory: RepoFactory,
) -> CategoryResponse:
    """Create a category. `enabled` defaults to true."""
    command = CreateCategoryCommand.from_factory(factory)

    try:
        result = await command.execute(
            name=request.name,
            image=request.image,
            enabled=True if request.enabled is None else request.enabled,
            parent_id=request.parent_id,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CategoryResponse.from_dto(result)


@router.post(
    "/reset",
    summary="Delete every category",
)
async def reset_categories(factory: RepoFactory) -> ResetResponse:
    """Remove all categories. This cannot be undone."""
    command = ResetCategoriesCommand.from_factory(factory)

    try:
        deleted = await command.execute()
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ResetResponse(message="Categories reset", deleted=deleted)


@router.put(
    "/{category_id}",
    summary="Update category",
    responses={
        **NOT_FOUND,
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "Name already exists"},
    },
)
async def update_category(
    category_id: UUID,
    request: CategoryRequest,
    factory: RepoFactory,
) -> CategoryResponse:
    """
    Update a category.

    An omitted `parent_id` makes the category a root; an omitted `enabled`
    keeps the current value. `image` is not applied on update.
    """
    command = UpdateCategoryCommand.from_factory(factory)

    try:
        result = await command.execute(
            category_id=category_id,
            name=request.name,
            enabled=request.enabled,
            parent_id=request.parent_id,
            image=request.image,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CategoryResponse.from_dto(result)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete category",
    responses={
        **NOT_FOUND,
        409: {"model": ErrorResponse, "description": "Category has subcategories"},
    },
)
async def delete_category(category_id: UUID, factory: RepoFactory) -> None:
    command = DeleteCategoryCommand.from_factory(factory)

    try:
        await command.execute(category_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise


# -----------------------------------------------------------------------------
# Single category reads
# -----------------------------------------------------------------------------


@router.get("/{category_id}", summary="Get category", responses=NOT_FOUND)
async def get_category(category_id: UUID, factory: RepoFactory) -> CategoryResponse:
    query = GetCategoryQuery.from_factory(factory)
    return CategoryResponse.from_dto(await query.execute(category_id))


@router.get(
    "/{category_id}/with-children",
    summary="Get category with its subcategories",
    responses=NOT_FOUND,
)
async def get_category_with_children(
    category_id: UUID,
    factory: RepoFactory,
) -> CategoryResponse:
    query = GetCategoryQuery.from_factory(factory)
    result = await query.execute(category_id, with_children=True)
    return CategoryResponse.from_dto(result)


@router.get(
    "/{category_id}/subcategories",
    summary="List direct subcategories",
    responses=NOT_FOUND,
)
async def list_subcategories(
    category_id: UUID,
    factory: RepoFactory,
) -> list[CategoryResponse]:
    query = ListCategoriesQuery.from_factory(factory)
    result = await query.list_subcategories(category_id)
    return [CategoryResponse.from_dto(dto) for dto in result]


@router.get("/{category_id}/has-children", summary="Check for subcategories")
async def has_children(category_id: UUID, factory: RepoFactory) -> bool:
    query = ListCategoriesQuery.from_factory(factory)
    return await query.has_children(category_id)
