from bluevelvet.domain.catalog.entities.category import NAME_MAX_LENGTH, Category

__all__ = ["NAME_MAX_LENGTH", "Category"]
