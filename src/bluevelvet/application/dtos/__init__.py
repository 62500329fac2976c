from bluevelvet.application.dtos.auth import AuthResult, UserDTO
from bluevelvet.application.dtos.catalog import CategoryDTO, CategoryPageDTO

__all__ = ["AuthResult", "CategoryDTO", "CategoryPageDTO", "UserDTO"]
