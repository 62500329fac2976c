from bluevelvet.application.dtos.auth.auth_result_dto import AuthResult, UserDTO

__all__ = ["AuthResult", "UserDTO"]
