from todo_service.api.routes import router

__all__ = ["router"]
