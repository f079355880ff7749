"""Domain errors raised by the ledger and services, mapped to HTTP by exception_handlers."""
from uuid import UUID


class LessonServiceError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(LessonServiceError):
    def __init__(self, message: str):
        super().__init__(message, 404)


class LessonNotFoundError(NotFoundError):
    def __init__(self, lesson_id: UUID):
        self.lesson_id = lesson_id
        super().__init__(f"Lesson not found: {lesson_id}")


class InsufficientInventoryError(LessonServiceError):
    def __init__(self, lesson_id: UUID, available: int, requested: int):
        self.lesson_id = lesson_id
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient inventory for lesson {lesson_id}: available={available} requested={requested}",
            409,
        )


class InventoryCapacityError(LessonServiceError):
    def __init__(self, lesson_id: UUID, available: int, total: int, released: int):
        self.lesson_id = lesson_id
        self.available = available
        self.total = total
        self.released = released
        super().__init__(
            f"Inventory for lesson {lesson_id} would exceed its total: "
            f"available={available} total={total} released={released}",
            409,
        )


class NoChangeError(LessonServiceError):
    def __init__(self, message: str = "No changes made to available spaces"):
        super().__init__(message, 400)


class PersistenceError(LessonServiceError):
    def __init__(self, message: str = "A storage error occurred while processing the request"):
        super().__init__(message, 500)
