class GanttError(Exception):
    """Базовая ошибка предметной области; status_code используется обработчиком в main.py."""
    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ConflictError(GanttError):
    # дубликат ресурса или OrderCode
    status_code = 409


class ValidationFailed(GanttError):
    # данные формально корректны, но нарушают связи (неизвестный ресурс, бросок вне сетки)
    status_code = 422


class StorageError(GanttError):
    status_code = 500
