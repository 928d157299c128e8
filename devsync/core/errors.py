from __future__ import annotations


class BusinessError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidFieldError(BusinessError):
    def __init__(self, field: str):
        super().__init__(f"Invalid search field provided: '{field}'")
        self.field = field


class InvalidValueError(BusinessError):
    def __init__(self, field: str, value: str, expected: str):
        super().__init__(f"Invalid value for field '{field}': '{value}'. Expected {expected}.")
        self.field = field
        self.value = value


class InvalidSortError(BusinessError):
    pass


class InvalidIdError(BusinessError, ValueError):
    def __init__(self, label: str):
        super().__init__(f"{label} ID must not be null or empty")
        self.label = label


class NotFoundError(Exception):
    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found with id: {entity_id}")
        self.message = str(self)
        self.entity = entity
        self.entity_id = entity_id
