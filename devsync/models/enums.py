import enum


class UserRole(str, enum.Enum):
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


class QuestionStatus(str, enum.Enum):
    OPEN = "OPEN"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"


class TargetType(str, enum.Enum):
    QUESTION = "QUESTION"
    ANSWER = "ANSWER"
    NOTE = "NOTE"
