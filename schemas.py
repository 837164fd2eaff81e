from pydantic import BaseModel, Field, StringConstraints
from typing import Annotated, Optional, Any, List
from datetime import datetime

# Surrounding whitespace is dropped before the length check
TaskText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500)]

MAX_TASK_ID = 2**63 - 1

# Ids outside the signed 64-bit range cannot exist in the database
TaskId = Annotated[int, Field(ge=1, le=MAX_TASK_ID)]


class Caller(BaseModel):
    """Identity of whoever is invoking an operation"""
    user_id: Optional[str] = None
    username: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user_id)


class TaskCreate(BaseModel):
    """Schema for creating a new task"""
    text: TaskText


class TaskCheckedUpdate(BaseModel):
    """Schema for setting the checked flag"""
    checked: bool


class TaskPrivateUpdate(BaseModel):
    """Schema for setting the private flag"""
    private: bool


class TaskResponse(BaseModel):
    """Schema for task response"""
    id: int
    text: str
    created_at: datetime
    owner: str
    username: str
    checked: bool
    private: bool

    class Config:
        from_attributes = True


class TaskListResponse(BaseModel):
    """Visible tasks plus the incomplete counter"""
    tasks: List[TaskResponse]
    incomplete_count: int


class MethodCall(BaseModel):
    """Body of a named method invocation"""
    params: List[Any] = Field(default_factory=list)


class ErrorDetail(BaseModel):
    code: str
    message: str


class ApiResponse(BaseModel):
    """Standard API response wrapper"""
    success: bool
    data: Optional[Any] = None
    error: Optional[ErrorDetail] = None
