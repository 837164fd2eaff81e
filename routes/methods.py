"""
Named remote methods

Clients call ``POST /api/methods/{name}`` with positional ``params``. Each
handler receives the task service, the caller and the validated params.
"""

from fastapi import APIRouter, Depends
from pydantic import TypeAdapter, ValidationError
from typing import Any, Callable, Dict, List
from database import get_task_service
from errors import BadRequest, MethodNotFound
from middleware.auth import get_caller
from schemas import ApiResponse, Caller, MethodCall, TaskId, TaskText
from services.tasks import TaskService

router = APIRouter()


class Method:
    def __init__(self, name: str, handler: Callable[..., Any], param_types: tuple):
        self.name = name
        self.handler = handler
        self.adapters = [TypeAdapter(t) for t in param_types]

    def __call__(self, service: TaskService, caller: Caller, params: List[Any]) -> Any:
        if len(params) != len(self.adapters):
            raise BadRequest(
                f"{self.name} expects {len(self.adapters)} params, got {len(params)}"
            )

        try:
            # Strict: "1" is not a task id and 0 is not a bool
            args = [
                adapter.validate_python(value, strict=True)
                for adapter, value in zip(self.adapters, params)
            ]
        except ValidationError as e:
            raise BadRequest(f"Invalid params for {self.name}: {e.errors()[0]['msg']}") from e

        return self.handler(service, caller, *args)


method_handlers: Dict[str, Method] = {}


def method(name: str, *param_types):
    """Register a handler under a method name"""
    def register(handler):
        method_handlers[name] = Method(name, handler, param_types)
        return handler
    return register


@method("tasks.insert", TaskText)
def insert_task(service: TaskService, caller: Caller, text: str) -> int:
    return service.insert(caller, text)


@method("tasks.remove", TaskId)
def remove_task(service: TaskService, caller: Caller, task_id: int) -> None:
    service.remove(caller, task_id)


@method("tasks.setChecked", TaskId, bool)
def set_checked(service: TaskService, caller: Caller, task_id: int, checked: bool) -> None:
    service.set_checked(caller, task_id, checked)


@method("tasks.setPrivate", TaskId, bool)
def set_private(service: TaskService, caller: Caller, task_id: int, private: bool) -> None:
    service.set_private(caller, task_id, private)


def call_method(name: str, service: TaskService, caller: Caller, params: List[Any]) -> Any:
    handler = method_handlers.get(name)
    if not handler:
        raise MethodNotFound(f"Method '{name}' not found")
    return handler(service, caller, params)


@router.post("/methods/{name}")
async def invoke_method(
    name: str,
    call: MethodCall,
    caller: Caller = Depends(get_caller),
    service: TaskService = Depends(get_task_service)
) -> ApiResponse:
    """
    Invoke a named method

    Returns:
        ApiResponse with the method's result (the new id for tasks.insert)
    """
    result = call_method(name, service, caller, call.params)

    return ApiResponse(success=True, data=result)
