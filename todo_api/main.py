"""FastAPI application entry point."""

import logging

from fastapi import APIRouter, Depends, FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from todo_api.config import Settings, get_settings
from todo_api.logging_utils import configure_logging
from todo_api.middleware import RedirectMiddleware, RequestLoggingMiddleware
from todo_api.models import HealthResponse, Todo
from todo_api.store import TaskStore
from todo_api.validation import TodoValidationError, validate_new_todo

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(request: Request) -> TaskStore:
    """Provide the task store owned by the running application."""
    return request.app.state.store


async def validated_todo(todo: Todo) -> Todo:
    """Reject todos that break the creation rules before they reach a handler."""
    errors = validate_new_todo(todo)
    if errors:
        raise TodoValidationError(errors)
    return todo


async def validation_error_handler(request: Request, exc: TodoValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.errors)


@router.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check(request: Request, store: TaskStore = Depends(get_store)) -> HealthResponse:
    return HealthResponse(version=request.app.version, todos=len(store))


@router.get("/todos/", response_model=list[Todo], tags=["Todos"])
async def list_todos(store: TaskStore = Depends(get_store)) -> list[Todo]:
    """List all todos in insertion order."""
    return store.list_tasks()


@router.get(
    "/todos/{todo_id}",
    response_model=Todo,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Todo not found"}},
    tags=["Todos"],
)
async def get_todo(todo_id: int, store: TaskStore = Depends(get_store)) -> Todo | Response:
    """Get a specific todo by ID."""
    todo = store.get_task_by_id(todo_id)
    if todo is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return todo


@router.post(
    "/todos",
    response_model=Todo,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Field errors keyed by field name"}},
    tags=["Todos"],
)
async def create_todo(
    response: Response,
    todo: Todo = Depends(validated_todo),
    store: TaskStore = Depends(get_store),
) -> Todo:
    """Create a new todo."""
    created = store.add_task(todo)
    response.headers["Location"] = f"/todos/{created.id}"
    return created


@router.delete("/todos/{todo_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["Todos"])
async def delete_todo(todo_id: int, store: TaskStore = Depends(get_store)) -> None:
    """Delete every todo with the given ID. Succeeds even if none exist."""
    store.delete_task_by_id(todo_id)


def create_app(settings: Settings | None = None, store: TaskStore | None = None) -> FastAPI:
    """Build the application around its own task store."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.title,
        description="A small in-memory todo API.",
        version=settings.version,
    )
    app.state.store = store if store is not None else TaskStore()
    app.include_router(router)
    app.add_exception_handler(TodoValidationError, validation_error_handler)

    app.add_middleware(RequestLoggingMiddleware)
    # Outermost: redirected requests never reach the request logger.
    app.add_middleware(RedirectMiddleware)
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "todo_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
