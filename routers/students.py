"""
Router for the /students CRUD endpoints.
"""
from fastapi import APIRouter, Depends, Path, Request, status
from starlette.concurrency import run_in_threadpool

from schemas.student import StudentSchema
from services import students as handlers
from store import StudentStore, get_student_store
from utils.results import to_response

# ids are stored in a 32-bit integer column
MIN_STUDENT_ID = -(2**31)
MAX_STUDENT_ID = 2**31 - 1

router = APIRouter(
    prefix="/students",
    tags=["students"],
)

def student_id_path():
    return Path(
        ...,
        ge=MIN_STUDENT_ID,
        le=MAX_STUDENT_ID,
        description="Student ID",
    )

@router.get(
    "",
    response_model=list[StudentSchema],
    summary="Retrieve all students",
)
def list_students(store: StudentStore = Depends(get_student_store)):
    return to_response(handlers.list_students(store))

@router.get(
    "/{student_id}",
    response_model=StudentSchema,
    summary="Retrieve a single student by ID",
)
def get_student(
    student_id: int = student_id_path(),
    store: StudentStore = Depends(get_student_store),
):
    return to_response(handlers.get_student(store, student_id))

@router.post(
    "",
    response_model=StudentSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new student",
)
async def create_student(
    request: Request,
    store: StudentStore = Depends(get_student_store),
):
    """
    The JSON body is validated by the handler so that malformed input comes
    back as a 400 with the validation errors.
    """
    body = await request.body()
    result = await run_in_threadpool(handlers.create_student, store, body)
    return to_response(result)

@router.put(
    "/{student_id}",
    response_model=StudentSchema,
    summary="Update an existing student by ID",
)
async def update_student(
    request: Request,
    student_id: int = student_id_path(),
    store: StudentStore = Depends(get_student_store),
):
    body = await request.body()
    result = await run_in_threadpool(handlers.update_student, store, student_id, body)
    return to_response(result)

@router.delete(
    "/{student_id}",
    response_model=StudentSchema,
    summary="Delete a student by ID",
)
def delete_student(
    student_id: int = student_id_path(),
    store: StudentStore = Depends(get_student_store),
):
    """
    Deletes the student and returns its last known state.
    """
    return to_response(handlers.delete_student(store, student_id))
