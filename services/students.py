"""
Student CRUD handlers.

Each handler performs one store operation and reports what happened as a
`HandlerResult`; routers only translate that into an HTTP response.
"""
import functools
import logging

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from schemas.student import StudentPayload, payload_to_values, student_to_wire
from store import StudentStore
from utils.results import HandlerResult

logger = logging.getLogger(__name__)


def store_guard(handler):
    """Turn store failures into an internal-error result after rolling back."""

    @functools.wraps(handler)
    def wrapper(store: StudentStore, *args, **kwargs) -> HandlerResult:
        try:
            return handler(store, *args, **kwargs)
        except SQLAlchemyError:
            logger.exception(f"Store failure in {handler.__name__}")
            store.rollback()
            return HandlerResult.internal_error()

    return wrapper


def parse_payload(body: bytes):
    """
    Validate a raw request body. Returns (payload, None) or (None, bad-request result).
    """
    try:
        return StudentPayload.model_validate_json(body), None
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_input=False)
        return None, HandlerResult.bad_request("Invalid student payload", errors)


@store_guard
def list_students(store: StudentStore) -> HandlerResult:
    students = [student_to_wire(s) for s in store.find_all()]
    logger.info(f"Listed {len(students)} students")
    return HandlerResult.ok(students)


@store_guard
def get_student(store: StudentStore, student_id: int) -> HandlerResult:
    student = store.find_by_id(student_id)
    if not student:
        logger.info(f"Student ID {student_id} not found")
        return HandlerResult.not_found()
    logger.info(f"Fetched student ID {student_id}")
    return HandlerResult.ok(student_to_wire(student))


@store_guard
def create_student(store: StudentStore, body: bytes) -> HandlerResult:
    payload, error = parse_payload(body)
    if error:
        logger.info("Rejected create_student payload")
        return error

    student = store.insert(payload_to_values(payload))
    logger.info(f"Created student ID {student.id}")
    return HandlerResult.created(student_to_wire(student))


@store_guard
def update_student(store: StudentStore, student_id: int, body: bytes) -> HandlerResult:
    student = store.find_by_id(student_id)
    if not student:
        logger.info(f"Student ID {student_id} not found")
        return HandlerResult.not_found()

    payload, error = parse_payload(body)
    if error:
        logger.info(f"Rejected update_student payload for ID {student_id}")
        return error

    student = store.update(student, payload_to_values(payload))
    logger.info(f"Updated student ID {student_id}")
    return HandlerResult.ok(student_to_wire(student))


@store_guard
def delete_student(store: StudentStore, student_id: int) -> HandlerResult:
    student = store.find_by_id(student_id)
    if not student:
        logger.info(f"Student ID {student_id} not found")
        return HandlerResult.not_found()

    # serialize first: the row is gone once the delete commits
    last_state = student_to_wire(student)
    store.remove(student)
    logger.info(f"Deleted student ID {student_id}")
    return HandlerResult.ok(last_state)
