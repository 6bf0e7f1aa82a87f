import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.database import CHALLENGES_RANGE, STUDENTS_RANGE, SheetStore
from app.dependencies import get_store
from app.errors import StoreUnavailable, ValidationFailed
from app.models import ChallengeInput
from app.tables import cross_validate, filter_by_column, resolve_column

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Challenges"])

DEPARTMENT_COLUMN = "Department"


def append_challenge(store: SheetStore, challenge: ChallengeInput) -> None:
    """Append one challenge row once its department is known to the Students sheet.

    Raises ValidationFailed without writing anything if the Students sheet
    has no Department column or does not list ``challenge.department``.
    """
    students = store.read(STUDENTS_RANGE)
    if not students or resolve_column(students[0], DEPARTMENT_COLUMN) is None:
        raise ValidationFailed("Department column not found in Students sheet")
    if not cross_validate(students, DEPARTMENT_COLUMN, challenge.department):
        raise ValidationFailed(f"Invalid department: {challenge.department}")

    store.append(
        CHALLENGES_RANGE,
        [[challenge.title, challenge.department, challenge.link, challenge.date]],
    )


@router.post("/addChallenge")
def add_challenge(data: ChallengeInput, store: SheetStore = Depends(get_store)):
    try:
        append_challenge(store, data)
    except StoreUnavailable:
        logger.exception("Could not add challenge %r", data.title)
        return JSONResponse({"error": "Failed to add challenge"}, status_code=500)

    logger.info("Challenge %r added for %s", data.title, data.department)
    return {"success": True, "message": "Challenge added successfully!"}


@router.get("/challenges")
def list_challenges(store: SheetStore = Depends(get_store)):
    try:
        return store.read(CHALLENGES_RANGE)
    except StoreUnavailable:
        logger.exception("Could not read %s", CHALLENGES_RANGE)
        return JSONResponse({"error": "Failed to fetch challenges"}, status_code=500)


@router.get("/challenges/{department}")
def challenges_by_department(department: str, store: SheetStore = Depends(get_store)):
    try:
        students = store.read(STUDENTS_RANGE)
        if not cross_validate(students, DEPARTMENT_COLUMN, department):
            return []
        challenges = store.read(CHALLENGES_RANGE)
    except StoreUnavailable:
        logger.exception("Could not fetch challenges for %s", department)
        return JSONResponse({"error": "Failed to fetch challenges by department"}, status_code=500)
    return filter_by_column(challenges, DEPARTMENT_COLUMN, department)
