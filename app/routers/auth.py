import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.database import FACULTY_RANGE, STUDENTS_RANGE, SheetStore
from app.dependencies import get_store
from app.errors import AuthenticationDenied, StoreUnavailable
from app.models import FacultyLogin, LoginResult, StudentLogin
from app.tables import cell

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/login", tags=["Auth"])

# Students sheet: email in B, registration number (the password) in D
STUDENT_EMAIL_COL = 1
STUDENT_REGNO_COL = 3
# FacultyUsers sheet: Email | Password | Role
FACULTY_EMAIL_COL = 0
FACULTY_PASSWORD_COL = 1
FACULTY_ROLE_COL = 2


def check_student_credentials(rows, email, reg_no):
    """Exact, case-sensitive match on email and registration number. First matching row wins."""
    if not email or not reg_no:
        return None
    for row in rows[1:]:
        if cell(row, STUDENT_EMAIL_COL) == email and cell(row, STUDENT_REGNO_COL) == reg_no:
            return LoginResult(role="student", identifier=cell(row, STUDENT_REGNO_COL))
    return None


def check_faculty_credentials(rows, email, password):
    if not email or not password:
        return None
    for row in rows[1:]:
        if cell(row, FACULTY_EMAIL_COL) == email and cell(row, FACULTY_PASSWORD_COL) == password:
            # role is free text straight from the sheet
            return LoginResult(role=cell(row, FACULTY_ROLE_COL), identifier=cell(row, FACULTY_EMAIL_COL))
    return None


@router.post("/student")
def student_login(data: StudentLogin, store: SheetStore = Depends(get_store)):
    try:
        rows = store.read(STUDENTS_RANGE)
    except StoreUnavailable:
        logger.exception("Student login could not read %s", STUDENTS_RANGE)
        return JSONResponse({"error": "Login failed"}, status_code=500)

    result = check_student_credentials(rows, data.email, data.regNo)
    if result is None:
        logger.info("Student login denied")
        raise AuthenticationDenied()
    return result


@router.post("/faculty")
def faculty_login(data: FacultyLogin, store: SheetStore = Depends(get_store)):
    try:
        rows = store.read(FACULTY_RANGE)
    except StoreUnavailable:
        logger.exception("Faculty login could not read %s", FACULTY_RANGE)
        return JSONResponse({"error": "Login failed"}, status_code=500)

    result = check_faculty_credentials(rows, data.email, data.password)
    if result is None:
        logger.info("Faculty login denied")
        raise AuthenticationDenied()
    return result
