import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.database import STUDENTS_RANGE, SheetStore
from app.dependencies import get_store
from app.errors import StoreUnavailable
from app.tables import distinct_column_values, filter_by_column

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Students"])

CLASS_COLUMN = "Class"


@router.get("/students")
def list_students(store: SheetStore = Depends(get_store)):
    try:
        return store.read(STUDENTS_RANGE)
    except StoreUnavailable:
        logger.exception("Could not read %s", STUDENTS_RANGE)
        return JSONResponse({"error": "Failed to fetch students"}, status_code=500)


@router.get("/students/class/{className}")
def students_by_class(className: str, store: SheetStore = Depends(get_store)):
    try:
        rows = store.read(STUDENTS_RANGE)
    except StoreUnavailable:
        logger.exception("Could not read %s", STUDENTS_RANGE)
        return JSONResponse({"error": "Failed to fetch students by class"}, status_code=500)
    return filter_by_column(rows, CLASS_COLUMN, className)


@router.get("/classes")
def list_classes(store: SheetStore = Depends(get_store)):
    try:
        rows = store.read(STUDENTS_RANGE)
    except StoreUnavailable:
        logger.exception("Could not read %s", STUDENTS_RANGE)
        return JSONResponse({"error": "Failed to fetch classes"}, status_code=500)
    # Sheet spelling of the first occurrence is what the UI shows
    return distinct_column_values(rows, CLASS_COLUMN, raw=True)
