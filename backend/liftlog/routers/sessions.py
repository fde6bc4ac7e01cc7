from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import ValidationError
from sqlalchemy.orm import Session
from liftlog.aggregation import group_by_day, latest_by_exercise
from liftlog.codec import compact_for, fields_from_form, form_from_record
from liftlog.db import get_db
from liftlog.deps.auth import get_current_subject
from liftlog.deps.context import get_today
from liftlog.export import export_filename, sessions_to_csv
from liftlog.repositories.session_repo import SessionRepository
from liftlog.schemas.session import (
    CompactPreview,
    SessionCreate,
    SessionDay,
    SessionFields,
    SessionForm,
    SessionPage,
    SessionRead,
    SessionUpdate,
)

router = APIRouter(prefix="/sessions", tags=["sessions"], dependencies=[Depends(get_current_subject)])

def _invalid(e: ValidationError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail=[err["msg"] for err in e.errors()],
    )

@router.post("", response_model=SessionRead, status_code=status.HTTP_201_CREATED)
def create_session(payload: SessionCreate, db: Session = Depends(get_db)):
    return SessionRepository(db).create(payload)

@router.get("", response_model=SessionPage)
def list_sessions(
    db: Session = Depends(get_db),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
):
    page = SessionRepository(db).list_recent(limit=limit, offset=offset)
    return SessionPage(
        items=[SessionRead.model_validate(s) for s in page.items],
        total=page.total,
        limit=page.limit,
        offset=page.offset,
    )

@router.get("/by-day", response_model=list[SessionDay])
def list_sessions_by_day(
    db: Session = Depends(get_db),
    limit: int = Query(100, ge=1, le=500),
):
    page = SessionRepository(db).list_recent(limit=limit)
    return [
        SessionDay(day=day, sessions=[SessionRead.model_validate(s) for s in items])
        for day, items in group_by_day(page.items)
    ]

@router.get("/export.csv")
def export_sessions(db: Session = Depends(get_db), today: date = Depends(get_today)):
    body = sessions_to_csv(SessionRepository(db).list_all())
    return Response(
        content=body,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(today)}"'},
    )

@router.get("/latest", response_model=dict[str, SessionRead])
def latest_sessions(db: Session = Depends(get_db)):
    # Recency per exercise for the workout picker
    latest = latest_by_exercise(SessionRepository(db).list_all())
    return {slug: SessionRead.model_validate(s) for slug, s in latest.items()}

@router.get("/latest/{slug}", response_model=SessionRead)
def latest_session(slug: str, db: Session = Depends(get_db)):
    sess = SessionRepository(db).fetch_latest(slug)
    if not sess:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No sessions for this workout")
    return sess

@router.post("/preview", response_model=CompactPreview)
def preview_compact(form: SessionForm):
    # Live preview while editing; nothing is validated or stored
    return CompactPreview(compact=compact_for(fields_from_form(form)))

@router.get("/{session_id}", response_model=SessionRead)
def get_session(session_id: str, db: Session = Depends(get_db)):
    sess = SessionRepository(db).get(session_id)
    if not sess:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return sess

@router.get("/{session_id}/form", response_model=SessionForm)
def get_session_form(session_id: str, db: Session = Depends(get_db)):
    sess = SessionRepository(db).get(session_id)
    if not sess:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return SessionForm(**form_from_record(sess))

@router.put("/{session_id}/form", response_model=SessionRead)
def save_session_form(session_id: str, form: SessionForm, db: Session = Depends(get_db)):
    repo = SessionRepository(db)
    if not repo.get(session_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    try:
        fields = SessionFields.model_validate(fields_from_form(form))
    except ValidationError as e:
        raise _invalid(e)
    return repo.update(session_id, fields)

@router.patch("/{session_id}", response_model=SessionRead)
def update_session(session_id: str, patch: SessionUpdate, db: Session = Depends(get_db)):
    repo = SessionRepository(db)
    sess = repo.get(session_id)
    if not sess:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")

    merged = {field: getattr(sess, field) for field in SessionFields.model_fields}
    merged.update(patch.model_dump(exclude_unset=True))
    try:
        fields = SessionFields.model_validate(merged)
    except ValidationError as e:
        raise _invalid(e)
    return repo.update(session_id, fields)

@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(session_id: str, db: Session = Depends(get_db)):
    if not SessionRepository(db).delete(session_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
