from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel
from liftlog.deps.auth import get_current_subject
from liftlog.deps.context import get_preferences
from liftlog.preferences import Preferences, SessionDraft

router = APIRouter(prefix="/preferences", tags=["preferences"], dependencies=[Depends(get_current_subject)])

class LastExercise(BaseModel):
    slug: str | None = None

@router.get("/last-exercise", response_model=LastExercise)
def last_exercise(prefs: Preferences = Depends(get_preferences)):
    return LastExercise(slug=prefs.last_exercise)

@router.get("/drafts/{slug}", response_model=SessionDraft)
def get_draft(slug: str, prefs: Preferences = Depends(get_preferences)):
    draft = prefs.load_draft(slug)
    if draft is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No draft")
    return draft

@router.put("/drafts/{slug}", status_code=status.HTTP_204_NO_CONTENT)
def put_draft(slug: str, draft: SessionDraft, prefs: Preferences = Depends(get_preferences)):
    # an all-blank draft clears the stored one
    prefs.save_draft(slug, draft)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/drafts/{slug}", status_code=status.HTTP_204_NO_CONTENT)
def delete_draft(slug: str, prefs: Preferences = Depends(get_preferences)):
    prefs.clear_draft(slug)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
