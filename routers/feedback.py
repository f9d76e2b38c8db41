# routers/feedback.py

from fastapi import APIRouter, Depends

from dependencies.auth import get_current_admin
from dependencies.services import get_feedback_inbox
from models.feedback import Feedback, FeedbackGroups, FeedbackResponse, FeedbackStatusUpdate
from services.feedback import FeedbackInbox


router = APIRouter(
    prefix="/feedback",
    tags=["Feedback"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("", response_model=FeedbackGroups, summary="Feedback grouped by status")
def list_feedback(inbox: FeedbackInbox = Depends(get_feedback_inbox)):
    return inbox.list_grouped()


@router.patch("/{feedback_id}", response_model=Feedback, summary="Mark feedback reviewed / archived")
def update_feedback_status(
    feedback_id: str,
    payload: FeedbackStatusUpdate,
    inbox: FeedbackInbox = Depends(get_feedback_inbox),
):
    return inbox.update_status(feedback_id, payload.status)


@router.delete("/{feedback_id}", summary="Delete feedback permanently")
def delete_feedback(feedback_id: str, inbox: FeedbackInbox = Depends(get_feedback_inbox)):
    inbox.delete(feedback_id)
    return {"status": "deleted", "id": feedback_id}


# -----------------------------------------------------
# Email reply to the person who left the feedback
# -----------------------------------------------------
@router.post("/{feedback_id}/respond", summary="Email a response")
def respond_to_feedback(
    feedback_id: str,
    payload: FeedbackResponse,
    inbox: FeedbackInbox = Depends(get_feedback_inbox),
):
    sent = inbox.respond(feedback_id, payload.subject, payload.content)
    return {"status": "sent" if sent else "skipped", "id": feedback_id}
