"""Invitation routes.

GET shows the invitation (verifying the email on the way), POST sets the
password. Other methods are answered with 405 by the error handlers.
"""

from pathlib import Path

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Form, Query, Request, status
from fastapi.responses import RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from onboard.application.usecase.invitation import (
    FlowOutcome,
    SetPasswordRequest,
    SetPasswordUseCase,
    StatusClass,
    Success,
    ViewInvitationRequest,
    ViewInvitationUseCase,
)

router = APIRouter(tags=["invitation"], route_class=DishkaRoute)

templates = Jinja2Templates(directory=Path(__file__).parent.parent / "templates")

STATUS_CODES: dict[StatusClass, int] = {
    StatusClass.OK: status.HTTP_200_OK,
    StatusClass.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    StatusClass.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def render_outcome(request: Request, outcome: FlowOutcome) -> Response:
    """Turn a flow outcome into an HTTP response.

    Args:
        request: Incoming request (needed by the template engine)
        outcome: Outcome of the invitation flow

    Returns:
        Rendered page, or a 303 redirect for a successful flow with a target
    """
    if isinstance(outcome, Success) and outcome.redirect_url:
        return RedirectResponse(
            outcome.redirect_url, status_code=status.HTTP_303_SEE_OTHER
        )

    return templates.TemplateResponse(
        request,
        "invitation.html",
        {
            "error": None if isinstance(outcome, Success) else outcome.title,
            "message": outcome.message,
            "token": outcome.token,
            "show_form": outcome.show_form,
            "success": isinstance(outcome, Success),
        },
        status_code=STATUS_CODES[outcome.status],
    )


@router.get("/invitation")
async def view_invitation(
    request: Request,
    use_case: FromDishka[ViewInvitationUseCase],
    token: str = Query(default=""),
) -> Response:
    """Open an invitation link.

    Args:
        request: Incoming request
        use_case: View invitation use case from DI
        token: Invitation token from the link

    Returns:
        Password form, or an error page
    """
    outcome = await use_case.execute(ViewInvitationRequest(token=token))
    return render_outcome(request, outcome)


@router.post("/invitation")
async def set_password(
    request: Request,
    use_case: FromDishka[SetPasswordUseCase],
    token: str = Form(default=""),
    password: str = Form(default=""),
) -> Response:
    """Set the password for an invited account.

    Args:
        request: Incoming request
        use_case: Set password use case from DI
        token: Invitation token echoed by the form
        password: Chosen password

    Returns:
        Success page or redirect, the form again, or an error page
    """
    outcome = await use_case.execute(
        SetPasswordRequest(token=token, password=password)
    )
    return render_outcome(request, outcome)
