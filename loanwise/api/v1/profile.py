"""GET/PUT/DELETE /v1/profile/{user_id} - Profile snapshot endpoints"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from loanwise.api.v1.schemas import ProfileResponse, ProfileSchema
from loanwise.api.dependencies import ResolvedProfile, get_profile, get_request_id
from loanwise.infrastructure.database.session import get_db
from loanwise.infrastructure.database.repositories import ProfileRepository

router = APIRouter()


@router.get("/profile/{user_id}", response_model=ProfileResponse)
def read_profile(resolved: ResolvedProfile = Depends(get_profile)):
    """
    Retrieve a user's profile.

    Returns:
        The stored profile, or the sample profile with has_data=false
    """
    return ProfileResponse(
        user_id=resolved.user_id,
        has_data=resolved.has_data,
        profile=ProfileSchema.from_domain(resolved.profile),
    )


@router.put("/profile/{user_id}", response_model=ProfileResponse)
def replace_profile(
    user_id: str,
    request_body: ProfileSchema,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Replace a user's profile wholesale.

    Loans submitted without an emi get one computed from their outstanding
    balance, rate and tenure.
    """
    request_id = get_request_id(request)
    profile = request_body.to_domain()

    try:
        ProfileRepository(db).save(user_id, profile)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logging.error(f"Profile save failed: {e}", extra={"request_id": request_id, "user_id": user_id})
        raise HTTPException(status_code=500, detail="Failed to save profile")

    logging.info(
        "Profile saved",
        extra={"request_id": request_id, "user_id": user_id, "loan_count": len(profile.loans)},
    )
    return ProfileResponse(user_id=user_id, has_data=True, profile=ProfileSchema.from_domain(profile))


@router.delete("/profile/{user_id}", status_code=204)
def delete_profile(user_id: str, db: Session = Depends(get_db)):
    """Delete a user's stored profile and loans"""
    deleted = ProfileRepository(db).delete(user_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Profile not found")

    db.commit()
    return Response(status_code=204)
