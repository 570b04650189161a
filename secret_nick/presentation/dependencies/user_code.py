"""
Access Code Dependency for FastAPI.

Participants authenticate by presenting their access code as the `userCode`
query parameter. A missing parameter is rejected by FastAPI validation; an
empty one is rejected here with 400.
"""

from fastapi import HTTPException, Query, status

from secret_nick.domain.value_objects.user_code import UserCode


async def get_user_code(
    user_code: str = Query(..., alias="userCode"),
) -> UserCode:
    try:
        return UserCode(user_code)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=[{"field": "userCode", "message": str(e)}],
        ) from e
