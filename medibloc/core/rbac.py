from fastapi import Depends, HTTPException, status

from medibloc.core.security import get_current_user
from medibloc.models.user import User

STAFF = ("DOCTOR", "ADMIN")


def require_roles(*required: str):
    """
    Usage:
      Depends(require_roles("ADMIN"))
      Depends(require_roles("DOCTOR", "ADMIN"))  # any-of
    """
    required_set = set(required)

    def _dep(user: User = Depends(get_current_user)) -> User:
        if user.role not in required_set:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"forbidden, requires one of: {sorted(required_set)}",
            )
        return user

    return _dep
