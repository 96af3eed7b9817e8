from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from medibloc.db.session import get_db
from medibloc.models.user import User


def get_current_user(
    x_user_email: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> User:
    """
    DEV AUTH: pass X-User-Email header to simulate logged-in user.
    Example: X-User-Email: admin@medibloc.test
    """
    if not x_user_email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="missing X-User-Email header (dev auth)",
        )

    email = x_user_email.strip().lower()
    user = db.query(User).filter(User.email == email).one_or_none()
    if not user or not user.is_active:
        raise HTTPException(status_code=401, detail="invalid or inactive user")
    return user
