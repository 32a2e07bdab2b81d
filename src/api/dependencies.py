from fastapi import Depends
from sqlalchemy.orm import Session

from adapter.sql.connection import get_db_session
from adapter.sql.user_repository import SqlUserRepository
from port.user_repository import UserRepository


def get_user_repo(session: Session = Depends(get_db_session)) -> UserRepository:
    return SqlUserRepository(session)
